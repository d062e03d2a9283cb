"""Generates TypeScript type definitions from JSON data.

This module provides:
- generate: Infer TypeScript interfaces for a parsed JSON value
- convert_json_to_typescript: The same for a JSON file, written to a .ts file
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence

from quicktypegen.common import process_template, type_name
from quicktypegen.constants import DEFAULT_ROOT_NAME
from quicktypegen.errors import InferenceError, InvalidInputError
from quicktypegen.shape_inference import ArrayOf, DeclaredType, NamedReference, Primitive, TypeExpression, infer_types

# Configure module logger
logger = logging.getLogger(__name__)

TOOL_NAME = 'quicktypegen'


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """Formats a moment as an ISO-8601 UTC timestamp with millisecond precision."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


def render_type(type_expression: TypeExpression) -> str:
    """Renders a type expression as TypeScript."""
    if isinstance(type_expression, Primitive):
        return type_expression.keyword
    if isinstance(type_expression, ArrayOf):
        return render_type(type_expression.item) + '[]'
    if isinstance(type_expression, NamedReference):
        return type_expression.name
    raise TypeError(f"Unsupported type expression: {type_expression!r}")


def render_declaration(declared_type: DeclaredType) -> str:
    """Renders a declared type as a TypeScript interface."""
    fields = [{'name': f.name, 'type': render_type(f.type)} for f in declared_type.fields]
    return process_template("jsontots/interface.ts.jinja", name=declared_type.name, fields=fields)


def render(declarations: Sequence[DeclaredType], root_name: str, root_type: TypeExpression,
           timestamp: Optional[datetime] = None) -> str:
    """Renders declarations and the root alias below a generated-file header.

    Args:
        declarations: Declared types in discovery order
        root_name: Name of the exported root alias
        root_type: Type expression the root alias is bound to
        timestamp: Generation time shown in the header (defaults to now)

    Returns:
        The TypeScript source text
    """
    header = process_template("jsontots/header.ts.jinja", tool_name=TOOL_NAME, timestamp=iso_timestamp(timestamp))
    blocks: List[str] = [render_declaration(declared_type) for declared_type in declarations]
    blocks.append(process_template("jsontots/alias.ts.jinja", root_name=root_name, root_type=render_type(root_type)))
    return header + '\n\n' + '\n\n'.join(blocks)


def generate(json_value: Any, root_name: str = DEFAULT_ROOT_NAME, detect_dates: bool = False,
             timestamp: Optional[datetime] = None) -> str:
    """Generates TypeScript type definitions for a JSON value.

    Args:
        json_value: Parsed JSON value (object, array or primitive)
        root_name: Name for the root type
        detect_dates: Map ISO-8601 date-time strings to 'Date'
        timestamp: Generation time shown in the header (defaults to now)

    Returns:
        The TypeScript source text

    Raises:
        InvalidInputError: If json_value is None
        InferenceError: If inference or rendering fails unexpectedly
    """
    if json_value is None:
        raise InvalidInputError("No data provided for type generation")

    try:
        declarations, root_type = infer_types(json_value, root_name, detect_dates=detect_dates)
        logger.debug("Inferred %d declarations for %s", len(declarations), root_name)
        return render(declarations, root_name, root_type, timestamp)
    except Exception as e:
        logger.error("Type generation failed: %s", e)
        raise InferenceError(e, context=root_name) from e


convert_json_value_to_typescript = generate


def convert_json_to_typescript(
    input_file: str,
    ts_file: str,
    root_name: Optional[str] = None,
    detect_dates: bool = False
) -> None:
    """Generates TypeScript type definitions from a JSON file.

    Args:
        input_file: Path of the JSON document to analyze
        ts_file: Output path for the TypeScript definitions
        root_name: Name for the root type (defaults to the input file name)
        detect_dates: Map ISO-8601 date-time strings to 'Date'
    """
    with open(input_file, 'r', encoding='utf-8') as f:
        content = f.read().strip()
    if not content:
        raise InvalidInputError("Input file is empty", context=input_file)

    try:
        json_value = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Input is not valid JSON: {e}", context=input_file, cause=e) from e

    if not root_name:
        root_name = type_name(os.path.splitext(os.path.basename(input_file))[0])

    output = generate(json_value, root_name, detect_dates=detect_dates)

    # Ensure output directory exists
    output_dir = os.path.dirname(ts_file)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    with open(ts_file, 'w', encoding='utf-8') as f:
        f.write(output)
