"""
Common utility functions for quicktypegen.
"""

# pylint: disable=line-too-long

import os
import re
import json
from datetime import datetime
from typing import Any, Optional
from urllib.parse import urlparse
import jinja2

from quicktypegen.constants import (DEFAULT_FILE_NAME, DEFAULT_ROOT_NAME, FILE_NAME_SUFFIX,
                                    ROOT_NAME_SUFFIX, UNKNOWN_TYPE_NAME)

DATE_TIME_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z?$')


def capitalize(string: str) -> str:
    """Upper-case the first character of a string and leave the rest untouched."""
    if not string:
        return string
    return string[0].upper() + string[1:]


def to_pascal_case(string: str) -> str:
    """
    Convert a string to PascalCase.

    The string is split on '-', '_' and whitespace runs. Each segment gets its
    first character upper-cased and the remainder lower-cased, and the segments
    are joined without separator.

    Args:
        string (str): The string to convert.

    Returns:
        str: The string in PascalCase, or 'Unknown' for empty input.
    """
    if not string:
        return UNKNOWN_TYPE_NAME
    return _join_words(re.split(r'[-_\s]+', string))


def _join_words(words) -> str:
    return ''.join(word[0].upper() + word[1:].lower() for word in words if word)


def type_name(string: str) -> str:
    """
    Convert a naming hint into a type identifier.

    Works like to_pascal_case but keeps the casing of each segment after its
    first character, so 'RootUser' stays 'RootUser'. Characters that cannot
    appear in an identifier act as separators.

    Args:
        string (str): The naming hint.

    Returns:
        str: A PascalCase identifier.
    """
    if not string:
        return UNKNOWN_TYPE_NAME
    val = ''.join(capitalize(word) for word in re.split(r'[\W_]+', string) if word)
    if not val:
        return UNKNOWN_TYPE_NAME
    if val[0].isdigit():
        val = '_' + val
    return val


def is_identifier(name: str) -> bool:
    """Checks whether a name can be used as a bare TypeScript property name."""
    return bool(name) and name.replace('$', '_').isidentifier()


def format_property_name(name: str) -> str:
    """
    Convert a JSON object key into an emitted field name.

    Keys starting with a digit get a '_' prefix. Keys that still are not
    identifiers are emitted as quoted string literals.
    """
    val = '_' + name if re.match(r'^\d', name) else name
    if is_identifier(val):
        return val
    return json.dumps(name, ensure_ascii=False)


def is_date_string(value: str) -> bool:
    """Checks whether a string looks like an ISO-8601 date-time."""
    if not DATE_TIME_PATTERN.match(value):
        return False
    try:
        datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return False
    return True


def is_valid_json_data(data: Any) -> bool:
    """
    Checks whether data can be handed to type generation.

    Args:
        data: A JSON text, or an already parsed object or array.

    Returns:
        bool: True if a string parses as JSON or an object/array serializes.
    """
    try:
        if isinstance(data, str):
            json.loads(data)
        elif isinstance(data, (dict, list)):
            json.dumps(data)
        else:
            return False
        return True
    except (TypeError, ValueError, RecursionError):
        return False


def _name_from_url(url: str, suffix: str) -> Optional[str]:
    """Derives a PascalCase name from the last path segment of a URL."""
    try:
        parsed_url = urlparse(url)
    except (TypeError, ValueError):
        return None
    if not parsed_url.scheme or not parsed_url.netloc:
        return None
    segments = [segment for segment in parsed_url.path.split('/') if segment]
    if not segments:
        return None
    return _join_words(re.split(r'[-_]', segments[-1])) + suffix


def suggest_root_name(url: str, suffix: str = ROOT_NAME_SUFFIX, default: str = DEFAULT_ROOT_NAME) -> str:
    """
    Suggests a root type name from the structure of a source URL.

    Args:
        url (str): The URL the JSON was retrieved from.
        suffix (str): Appended to the name derived from the path.
        default (str): Returned when the URL has no usable path segment.

    Returns:
        str: e.g. 'UserProfileResponse' for 'https://api.example.com/v1/user-profile'.
    """
    return _name_from_url(url, suffix) or default


def suggest_file_name(url: str, root_type_name: Optional[str] = None) -> str:
    """Suggests a file name (without extension) for the generated definitions."""
    return _name_from_url(url, FILE_NAME_SUFFIX) or root_type_name or DEFAULT_FILE_NAME


def process_template(file_path: str, **kvargs) -> str:
    """
    Process a file as a Jinja2 template with the given object as input.

    Args:
        file_path (str): The path to the file, relative to the package directory.
        **kvargs: The keyword arguments to pass to the template.

    Returns:
        str: The processed template as a string.
    """
    # Load the template environment
    file_dir = os.path.dirname(__file__)
    template_loader = jinja2.FileSystemLoader(searchpath=file_dir)
    template_env = jinja2.Environment(loader=template_loader)
    template_env.filters['type_name'] = type_name

    # Load the template from the file
    template = template_env.get_template(file_path)

    # Render the template with the object as input
    output = template.render(**kvargs)

    return output
