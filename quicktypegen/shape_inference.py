"""Shape inference for a single JSON value.

Walks an untyped JSON tree and classifies every position into a type
expression. Objects are deduplicated by their key set: the first object with
a given set of keys becomes a named declaration and every later object with
the same keys refers to it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Set, Tuple

from quicktypegen.common import capitalize, format_property_name, is_date_string, type_name

# Configure module logger
logger = logging.getLogger(__name__)


class TypeExpression:
    """Base class for inferred types."""


@dataclass(frozen=True)
class Primitive(TypeExpression):
    """A primitive type keyword such as 'string' or 'any'."""
    keyword: str


@dataclass(frozen=True)
class ArrayOf(TypeExpression):
    """An array whose elements share one type."""
    item: TypeExpression


@dataclass(frozen=True)
class NamedReference(TypeExpression):
    """A reference to a declared type by name."""
    name: str


ANY = Primitive('any')
BOOLEAN = Primitive('boolean')
NUMBER = Primitive('number')
STRING = Primitive('string')
DATE = Primitive('Date')


@dataclass(frozen=True)
class Field:
    """A single field of a declared type."""
    name: str
    type: TypeExpression


@dataclass(frozen=True)
class DeclaredType:
    """A named record type created for one object shape."""
    name: str
    signature: str
    fields: Tuple[Field, ...]


def shape_signature(obj: Mapping) -> str:
    """Returns the sorted, comma-joined key set of an object."""
    return ','.join(sorted(str(key) for key in obj.keys()))


@dataclass
class Registry:
    """Bookkeeping for one inference run."""
    type_map: Dict[str, str] = field(default_factory=dict)
    processed_names: Set[str] = field(default_factory=set)
    declarations: List[DeclaredType] = field(default_factory=list)

    def lookup(self, signature: str) -> str | None:
        """Returns the type name already assigned to a signature, if any."""
        return self.type_map.get(signature)

    def reserve_name(self, candidate: str) -> str:
        """Claims a type name, adding a numeric suffix when it is taken."""
        name = candidate
        suffix = 2
        while name in self.processed_names:
            name = f"{candidate}{suffix}"
            suffix += 1
        if name != candidate:
            logger.debug("Type name %s already in use, using %s", candidate, name)
        self.processed_names.add(name)
        return name

    def register(self, declared_type: DeclaredType) -> None:
        """Records a finished declaration in discovery order."""
        self.declarations.append(declared_type)
        self.type_map.setdefault(declared_type.signature, declared_type.name)


class ShapeInferrer:
    """Infers type expressions and declarations from one JSON value."""

    def __init__(self, detect_dates: bool = False):
        """Initialize the shape inferrer.

        Args:
            detect_dates: Map ISO-8601 date-time strings to 'Date' instead of 'string'
        """
        self.detect_dates = detect_dates
        self.registry = Registry()

    @property
    def declarations(self) -> List[DeclaredType]:
        """Declared types in the order they were discovered."""
        return self.registry.declarations

    def infer(self, value: Any, suggested_name: str) -> TypeExpression:
        """Maps a JSON value to a type expression.

        Args:
            value: The JSON value to classify
            suggested_name: Naming hint for any object type created for the value

        Returns:
            The inferred type expression
        """
        if value is None:
            return ANY
        # bool is a subclass of int
        if isinstance(value, bool):
            return BOOLEAN
        if isinstance(value, (int, float)):
            return NUMBER
        if isinstance(value, str):
            return self._infer_string(value)
        if isinstance(value, (list, tuple)):
            if len(value) == 0:
                return ArrayOf(ANY)
            return ArrayOf(self.infer(value[0], suggested_name + 'Item'))
        if isinstance(value, Mapping):
            return self._infer_object(value, suggested_name)
        return ANY

    def _infer_string(self, value: str) -> TypeExpression:
        if is_date_string(value):
            logger.debug("Date-time candidate: %s", value)
            if self.detect_dates:
                return DATE
        return STRING

    def _infer_object(self, obj: Mapping, suggested_name: str) -> TypeExpression:
        signature = shape_signature(obj)
        existing = self.registry.lookup(signature)
        if existing is not None:
            return NamedReference(existing)

        name = self.registry.reserve_name(type_name(suggested_name))
        fields = []
        for key, value in obj.items():
            key = str(key)
            fields.append(Field(format_property_name(key), self.infer(value, name + capitalize(key))))

        self.registry.register(DeclaredType(name, signature, tuple(fields)))
        logger.debug("Declared %s for shape [%s]", name, signature)
        return NamedReference(name)


def infer_types(json_value: Any, type_name_hint: str, detect_dates: bool = False) -> Tuple[List[DeclaredType], TypeExpression]:
    """Infers declarations and the root type expression for a JSON value.

    Args:
        json_value: The parsed JSON value
        type_name_hint: Name for the root type
        detect_dates: Map date-time strings to 'Date'

    Returns:
        Tuple of (declarations in discovery order, root type expression)
    """
    inferrer = ShapeInferrer(detect_dates=detect_dates)
    root_type = inferrer.infer(json_value, type_name_hint)
    return inferrer.declarations, root_type
