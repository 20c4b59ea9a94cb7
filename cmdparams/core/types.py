"""Value kinds supported by the parameter registry
================================================

Every parameter stores one value of a fixed kind. A kind is described by a
:class:`TypeSpec` row in :data:`TYPE_SPECS`: its :class:`TypeTag` (the name
used in the XML descriptor and the help text), how its canonical string is
parsed and formatted, how a Python value is coerced into its storage type,
and which descriptor metadata it accepts.

Canonical string forms
----------------------
- boolean: ``true``/``false``; ``yes``/``no`` and integers (``> 0``) accepted
- integer: decimal, a leading integer prefix is accepted (``"1.5"`` -> 1)
- float: single precision (``numpy.float32``), shortest round-trip text
- double: Python ``float``, ``repr`` text
- string and string-backed kinds: identity
- vectors: comma-joined; one trailing empty token is dropped on input

Examples
--------
>>> TYPE_SPECS[TypeTag.INTEGER_VECTOR].parse("1,2,3,")
[1, 2, 3]
>>> TYPE_SPECS[TypeTag.BOOLEAN].format(True)
'true'
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

import numpy as np

from cmdparams.config.exceptions import ParamValueError

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

TRUE_WORDS = ("true", "yes")
FALSE_WORDS = ("false", "no")


class TypeTag(str, Enum):
    """Canonical type names, as used by the plugin descriptor."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    INTEGER_VECTOR = "integer-vector"
    FLOAT_VECTOR = "float-vector"
    DOUBLE_VECTOR = "double-vector"
    STRING_VECTOR = "string-vector"
    INTEGER_ENUMERATION = "integer-enumeration"
    FLOAT_ENUMERATION = "float-enumeration"
    DOUBLE_ENUMERATION = "double-enumeration"
    STRING_ENUMERATION = "string-enumeration"
    FILE = "file"
    DIRECTORY = "directory"
    IMAGE = "image"
    GEOMETRY = "geometry"
    POINT = "point"
    REGION = "region"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Scalar conversions
# ============================================================================


def parse_integer(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ParamValueError(text, TypeTag.INTEGER.value)
    try:
        return int(match.group(1))
    except ValueError:
        # longer than the interpreter's int digit limit
        raise ParamValueError(text, TypeTag.INTEGER.value) from None


def format_integer(value: Any) -> str:
    return str(int(value))


def parse_boolean(text: str) -> bool:
    """Parse a boolean the lenient way: words first, then ``int > 0``."""
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ParamValueError(text, TypeTag.BOOLEAN.value)
    try:
        return int(match.group(1)) > 0
    except ValueError:
        raise ParamValueError(text, TypeTag.BOOLEAN.value) from None


def format_boolean(value: Any) -> str:
    return "true" if value else "false"


def parse_double(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise ParamValueError(text, TypeTag.DOUBLE.value) from None
        return float(match.group(1))


def format_double(value: Any) -> str:
    return repr(float(value))


def parse_float(text: str) -> np.float32:
    try:
        return np.float32(parse_double(text))
    except ParamValueError:
        raise ParamValueError(text, TypeTag.FLOAT.value) from None


def format_float(value: Any) -> str:
    # numpy prints the shortest string that round-trips in single precision
    return str(np.float32(value))


def parse_string(text: str) -> str:
    return text


def format_string(value: Any) -> str:
    return str(value)


def format_number(value: Any) -> str:
    """Format a range bound the way the descriptor expects (``0``, ``0.01``)."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


# ============================================================================
# Vector conversions
# ============================================================================


def split_vector(text: str, delimiter: str = ",") -> list[str]:
    """Split a comma-joined list, dropping a single trailing empty token."""
    items = text.split(delimiter)
    if items and items[-1] == "":
        items.pop()
    return items


def _vector_parser(element_parse: Callable[[str], Any]) -> Callable[[str], list]:
    def parse(text: str) -> list:
        return [element_parse(item) for item in split_vector(text)]

    return parse


def _vector_formatter(element_format: Callable[[Any], str]) -> Callable[[Any], str]:
    def format_(values: Any) -> str:
        return ",".join(element_format(item) for item in values)

    return format_


def _vector_coercer(element_coerce: Callable[[Any], Any]) -> Callable[[Any], list]:
    def coerce(values: Any) -> list:
        if isinstance(values, str):
            raise TypeError("vector parameters need a sequence, not a string")
        return [element_coerce(item) for item in values]

    return coerce


# ============================================================================
# Type table
# ============================================================================


@dataclass(frozen=True)
class TypeSpec:
    """Everything the registry needs to know about one value kind.

    Attributes
    ----------
    tag : TypeTag
        Descriptor element name and help-text type name
    parse : callable
        Canonical string -> stored value
    format : callable
        Stored value -> canonical string
    coerce : callable
        Python value -> stored value, used for direct typed assignment
    default : callable
        Factory for the initial value
    attribs : frozenset[str]
        Descriptor attributes a proxy may set (e.g. ``fileExtensions``)
    tags : frozenset[str]
        Extra descriptor tags a proxy may set (e.g. ``enumeration``)
    ranged : bool
        True if minimum/maximum/step constraints may be declared
    """

    tag: TypeTag
    parse: Callable[[str], Any]
    format: Callable[[Any], str]
    coerce: Callable[[Any], Any]
    default: Callable[[], Any]
    attribs: frozenset[str] = field(default_factory=frozenset)
    tags: frozenset[str] = field(default_factory=frozenset)
    ranged: bool = False

    @property
    def is_boolean(self) -> bool:
        return self.tag is TypeTag.BOOLEAN

    def derive(self, tag: TypeTag, **changes: Any) -> "TypeSpec":
        """Create a kind sharing this kind's storage under a different tag."""
        values = {
            "parse": self.parse,
            "format": self.format,
            "coerce": self.coerce,
            "default": self.default,
        }
        values.update(changes)
        return TypeSpec(tag=tag, **values)


def _vector_of(tag: TypeTag, element: TypeSpec, **changes: Any) -> TypeSpec:
    return TypeSpec(
        tag=tag,
        parse=_vector_parser(element.parse),
        format=_vector_formatter(element.format),
        coerce=_vector_coercer(element.coerce),
        default=list,
        **changes,
    )


_BOOLEAN = TypeSpec(TypeTag.BOOLEAN, parse_boolean, format_boolean, bool, bool)
_INTEGER = TypeSpec(
    TypeTag.INTEGER, parse_integer, format_integer, int, int, ranged=True
)
_FLOAT = TypeSpec(
    TypeTag.FLOAT,
    parse_float,
    format_float,
    np.float32,
    lambda: np.float32(0.0),
    ranged=True,
)
_DOUBLE = TypeSpec(TypeTag.DOUBLE, parse_double, format_double, float, float, ranged=True)
_STRING = TypeSpec(TypeTag.STRING, parse_string, format_string, str, str)

_ENUMERATION = frozenset({"enumeration"})
_FILE_ATTRIBS = frozenset({"fileExtensions"})
_TYPED_FILE_ATTRIBS = frozenset({"type", "fileExtensions"})
_COORDINATE_ATTRIBS = frozenset({"multiple", "coordinateSystem"})

TYPE_SPECS: dict[TypeTag, TypeSpec] = {
    spec.tag: spec
    for spec in (
        _BOOLEAN,
        _INTEGER,
        _FLOAT,
        _DOUBLE,
        _STRING,
        _vector_of(TypeTag.INTEGER_VECTOR, _INTEGER),
        _vector_of(TypeTag.FLOAT_VECTOR, _FLOAT),
        _vector_of(TypeTag.DOUBLE_VECTOR, _DOUBLE),
        _vector_of(TypeTag.STRING_VECTOR, _STRING),
        _INTEGER.derive(TypeTag.INTEGER_ENUMERATION, tags=_ENUMERATION),
        _FLOAT.derive(TypeTag.FLOAT_ENUMERATION, tags=_ENUMERATION),
        _DOUBLE.derive(TypeTag.DOUBLE_ENUMERATION, tags=_ENUMERATION),
        _STRING.derive(TypeTag.STRING_ENUMERATION, tags=_ENUMERATION),
        _STRING.derive(TypeTag.FILE, attribs=_FILE_ATTRIBS),
        _STRING.derive(TypeTag.DIRECTORY),
        _STRING.derive(TypeTag.IMAGE, attribs=_TYPED_FILE_ATTRIBS),
        _STRING.derive(TypeTag.GEOMETRY, attribs=_TYPED_FILE_ATTRIBS),
        _vector_of(TypeTag.POINT, _STRING, attribs=_COORDINATE_ATTRIBS),
        _vector_of(TypeTag.REGION, _STRING, attribs=_COORDINATE_ATTRIBS),
    )
}


def get_type_spec(tag: TypeTag | str) -> TypeSpec:
    """Look up the :class:`TypeSpec` for a tag or its string name."""
    return TYPE_SPECS[TypeTag(tag)]
