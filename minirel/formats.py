"""Conversion of parse-tree pieces into the argument lists of commands."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from .datatypes import Datatype
from .nodes import INT_FORMAT, REAL_FORMAT, AttrType, AttrVal, QualAttr, Value

MAX_ATTRS = 40
MAX_STRING_LEN = 255
_INT_SIZE = 4
_FLOAT_SIZE = 4


class ErrorCode(IntEnum):
    """Errors found while preparing a command's arguments."""

    OK = 0
    INCOMPATIBLE = -1
    TOO_MANY_ATTRS = -2
    NO_LENGTH = -3
    INV_INT_SIZE = -4
    INV_FLOAT_SIZE = -5
    INV_FORMAT_STRING = -6
    INV_STR_LEN = -7
    DUPLICATE_ATTR = -8
    TOO_LONG = -9
    STRING_TOO_LONG = -10


_MESSAGES = {
    ErrorCode.OK: "no error",
    ErrorCode.INCOMPATIBLE: "attributes must be from selected relation(s)",
    ErrorCode.TOO_MANY_ATTRS: "too many attributes",
    ErrorCode.NO_LENGTH: "length must be specified for STRING attribute",
    ErrorCode.INV_INT_SIZE: f"invalid size for INTEGER attribute (should be {_INT_SIZE})",
    ErrorCode.INV_FLOAT_SIZE: f"invalid size for FLOAT attribute (should be {_FLOAT_SIZE})",
    ErrorCode.INV_FORMAT_STRING: "invalid format string",
    ErrorCode.INV_STR_LEN: "invalid length for string attribute",
    ErrorCode.DUPLICATE_ATTR: "duplicated attribute name",
    ErrorCode.TOO_LONG: "relation name or attribute name too long",
    ErrorCode.STRING_TOO_LONG: "string attribute too long",
}


def error_message(code: int) -> str:
    """Return the message describing an error code."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return f"unrecognized errval: {int(code)}"


class InterpError(Exception):
    """A command's arguments could not be prepared."""

    def __init__(self, code: ErrorCode) -> None:
        self.code = ErrorCode(code)
        super().__init__(error_message(self.code))


def parse_format(fmt: int) -> tuple[Datatype, int]:
    """Decode an attribute type code into (type, length)."""
    if fmt == INT_FORMAT:
        return Datatype.INTEGER, _INT_SIZE
    if fmt == REAL_FORMAT:
        return Datatype.FLOAT, _FLOAT_SIZE
    if 1 <= fmt <= 255:
        return Datatype.STRING, fmt
    raise InterpError(ErrorCode.INV_FORMAT_STRING)


def _check_count(items: Sequence[object]) -> None:
    if len(items) >= MAX_ATTRS:
        raise InterpError(ErrorCode.TOO_MANY_ATTRS)


def make_attr_names(
    attrs: Sequence[QualAttr], relname: str | None
) -> tuple[list[str], str | None]:
    """Return the attribute names and the one relation they all belong to.

    With ``relname`` None the first attribute's relation is used.
    """
    names = []
    for attr in attrs[:MAX_ATTRS]:
        if relname is None:
            relname = attr.relname
        elif relname != attr.relname:
            raise InterpError(ErrorCode.INCOMPATIBLE)
        names.append(attr.attrname)
    _check_count(attrs)
    return names, relname


def make_qual_attrs(
    attrs: Sequence[QualAttr], relname1: str, relname2: str
) -> list[tuple[str, str]]:
    """Return (relation, attribute) pairs, each from one of two relations."""
    pairs = []
    for attr in attrs[:MAX_ATTRS]:
        if attr.relname != relname1 and attr.relname != relname2:
            raise InterpError(ErrorCode.INCOMPATIBLE)
        pairs.append((attr.relname, attr.attrname))
    _check_count(attrs)
    return pairs


def make_attr_descrs(attrs: Sequence[AttrType]) -> list[tuple[str, Datatype, int]]:
    """Return (name, type, length) for every attribute of a create."""
    descrs = []
    for attr in attrs[:MAX_ATTRS]:
        datatype, length = parse_format(attr.type)
        descrs.append((attr.attrname, datatype, length))
    _check_count(attrs)
    return descrs


def value_text(value: Value) -> str:
    """Render a literal the way it is handed to the query layer."""
    if value.type == Datatype.INTEGER:
        return f"{int(value.value):d}"
    if value.type == Datatype.FLOAT:
        return f"{float(value.value):f}"
    return str(value.value)


def make_insert_attrs(
    attrs: Sequence[AttrVal],
) -> list[tuple[str, Datatype, int, str]]:
    """Return (name, type, length, text) for every attribute of an insert."""
    result = []
    for attr in attrs[:MAX_ATTRS]:
        if attr.value is None:
            raise ValueError(f"attribute {attr.attrname} has no value")
        value = attr.value
        if value.type == Datatype.STRING and value.length > MAX_STRING_LEN:
            raise InterpError(ErrorCode.STRING_TOO_LONG)
        result.append((attr.attrname, value.type, value.length, value_text(value)))
    _check_count(attrs)
    return result