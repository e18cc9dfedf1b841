"""Parse-tree nodes for Minirel commands and alias resolution."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Union

from .datatypes import Datatype, Operator

_FLOAT = struct.Struct("<f")

# Encoded attribute types carried by AttrType.type; any value from 1 to
# 255 stands for a character string of that length.
INT_FORMAT = ord("i") - 128
REAL_FORMAT = ord("f") - 128


class AliasError(ValueError):
    """A relation qualifier is missing or does not name a relation in the query."""


@dataclass(frozen=True)
class Value:
    """A literal constant: integer, real or string."""

    type: Datatype
    value: Union[int, float, str]

    @classmethod
    def integer(cls, value: int) -> Value:
        return cls(Datatype.INTEGER, int(value))

    @classmethod
    def real(cls, value: float) -> Value:
        """A real literal, held at single precision."""
        (single,) = _FLOAT.unpack(_FLOAT.pack(float(value)))
        return cls(Datatype.FLOAT, single)

    @classmethod
    def string(cls, value: str) -> Value:
        return cls(Datatype.STRING, str(value))

    @property
    def length(self) -> int:
        """Length of a string literal; 0 for numbers."""
        if self.type == Datatype.STRING:
            return len(self.value)
        return 0


@dataclass(frozen=True)
class QualAttr:
    """An attribute, optionally qualified by a relation name or alias."""

    relname: str | None
    attrname: str


@dataclass(frozen=True)
class AttrVal:
    """An <attribute, value> pair of an insert."""

    attrname: str
    value: Value | None = None


@dataclass(frozen=True)
class AttrType:
    """An <attribute, type> pair of a create.

    ``type`` is INT_FORMAT, REAL_FORMAT or the length of a string.
    """

    attrname: str
    type: int


@dataclass(frozen=True)
class PrimAttr:
    """The primary attribute of a create and its number of buckets."""

    attrname: str
    nbuckets: int


@dataclass(frozen=True)
class Alias:
    """A relation named in a query, with an optional alias."""

    relname: str
    alias: str | None = None


@dataclass(frozen=True)
class Select:
    """Qualification of the form ``attr op value``."""

    selattr: QualAttr
    op: Operator
    value: Value


@dataclass(frozen=True)
class Join:
    """Qualification of the form ``attr1 op attr2``."""

    joinattr1: QualAttr
    op: Operator
    joinattr2: QualAttr


Condition = Union[Select, Join]


@dataclass(frozen=True)
class Query:
    relname: str | None
    attrlist: tuple[QualAttr, ...]
    qual: Condition | None = None


@dataclass(frozen=True)
class Insert:
    relname: str
    attrlist: tuple[AttrVal, ...]


@dataclass(frozen=True)
class Delete:
    relname: str
    qual: Condition | None = None


@dataclass(frozen=True)
class Create:
    relname: str
    attrlist: tuple[AttrType, ...]
    primattr: PrimAttr | None = None


@dataclass(frozen=True)
class Destroy:
    relname: str


@dataclass(frozen=True)
class Build:
    relname: str
    attrname: str
    nbuckets: int


@dataclass(frozen=True)
class Rebuild:
    relname: str
    attrname: str
    nbuckets: int


@dataclass(frozen=True)
class Drop:
    relname: str
    attrname: str | None = None


@dataclass(frozen=True)
class Load:
    relname: str
    filename: str


@dataclass(frozen=True)
class Print:
    relname: str


@dataclass(frozen=True)
class Help:
    relname: str | None = None


def merge_attr_value_list(
    attrs: Sequence[AttrVal], values: Sequence[Value]
) -> list[AttrVal]:
    """Pair each attribute with the value in the same position."""
    if len(values) < len(attrs):
        raise ValueError("Value list is shorter than attr list!")
    if len(values) > len(attrs):
        raise ValueError("Value list is longer than attr list!")
    return [replace(attr, value=value) for attr, value in zip(attrs, values)]


def find_match_in_alias(aliases: Sequence[Alias], name: str | None) -> str | None:
    """Return the relation that ``name`` refers to, or None if none matches.

    A relation name matches itself; an alias yields its relation name.
    """
    if name is None:
        return None
    for entry in aliases:
        if entry.relname == name:
            return name
        if entry.alias is not None and entry.alias == name:
            return entry.relname
    return None


def _resolve(aliases: Sequence[Alias], attr: QualAttr) -> QualAttr:
    if attr.relname is None:
        if len(aliases) > 1:
            raise AliasError(
                "must have relation qualifier before attributes "
                "if multi-table involve in the query"
            )
        return replace(attr, relname=aliases[0].relname)
    relname = find_match_in_alias(aliases, attr.relname)
    if relname is None:
        raise AliasError(f"relation qualifier {attr.relname} not found")
    return replace(attr, relname=relname)


def replace_alias_in_qualattr_list(
    aliases: Sequence[Alias], attrs: Sequence[QualAttr]
) -> list[QualAttr]:
    """Replace every qualifier in ``attrs`` by the relation name it stands for."""
    return [_resolve(aliases, attr) for attr in attrs]


def replace_alias_in_condition(
    aliases: Sequence[Alias], where: Condition | None
) -> Condition | None:
    """Replace the qualifiers in a where condition by relation names."""
    if where is None:
        return None
    if isinstance(where, Select):
        return replace(where, selattr=_resolve(aliases, where.selattr))
    left = _resolve(aliases, where.joinattr1)
    right = _resolve(aliases, where.joinattr2)
    return replace(where, joinattr1=left, joinattr2=right)