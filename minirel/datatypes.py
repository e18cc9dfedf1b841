"""Attribute types, comparison operators and join methods."""

from __future__ import annotations

from enum import IntEnum


class Datatype(IntEnum):
    """Type of a relation attribute."""

    STRING = 0
    INTEGER = 1
    FLOAT = 2


class Operator(IntEnum):
    """Comparison operator used in selections and joins."""

    LT = 0
    LTE = 1
    EQ = 2
    GTE = 3
    GT = 4
    NE = 5


class JoinType(IntEnum):
    """Algorithm used to evaluate a join."""

    NL_JOIN = 0
    SM_JOIN = 1
    HASH_JOIN = 2


_JOIN_ARGS = {
    "SM": JoinType.SM_JOIN,
    "HJ": JoinType.HASH_JOIN,
}

_JOIN_BANNERS = {
    JoinType.NL_JOIN: "Nested Loops Join Method",
    JoinType.HASH_JOIN: "Hash Join Method",
    JoinType.SM_JOIN: "Sort Merge Join Method",
}


def join_method_from_arg(arg: str | None) -> JoinType:
    """Pick the join method named on the command line.

    "SM" selects sort-merge, "HJ" selects hash join; anything else,
    including no argument at all, selects nested loops.
    """
    if arg is None:
        return JoinType.NL_JOIN
    return _JOIN_ARGS.get(arg, JoinType.NL_JOIN)


def join_method_banner(method: JoinType) -> str:
    """Return the description shown at start-up for a join method."""
    return _JOIN_BANNERS[JoinType(method)]