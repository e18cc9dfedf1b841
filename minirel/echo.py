"""Rendering parse trees back into command text."""

from __future__ import annotations

from collections.abc import Iterable

from .datatypes import Datatype, Operator
from .nodes import (
    INT_FORMAT,
    REAL_FORMAT,
    AttrType,
    AttrVal,
    Build,
    Condition,
    Create,
    Delete,
    Destroy,
    Drop,
    Help,
    Insert,
    Join,
    Load,
    PrimAttr,
    Print,
    QualAttr,
    Query,
    Rebuild,
    Select,
    Value,
)

_OPERATORS = {
    Operator.LT: " <",
    Operator.LTE: " <=",
    Operator.EQ: " =",
    Operator.GT: " >",
    Operator.GTE: " >=",
    Operator.NE: " <>",
}


def format_op(op: Operator | int) -> str:
    """Return the text of a comparison operator, preceded by a space.

    An unknown operator renders as an empty string.
    """
    try:
        return _OPERATORS[Operator(op)]
    except ValueError:
        return ""


def format_value(value: Value) -> str:
    """Return the text of a literal, preceded by a space."""
    if value.type == Datatype.INTEGER:
        return f" {int(value.value):d}"
    if value.type == Datatype.FLOAT:
        return f" {float(value.value):f}"
    if value.type == Datatype.STRING:
        return f' "{value.value}"'
    return ""


def _qualattr(attr: QualAttr) -> str:
    if attr.relname is None:
        return attr.attrname
    return f"{attr.relname}.{attr.attrname}"


def format_qual(qual: Condition | None) -> str:
    """Return the where clause for a qualification, or "" if there is none."""
    if qual is None:
        return ""
    if isinstance(qual, Select):
        return (
            f" where {_qualattr(qual.selattr)}"
            f"{format_op(qual.op)}{format_value(qual.value)}"
        )
    if isinstance(qual, Join):
        return (
            f" where {_qualattr(qual.joinattr1)}"
            f"{format_op(qual.op)} {_qualattr(qual.joinattr2)}"
        )
    raise TypeError(f"not a qualification: {qual!r}")


def _attrnames(attrs: Iterable[QualAttr]) -> str:
    return ", ".join(_qualattr(attr) for attr in attrs)


def _attrval(attr: AttrVal) -> str:
    if attr.value is None:
        raise ValueError(f"attribute {attr.attrname} has no value")
    return f"{attr.attrname} ={format_value(attr.value)}"


def _attrdescr(attr: AttrType) -> str:
    if attr.type == INT_FORMAT:
        kind = "int"
    elif attr.type == REAL_FORMAT:
        kind = "real"
    elif 1 <= attr.type <= 255:
        kind = f"char({attr.type})"
    else:
        kind = ""
    return f"{attr.attrname} = {kind}"


def _primattr(prim: PrimAttr | None) -> str:
    if prim is None:
        return ""
    return f" primary {prim.attrname} numbuckets = {prim.nbuckets}"


def echo_query(node: object) -> str:
    """Return the command a parse tree stands for, ending with ";"."""
    if isinstance(node, Query):
        into = f" into {node.relname}" if node.relname is not None else ""
        return (
            f"select{into} ({_attrnames(node.attrlist)})"
            f"{format_qual(node.qual)};"
        )
    if isinstance(node, Insert):
        vals = ", ".join(_attrval(attr) for attr in node.attrlist)
        return f"insert {node.relname} ({vals});"
    if isinstance(node, Delete):
        return f"delete {node.relname}{format_qual(node.qual)};"
    if isinstance(node, Create):
        descrs = ", ".join(_attrdescr(attr) for attr in node.attrlist)
        return f"create {node.relname} ({descrs}){_primattr(node.primattr)};"
    if isinstance(node, Destroy):
        return f"destroy {node.relname};"
    if isinstance(node, Build):
        return f"buildindex {node.relname}({node.attrname});"
    if isinstance(node, Rebuild):
        return (
            f"rebuildindex {node.relname}({node.attrname}) "
            f"numbuckets = {node.nbuckets};"
        )
    if isinstance(node, Drop):
        attr = f"({node.attrname})" if node.attrname is not None else ""
        return f"dropindex {node.relname}{attr};"
    if isinstance(node, Load):
        return f'load {node.relname}("{node.filename}");'
    if isinstance(node, Print):
        return f"print {node.relname};"
    if isinstance(node, Help):
        rel = f" {node.relname}" if node.relname is not None else ""
        return f"help{rel};"
    raise TypeError(f"cannot echo node {node!r}")