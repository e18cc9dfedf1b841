"""Column layout and text rendering of relation contents."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .datatypes import Datatype

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


@dataclass(frozen=True)
class AttrDesc:
    """Catalog description of one attribute of a relation."""

    rel_name: str
    attr_name: str
    attr_offset: int
    attr_type: Datatype
    attr_len: int


def compute_widths(attrs: Sequence[AttrDesc]) -> list[int]:
    """Return the display width of each attribute's column."""
    widths = []
    for attr in attrs:
        name_len = len(attr.attr_name)
        if attr.attr_type in (Datatype.INTEGER, Datatype.FLOAT):
            widths.append(min(max(name_len, 5), 7))
        else:
            widths.append(min(max(name_len, attr.attr_len), 20))
    return widths


def format_header(attrs: Sequence[AttrDesc], widths: Sequence[int]) -> str:
    """Return the column-name line and the underline, joined by a newline."""
    names = "".join(
        f"{attr.attr_name[:width]:<{width}} " for attr, width in zip(attrs, widths)
    )
    rule = "".join("-" * width + "  " for width in widths)
    return f"{names}\n{rule}"


def _string_field(data: bytes, offset: int, width: int) -> str:
    raw = data[offset:offset + width]
    end = raw.find(b"\0")
    if end >= 0:
        raw = raw[:end]
    return raw.decode("latin-1")


def format_record(
    attrs: Sequence[AttrDesc], widths: Sequence[int], data: bytes
) -> str:
    """Render one record's attribute values as a line of columns."""
    fields = []
    for attr, width in zip(attrs, widths):
        if attr.attr_type == Datatype.INTEGER:
            (value,) = _INT.unpack_from(data, attr.attr_offset)
            fields.append(f"{value:<{width}d}  ")
        elif attr.attr_type == Datatype.FLOAT:
            (value,) = _FLOAT.unpack_from(data, attr.attr_offset)
            fields.append(f"{value:<{width}.2f}  ")
        else:
            text = _string_field(data, attr.attr_offset, width)
            fields.append(f"{text:<{width}}  ")
    return "".join(fields)


def format_relation(
    name: str, attrs: Sequence[AttrDesc], records: Iterable[bytes]
) -> str:
    """Render a whole relation: title, header, rows and a record count."""
    widths = compute_widths(attrs)
    parts = [f"Relation name: {name}\n\n", format_header(attrs, widths), "\n"]
    count = 0
    for record in records:
        parts.append(format_record(attrs, widths, record) + "\n")
        count += 1
    parts.append(f"\nNumber of records: {count}\n")
    return "".join(parts)