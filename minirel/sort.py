"""External-style sort of fixed-layout records by one attribute."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import cmp_to_key

from .datatypes import Datatype

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


class SortError(ValueError):
    """The sort parameters are unusable."""


def _sign(value: float) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def compare_fields(a: bytes, b: bytes, datatype: Datatype) -> int:
    """Compare two encoded attribute values, returning -1, 0 or 1.

    Strings are compared byte-wise over the shorter of the two lengths.
    """
    datatype = Datatype(datatype)
    if datatype == Datatype.INTEGER:
        return _sign(_INT.unpack_from(a)[0] - _INT.unpack_from(b)[0])
    if datatype == Datatype.FLOAT:
        return _sign(_FLOAT.unpack_from(a)[0] - _FLOAT.unpack_from(b)[0])
    n = min(len(a), len(b))
    left, right = bytes(a[:n]), bytes(b[:n])
    return (left > right) - (left < right)


@dataclass
class _Run:
    """One sorted sub-run and its scan state."""

    records: list[bytes]
    scan_pos: int = 0
    current: int | None = None  # index of the record held, None at end
    valid: bool = False
    mark_scan: int = 0
    mark_current: int | None = None

    def scan_next(self) -> None:
        if self.scan_pos >= len(self.records):
            self.current = None
        else:
            self.current = self.scan_pos
            self.scan_pos += 1


@dataclass
class SortedFile:
    """Records sorted on one attribute, produced by merging sorted runs."""

    records: Iterable[bytes]
    offset: int
    length: int
    datatype: Datatype
    max_items: int
    _runs: list[_Run] = field(init=False, default_factory=list)

    def __init__(
        self,
        records: Iterable[bytes],
        offset: int,
        length: int,
        datatype: Datatype,
        max_items: int,
    ) -> None:
        if offset < 0 or length < 1:
            raise SortError("bad sort parameter: offset or length out of range")
        try:
            datatype = Datatype(datatype)
        except ValueError:
            raise SortError(f"bad sort parameter: unknown type {datatype!r}") from None
        if datatype in (Datatype.INTEGER, Datatype.FLOAT) and length != 4:
            raise SortError(
                f"bad sort parameter: {datatype.name} attribute must be 4 bytes"
            )
        if max_items < 2:
            raise SortError("insufficient memory: a run must hold at least 2 items")

        self.offset = offset
        self.length = length
        self.datatype = datatype
        self.max_items = max_items
        self._runs = [
            _Run(self._sorted(chunk)) for chunk in self._chunks(records)
        ]

    def _chunks(self, records: Iterable[bytes]) -> Iterator[list[bytes]]:
        chunk: list[bytes] = []
        for record in records:
            chunk.append(bytes(record))
            if len(chunk) == self.max_items:
                yield chunk
                chunk = []
        if chunk:
            yield chunk

    def _key(self, record: bytes) -> bytes:
        return record[self.offset:self.offset + self.length]

    def _compare(self, a: bytes, b: bytes) -> int:
        return compare_fields(self._key(a), self._key(b), self.datatype)

    def _sorted(self, chunk: list[bytes]) -> list[bytes]:
        return sorted(chunk, key=cmp_to_key(self._compare))

    def run_count(self) -> int:
        """Number of sorted sub-runs the input was split into."""
        return len(self._runs)

    def next(self) -> bytes | None:
        """Return the next record in sort order, or None when exhausted."""
        smallest: _Run | None = None
        for run in self._runs:
            if not run.valid:
                run.scan_next()
                run.valid = True
            if run.current is None:
                continue
            if smallest is None or self._compare(
                smallest.records[smallest.current], run.records[run.current]
            ) > 0:
                smallest = run
        if smallest is None:
            return None
        smallest.valid = False
        return smallest.records[smallest.current]

    def set_mark(self) -> None:
        """Remember the current position in the sorted sequence."""
        for run in self._runs:
            run.mark_scan = run.scan_pos
            run.mark_current = run.current

    def goto_mark(self) -> None:
        """Return to the marked position.

        The record most recently returned before the mark was set is
        delivered again by the next call to :meth:`next`.
        """
        for run in self._runs:
            run.scan_pos = run.mark_scan
            run.current = run.mark_current
            run.valid = True

    def __iter__(self) -> Iterator[bytes]:
        while (record := self.next()) is not None:
            yield record