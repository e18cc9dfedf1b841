"""Slotted data page holding variable-length records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

PAGE_SIZE = 1024
SLOT_SIZE = 4
# One slot, four shorts and two ints of page header.
DP_FIXED = SLOT_SIZE + 4 * 2 + 2 * 4
DATA_AREA_SIZE = PAGE_SIZE - DP_FIXED


@dataclass(frozen=True)
class RID:
    """Record identifier: page number and slot number."""

    page_no: int
    slot_no: int


NULL_RID = RID(-1, -1)


class PageError(Exception):
    """Base class for page errors."""


class NoSpaceError(PageError):
    """The page does not have room for the record."""


class InvalidSlotError(PageError):
    """The record id does not name a record on the page."""


@dataclass
class _Slot:
    offset: int
    length: int  # -1 when the slot is free


class Page:
    """A data page whose records stay compacted after deletions.

    The slot array is never compacted in the middle; freed slots are
    reused by later insertions and trailing free slots are dropped.
    """

    def __init__(self, page_no: int) -> None:
        self.page_no = page_no
        self.next_page = -1
        self._data = bytearray(DATA_AREA_SIZE)
        self._slots: list[_Slot] = []
        self._free_ptr = 0
        self._free_space = DATA_AREA_SIZE

    def free_space(self) -> int:
        """Number of bytes still available on the page."""
        return self._free_space

    def insert_record(self, data: bytes) -> RID:
        """Store a record and return its id."""
        data = bytes(data)
        length = len(data)
        needed = length + SLOT_SIZE
        if needed > self._free_space:
            raise NoSpaceError(
                f"record of {length} bytes does not fit on page {self.page_no}"
            )
        index = next(
            (i for i, slot in enumerate(self._slots) if slot.length == -1), None
        )
        if index is None:
            self._slots.append(_Slot(0, 0))
            index = len(self._slots) - 1
            self._free_space -= needed
        else:
            self._free_space -= length

        slot = self._slots[index]
        slot.offset = self._free_ptr
        slot.length = length
        self._data[self._free_ptr:self._free_ptr + length] = data
        self._free_ptr += length
        return RID(self.page_no, index)

    def _live_slot(self, rid: RID) -> _Slot:
        if 0 <= rid.slot_no < len(self._slots):
            slot = self._slots[rid.slot_no]
            if slot.length > 0:
                return slot
        raise InvalidSlotError(f"invalid slot {rid.slot_no} on page {self.page_no}")

    def delete_record(self, rid: RID) -> None:
        """Remove a record, compacting the remaining records."""
        slot = self._live_slot(rid)
        offset, length = slot.offset, slot.length
        end = self._free_ptr
        self._data[offset:end - length] = self._data[offset + length:end]

        for other in self._slots:
            if other.length >= 0 and other.offset > offset:
                other.offset -= length

        self._free_ptr -= length
        self._free_space += length

        if rid.slot_no == len(self._slots) - 1:
            self._slots.pop()
            self._free_space += SLOT_SIZE
            while self._slots and self._slots[-1].length == -1:
                self._slots.pop()
                self._free_space += SLOT_SIZE
        else:
            slot.length = -1
            slot.offset = 0

    def get_record(self, rid: RID) -> bytes:
        """Return the bytes of the record with the given id."""
        slot = self._live_slot(rid)
        return bytes(self._data[slot.offset:slot.offset + slot.length])

    def _next_used(self, start: int) -> RID | None:
        for index in range(max(start, 0), len(self._slots)):
            if self._slots[index].length != -1:
                return RID(self.page_no, index)
        return None

    def first_record(self) -> RID | None:
        """Id of the first record on the page, or None if it is empty."""
        return self._next_used(0)

    def next_record(self, rid: RID) -> RID | None:
        """Id of the record after ``rid``, or None at the end of the page."""
        return self._next_used(rid.slot_no + 1)

    def records(self) -> Iterator[tuple[RID, bytes]]:
        """Yield every record on the page with its id, in slot order."""
        rid = self.first_record()
        while rid is not None:
            slot = self._slots[rid.slot_no]
            yield rid, bytes(self._data[slot.offset:slot.offset + slot.length])
            rid = self.next_record(rid)

    def dump(self) -> str:
        """Describe the page header and slot array."""
        lines = [
            f"curPage = {self.page_no}, nextPage = {self.next_page}",
            f"freePtr = {self._free_ptr},  freeSpace = {self._free_space}, "
            f"slotCnt = {-len(self._slots)}",
        ]
        lines.extend(
            f"slot[{-index}].offset = {slot.offset}, "
            f"slot[{-index}].length = {slot.length}"
            for index, slot in enumerate(self._slots)
        )
        return "\n".join(lines)