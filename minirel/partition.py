"""Splitting a set of records into hash partitions."""

from __future__ import annotations

from collections.abc import Callable, Iterable


def partition(
    records: Iterable[bytes],
    count: int,
    hashfcn: Callable[[bytes, int], int],
) -> list[list[bytes]]:
    """Split records into ``count`` partitions chosen by ``hashfcn``.

    ``hashfcn(record, count)`` must return a partition number in the
    range 0 to count-1. Records keep their input order within a partition.
    """
    if count < 1:
        raise ValueError("number of partitions must be at least 1")
    parts: list[list[bytes]] = [[] for _ in range(count)]
    for record in records:
        index = hashfcn(record, count)
        if not 0 <= index < count:
            raise ValueError(
                f"hash function returned {index}, outside 0..{count - 1}"
            )
        parts[index].append(bytes(record))
    return parts