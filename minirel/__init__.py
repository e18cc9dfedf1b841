"""Building blocks of a small relational engine: pages, sorting, partitioning, printing and query parse trees."""

__version__ = "0.1.0"

__all__ = [
    "datatypes",
    "echo",
    "formats",
    "nodes",
    "page",
    "partition",
    "printing",
    "scanner",
    "sort",
    "testdata",
]