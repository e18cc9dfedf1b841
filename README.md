# minirel

`minirel` holds the building blocks of a small relational database engine:
in-memory data structures for storing and ordering records, and the parse
trees and helpers of its query language. It uses only the standard library
and needs Python 3.10 or later.

| Module | What it provides |
| --- | --- |
| `minirel.datatypes` | `Datatype`, `Operator`, `JoinType`, `join_method_from_arg`, `join_method_banner` |
| `minirel.page` | `Page`, `RID`, `PageError`, `NoSpaceError`, `InvalidSlotError` |
| `minirel.sort` | `SortedFile`, `compare_fields`, `SortError` |
| `minirel.partition` | `partition` |
| `minirel.printing` | `AttrDesc`, `compute_widths`, `format_header`, `format_record`, `format_relation` |
| `minirel.testdata` | `Soap`, `Star`, `soaps`, `stars`, `pack_soap`, `pack_star`, `write_test_data` |
| `minirel.nodes` | parse-tree node classes and alias resolution |
| `minirel.scanner` | `Keyword`, `classify_word`, `unquote`, `TokenTooLongError` |
| `minirel.formats` | `ErrorCode`, `InterpError`, `error_message`, `parse_format`, `make_*` helpers, `value_text` |
| `minirel.echo` | `echo_query`, `format_qual`, `format_op`, `format_value` |

## Pages

A `Page` is a 1024-byte slotted page. It holds variable-length records,
keeps them compacted after a delete, reuses freed slots and drops free
slots at the end of the slot array.

```python
from minirel.page import Page

page = Page(0)
first = page.insert_record(b"hello")
second = page.insert_record(b"world")

assert page.get_record(first) == b"hello"

page.delete_record(first)
for rid, data in page.records():
    print(rid, data)

print(page.free_space())
print(page.dump())
```

`first_record()` and `next_record(rid)` step through the record ids and
return `None` at the end. Inserting a record that does not fit raises
`NoSpaceError`; a record id that does not name a live record raises
`InvalidSlotError`. Both derive from `PageError`.

## Sorting

`SortedFile` splits its input into sorted runs of at most `max_items`
records and merges them, returning records in order of one attribute
(given by offset, length and `Datatype`).

```python
import struct

from minirel.datatypes import Datatype
from minirel.sort import SortedFile

records = [struct.pack("<i", n) for n in (5, 3, 9, 1, 7)]
sorted_file = SortedFile(records, 0, 4, Datatype.INTEGER, 2)

print(sorted_file.run_count())          # 3
print([struct.unpack("<i", r)[0] for r in sorted_file])
```

`next()` returns the next record or `None` when all are used up.
`set_mark()` remembers the current position and `goto_mark()` returns to
it, so that the record last returned before the mark is delivered again.
A negative offset, a length below 1, a numeric attribute that is not 4
bytes or `max_items` below 2 raise `SortError`. `compare_fields` compares
two encoded values and returns -1, 0 or 1.

## Partitioning

```python
from minirel.partition import partition

buckets = partition([b"a", b"bb", b"ccc"], 2, lambda record, count: len(record) % count)
# [[b"bb"], [b"a", b"ccc"]]
```

A hash value outside `0..count-1`, or a count below 1, raises `ValueError`.

## Printing relations

```python
from minirel.datatypes import Datatype
from minirel.printing import AttrDesc, format_relation
from minirel.testdata import pack_soap, soaps

attrs = [
    AttrDesc("soaps", "soapid", 0, Datatype.INTEGER, 4),
    AttrDesc("soaps", "sname", 4, Datatype.STRING, 28),
    AttrDesc("soaps", "network", 32, Datatype.STRING, 4),
    AttrDesc("soaps", "rating", 36, Datatype.FLOAT, 4),
]
print(format_relation("soaps", attrs, (pack_soap(s) for s in soaps())))
```

Numeric columns are 5 to 7 characters wide, string columns as wide as the
longer of name and attribute length, at most 20; the output ends with the
number of records.

## Sample data

`soaps()` and `stars()` return the nine `Soap` and twenty-nine `Star` rows;
`pack_soap` and `pack_star` encode each as a 40-byte tuple.
`write_test_data(directory)` writes `stars.data` and `soaps.data` there and
returns their paths.

## Query language pieces

`minirel.nodes` defines the parse trees of the commands (`Query`, `Insert`,
`Delete`, `Create`, `Destroy`, `Build`, `Rebuild`, `Drop`, `Load`, `Print`,
`Help`) and of their parts (`Value`, `QualAttr`, `AttrVal`, `AttrType`,
`PrimAttr`, `Alias`, `Select`, `Join`). Relation aliases are resolved with
`replace_alias_in_qualattr_list` and `replace_alias_in_condition`, which
raise `AliasError` for a missing or unknown qualifier.

```python
from minirel.datatypes import Operator
from minirel.echo import echo_query
from minirel.nodes import Alias, QualAttr, Query, Select, Value, replace_alias_in_qualattr_list

print(replace_alias_in_qualattr_list([Alias("soaps", "s")], [QualAttr("s", "sname")]))

query = Query(
    None,
    (QualAttr("soaps", "sname"),),
    Select(QualAttr("soaps", "network"), Operator.EQ, Value.string("NBC")),
)
print(echo_query(query))   # select (soaps.sname) where soaps.network = "NBC";
```

`minirel.scanner.classify_word` returns the `Keyword` a word spells (in any
case) or the word itself, and raises `TokenTooLongError` for words of 50
characters or more; `unquote` strips the quotes from a quoted string.
`minirel.formats` turns node lists into argument lists, decodes attribute
type codes with `parse_format` and raises `InterpError` carrying an
`ErrorCode`, whose text `error_message` gives.

`join_method_from_arg` maps `"SM"` to sort-merge and `"HJ"` to hash join,
anything else to nested loops; `join_method_banner` gives the description.

## What the package does not do

There is no command and no interactive shell. Nothing here turns query
text into parse trees beyond classifying single words, and nothing runs a
query: there is no catalog of relations, no heap file or buffer manager on
disk, and no select, join, insert, delete or load over stored relations.
Pages, sorted files and partitions live in memory only.

## Running the tests

Install the package with its `test` extra and run `pytest` from the
project directory.