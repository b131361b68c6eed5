# labstructs

A small collection of classic abstract data types. Each container supports
ordinary Python iteration and also offers a cursor-style iterator.

| Module | Class / function | What it is |
| --- | --- | --- |
| `labstructs.indexed_list` | `IndexedList` | Positional list whose nodes keep the index they were given |
| `labstructs.sparse_matrix` | `SparseMatrix` | Fixed-size matrix that stores only non-zero cells |
| `labstructs.heap` | `Heap` | Binary heap ordered by a caller-supplied relation |
| `labstructs.merge` | `merge_sorted` | k-way merge of sorted sequences using `Heap` |
| `labstructs.ordered_multidict` | `OrderedMultiDict` | Key → list of values, kept in a binary search tree ordered by a relation |

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

### IndexedList

```python
from labstructs.indexed_list import IndexedList

lst = IndexedList()
lst.append(1)
lst.insert(0, 2)    # values now 2, 1
lst.get(1)          # 1
lst.set(1, 3)       # returns the old value, 1
lst.find(3)         # 1 (stored index of the first node holding 3, or -1)
lst.pop(0)          # 2
len(lst)            # 1
```

Every node carries a stored index. `append` gives a node the index after the
last one and `insert` shifts the indices of the nodes that follow, but `pop`
leaves the other nodes' indices as they are; `get`, `set` and `pop` work by
these stored indices. Invalid positions raise `IndexError`.

`remove_all(other)` removes every value that also occurs in another
`IndexedList` and returns how many were removed.

### SparseMatrix

```python
from labstructs.sparse_matrix import SparseMatrix

m = SparseMatrix(4, 4)
m.rows(), m.cols()  # (4, 4)
m.set(1, 1, 5)      # returns the previous value, 0
m.set(1, 1, 6)      # returns 5
m.get(1, 2)         # 0
m.set(1, 2, 5)
list(m)             # [6, 5] – non-zero values, column by column
```

A matrix needs at least one row and one column, otherwise `ValueError` is
raised. Positions outside the matrix raise `IndexError`. Setting a cell to
`0` clears it and returns `0`.

### Heap and merge_sorted

```python
from labstructs.heap import Heap
from labstructs.merge import merge_sorted

h = Heap(lambda a, b: a <= b)
for x in (3, 1, 2):
    h.add(x)
h.first()           # 1
h.remove()          # 1
len(h)              # 2

merge_sorted([[1, 4, 7], [2, 5], []], lambda a, b: a <= b)
# [1, 2, 4, 5, 7]
```

`relation(a, b)` returns True when `a` may sit above `b`. On an empty heap,
`first()` and `remove()` return `None`.

### OrderedMultiDict

```python
from labstructs.ordered_multidict import OrderedMultiDict

d = OrderedMultiDict(lambda a, b: a <= b)
d.add(5, 5)
d.add(2, 2)
d.add(2, 3)
[key for key, values in d]   # [2, 5]
d.search(2)                  # [2, 3] (a copy; [] for an absent key)
len(d)                       # 3 – number of (key, value) pairs
d.remove(2, 3)               # True
d.remove(7, 1)               # False
```

`add_missing(other)` adds every pair of another `OrderedMultiDict` that is not
already present and returns how many pairs were added.

## Cursor iterators

Every container except `Heap` also offers `iterator()`, returning a cursor
with `first()`, `valid()`, `element()` and `advance()`. For `IndexedList`
and `SparseMatrix`, calling `element()` or `advance()` on an exhausted
cursor raises `ValueError`; for `OrderedMultiDict` the same holds, and
`element()` returns a `(key, values)` pair.

## What it does not do

The package is a library only: it has no command-line interface, and its
containers live in memory without any saving to or loading from files.