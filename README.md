# linkedkit

Linked-list algorithms and small data structures built around linked lists.
Pure Python, no dependencies.

## Installation

```
pip install .
```

## Data structures

- `linkedkit.text_editor.TextEditor`: text with a cursor.
  - `add_text(text)` inserts at the cursor and leaves the cursor after it.
  - `delete_text(k)` deletes up to `k` characters left of the cursor and returns how many were deleted; a negative `k` raises `ValueError`.
  - `cursor_left(k)` and `cursor_right(k)` move the cursor as far as they can, up to `k` places, and return up to ten characters to the left of the cursor.
  - `str(editor)` gives the whole text.
- `linkedkit.all_one.AllOne`: counts string keys, all operations in constant time.
  - `inc(key)` adds one (new keys start at 1); `dec(key)` subtracts one and drops the key at zero; `dec` of an unknown key raises `KeyError`.
  - `get_max_key()` and `get_min_key()` return a key with the highest or lowest count, or `""` when empty.
  - Supports `len()` and `in`.
- `linkedkit.lru_cache.LRUCache(capacity)`: least-recently-used cache. `get(key)` returns the value or `-1` and marks the key as recently used; `put(key, value)` stores and evicts the least recently used key when full. A capacity of zero or less raises `ValueError`.
- `linkedkit.lfu_cache.LFUCache(capacity)`: least-frequently-used cache. `get` returns `-1` for a missing key; `put` evicts the key with the fewest uses, ties going to the least recently used. With a capacity of zero or less it stores nothing.
- `linkedkit.doubly_linked_list.DoublyLinkedList(values=())`: a doubly linked list supporting iteration, `reversed()`, `len()` and `str()` (values joined with `" <-> "`), plus `is_empty`, `insert_at_start`, `insert_at_end`, `insert_before(value, target)` (raises `ValueError` if `target` is absent), `delete_at_start`, `remove_duplicates`, `swap_adjacent(value)` (returns `False` if nothing was swapped), `delete_all(value)`, `middle()` (the second of two middles; raises `IndexError` when empty) and `is_palindrome()`.

## Nodes (`linkedkit.nodes`)

- `ListNode(val, next)` and `DListNode(val, prev, next)`; iterating over a node yields the values from it to the end of the list.
- `build_list(values)` / `to_list(head)` for singly linked lists.
- `build_dlist(values)`, `dlist_values(head)` and `dlist_values_backward(head)` (walks `prev` links from the tail) for doubly linked lists.

## Algorithms

All of these relink existing nodes rather than copying values.

- `linkedkit.sorting`: `insertion_sort_list(head)` and `quick_sort_list(head)` (head as pivot).
- `linkedkit.rearrange`: `partition(head, x)`, `reorder_list(head)` (in place, returns `None`), `swap_pairs(head)`, `odd_even_list(head)` and `sort_by_actual_values(head)` for a list sorted by absolute value.
- `linkedkit.segments`: `rotate_right(head, k)`, `split_list_to_parts(head, k)` (returns a list of `k` heads, `None` for empty parts) and `reverse_k_group(head, k)`. Negative rotations and non-positive part or group sizes raise `ValueError`.
- `linkedkit.dlist_sort`: `merge_two_sorted_dlists(a, b)` (stable) and `merge_sort_dlist(head)`, keeping `prev` links consistent.

## Examples

```python
from linkedkit.nodes import build_list, to_list
from linkedkit.segments import rotate_right, reverse_k_group

head = build_list([1, 2, 3, 4, 5])
print(to_list(rotate_right(head, 2)))          # [4, 5, 1, 2, 3]

head = build_list([1, 2, 3, 4, 5])
print(to_list(reverse_k_group(head, 3)))       # [3, 2, 1, 4, 5]
```

```python
from linkedkit.lru_cache import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)      # 1
cache.put(3, 3)   # evicts key 2
cache.get(2)      # -1
```

```python
from linkedkit.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3, 2, 1])
items.is_palindrome()   # True
items.middle()          # 3
print(items)            # 1 <-> 2 <-> 3 <-> 2 <-> 1
```

## What it does not do

linkedkit is a library only: it has no command-line program, and nothing is persisted; all structures live in memory.

## Running the tests

```
pip install .[test]
pytest
```