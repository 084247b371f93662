# dsakit

Classic data structures and algorithms in plain Python, with no runtime
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

Every function takes an iterable and returns a new sorted list; the input is
left untouched.

- `heap_sort`, `bubble_sort`, `insertion_sort`, `merge_sort` (stable),
  `quick_sort` (last element as pivot), `shell_sort`.
- `selection_sort(values, descending=False)`: ascending, or descending when
  asked.
- `bucket_sort(values)`: floats in `[0, 1)`; anything else raises `ValueError`.
- `counting_sort(values, lower, upper)`: integers within `lower..upper`
  inclusive; a value outside the range, or `lower > upper`, raises `ValueError`.
- `radix_sort(values)`: non-negative integers; a negative value raises
  `ValueError`.
- `count_sort_chars(text)`: returns a new string with the characters in
  code-point order; characters above code 255 raise `ValueError`.

### `dsakit.arrays`

- `remove_duplicates(values)`: keeps the first occurrence of each value, in
  order.
- `union(first, second)`: distinct values of `first`, then the values of
  `second` not seen yet.
- `largest_rectangle_area(heights)`: largest rectangle under a histogram of
  unit-width bars (0 for an empty histogram).

### `dsakit.heap`

`MinHeap(capacity)` is a bounded binary min-heap:

- `insert_key(key)` raises `OverflowError` when the heap is full.
- `extract_min()` and `peek()` raise `IndexError` on an empty heap.
- `decrease_key(index, new_value)` raises `ValueError` if the new value is
  larger than the current key, `IndexError` for a bad index.
- `delete_key(index)` removes and returns the key at that position.
- `len(heap)` gives the number of keys.

### `dsakit.linkedlist`

- `SinglyLinkedList(values=())`: built from an iterable; iterable, with `len`.
- `DoublyLinkedList()`: `push` (front), `append` (back),
  `insert_after(index, value)`; iterate forwards or with `reversed()`.
- `XorLinkedList()`: `insert` at the front; each node keeps one XOR-combined
  link to its neighbours; iterable, with `len`.

### `dsakit.linked_queue`

`LinkedQueue()` with `enqueue`, `dequeue`, `front` and `len`; taking from an
empty queue raises `IndexError`.

### `dsakit.stacks`

- `ArrayStack(capacity=10)`: `push`, `pop`, `peek`, `clear`, `is_empty`,
  `is_full`, `len`, iteration from bottom to top. Pushing onto a full stack
  raises `StackOverflowError`; `pop`, `peek` and `clear` on an empty stack raise
  `StackUnderflowError` (a subclass of `IndexError`).
- `LinkedStack()`: unbounded; `push`, `pop`, `len`, iteration from top to
  bottom.

### `dsakit.backtracking`

- `knight_tour(size=8)`: a knight's tour from the top-left corner as a board of
  move numbers (start is 0), or `None` if there is none.
- `n_queens(size)`: a board with 1 for each queen and 0 elsewhere, or `None`.
- `format_board(board, width=None)`: the board as text, one row per line, cells
  right-aligned to `width` (the widest cell if not given).

### `dsakit.patterns`

`pyramid(lines)`, `star_pyramid(rows)` and `mirrored_triangle(rows)` return
star patterns as strings.

## Examples

```python
from dsakit.sorting import merge_sort, counting_sort, selection_sort
from dsakit.arrays import remove_duplicates, largest_rectangle_area
from dsakit.heap import MinHeap
from dsakit.stacks import ArrayStack

merge_sort([12, 11, 13, 5, 6, 7])                 # [5, 6, 7, 11, 12, 13]
counting_sort([3, 1, 2, 1], lower=1, upper=3)     # [1, 1, 2, 3]
selection_sort([3, 1, 2], descending=True)        # [3, 2, 1]

remove_duplicates([1, 5, 4, 2, 4, 4, 2, 1, 3, 6]) # [1, 5, 4, 2, 3, 6]
largest_rectangle_area([6, 2, 5, 4, 5, 1, 6])     # 12

heap = MinHeap(11)
for key in (3, 2, 15, 5, 4, 45):
    heap.insert_key(key)
heap.extract_min()                                # 2
heap.peek()                                       # 3

stack = ArrayStack(10)
stack.push(1)
stack.pop()                                       # 1
```

```python
from dsakit.backtracking import n_queens, format_board

print(format_board(n_queens(5), 1))
```

## Command line

`dsakit-patterns` prints a star pattern. The size is taken from the argument,
or read from standard input when none is given:

```
dsakit-patterns 5
dsakit-patterns 5 --pattern mirrored
echo 4 | dsakit-patterns --pattern star
```

`--pattern` is one of `pyramid` (the default), `star` or `mirrored`.

## What it does not do

The data structures are library classes only: there are no interactive menus
for driving the stacks, queue or heap from a terminal. The pattern printer is
the only command.