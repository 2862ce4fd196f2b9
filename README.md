# algonotes

A collection of small, readable implementations of classic algorithms and data structures. It is meant for study and experiment. It has no dependencies outside the standard library. The optional `test` extra installs `pytest` and `hypothesis` for the test suite.

## Contents

- `algonotes.sequences`
  - `parse_ints` reads whitespace-separated integers from text. `parse_matrix` reads `rows cols` followed by the cells, row by row.
  - `format_row`, `format_matrix` and `format_mapping` produce tab-separated text. `format_mapping` lists keys in sorted order.
  - `prefix_sums`, `reverse`, `rotate_right` (right rotation by `k`, taken modulo the length) and `max_element`.
  - `column_major_matrix` fills a matrix with 1, 2, ... down each column.
- `algonotes.numbers`
  - `is_armstrong` and `armstrong_numbers`.
  - `prime_factorization` returns `{prime: exponent}`.
  - `fibonacci_binet` gives Fibonacci numbers by Binet's formula.
  - `modes` returns the most frequent values.
  - `power_of_two_bounds` finds, for each `y`, the least `x` with `2**x >= 10**y`.
  - `taxicab_numbers` finds sums of two cubes that have more than one representation.
  - `newton_sqrt` and `hanoi_moves`.
  - `vedic_sqrt` and `vedic_deviations`, which lists where that estimate is off by more than a threshold percentage, largest deviation first.
- `algonotes.bits`
  - `count_set_bits`, `lowest_set_bit_span` and `is_power_of_two`.
  - `is_bit_set`, `set_bit`, `clear_bit`, `toggle_bit` and `clear_lowest_set_bit`.
  - `xor_swap` and `josephus_survivor`.
  - `negative_bit_total`, which works with 32-bit wrap-around.
  - `xor_upto` and `range_xor`.
- `algonotes.timing`: `measure_ns(func, repeat)` returns the mean wall-clock nanoseconds per call.
- `algonotes.sorting`
  - `binary_search` sorts a copy of its input and returns the index in that copy, or `-1` if the value is absent.
  - `merge` and `merge_sort` return new lists.
  - `bubble_sort`, `merge_sort_in_place`, `quick_sort` and `selection_sort` sort a list in place.
- `algonotes.recursion`: `countdown` (a generator), `factorial` and `fibonacci`.
- `algonotes.linked_list`: `Node` and `LinkedList`, a singly linked list that supports iteration, `len()` and `in`.
- `algonotes.stacks`: `BoundedStack`, a fixed-capacity stack with `push`, `pop`, `peek`, `len()` and truth testing.
  - `push` raises `StackFullError` (an `OverflowError`) when the stack is full.
  - `pop` and `peek` raise `StackEmptyError` (an `IndexError`) when it is empty.

Invalid arguments raise `ValueError`, for example a negative factorial or an empty sequence passed to `max_element`.

## Examples

```python
from algonotes.sorting import merge_sort, binary_search
from algonotes.bits import josephus_survivor
from algonotes.stacks import BoundedStack

values = merge_sort([5, 3, 9, 1])   # [1, 3, 5, 9]
binary_search(values, 9)            # 3

josephus_survivor(5)                # 3

stack = BoundedStack(2)
stack.push(10)
stack.push(20)
stack.pop()                         # 20
```

## What it does not do

The package is a library only. It has no command-line program and does not prompt for or read standard input. Pass values to the functions directly, or turn text into integers and matrices with `parse_ints` and `parse_matrix`.