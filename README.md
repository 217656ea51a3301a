# katas

Solutions to small programming puzzles, sorted by difficulty level. Each
module holds plain functions that take ordinary Python values and return
ordinary Python values. The package has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

| Module               | Contents                                                              |
|----------------------|-----------------------------------------------------------------------|
| `katas.kyu4`         | `format_duration`                                                     |
| `katas.kyu5`         | `beeramid`, `beeramid_one_line`, `move_zeros`, `move_zeros_smart`, `solution` |
| `katas.kyu6`         | `spin_words`, `find_odd_set`, `count_bits`, `persistence`, `decode_morse`, `prime_reduction`, ... |
| `katas.kyu7`         | `square_digits`, `high_and_low`, `word_pattern`, `wall_paper`, `max_rot`, ... |
| `katas.kyu8`         | warm-up exercises: `double_char`, `digital_root`, `next_id`, `points`, ... |
| `katas.leetcode`     | `two_sum1`, `two_sum2`, `is_palindrome_number`, `divide`, `permute`, `multiply` |
| `katas.linked_list`  | `ListNode`, `make_node`, `is_palindrome_node`, `is_palindrome_node_optimized` |
| `katas.score`        | `score_of_string`                                                     |
| `katas.cli`          | `main`, behind the `katas` command                                    |

Several puzzles come in two variants (for example `double_char` and
`double_char2`, or `two_sum1` and `two_sum2`) that solve the same task in
different ways; where they differ in result the docstrings say so
(`two_sum1` returns `[earlier, later]`, `two_sum2` returns `[later, earlier]`).

Invalid input is reported with exceptions rather than sentinel values:
`ValueError` for malformed or empty input (for example `two_sum1` when no
pair matches, `multiply` with a non-digit string, `high_and_low` with a
non-integer), and `OverflowError` where a result would not fit the fixed
width the puzzle is defined for (for example `nearest_sq2` above
`2**32 - 1`, or `compute_depth` past 16 bits).

## Examples

```python
from katas.kyu4 import format_duration
from katas.kyu6 import spin_words
from katas.kyu8 import html_special_chars, next_id
from katas.leetcode import multiply

format_duration(3662)                      # '1 hour, 1 minute and 2 seconds'
spin_words("Hey fellow warriors")          # 'Hey wollef sroirraw'
html_special_chars("<h2>Hello World</h2>") # '&lt;h2&gt;Hello World&lt;/h2&gt;'
next_id([0, 1, 2, 4, 5])                   # 3
multiply("123", "321")                     # '39483'
```

Linked lists are built from `ListNode` values. `add` replaces the node's
successor with a new single node, and iterating a node yields the values
from it to the end of the list:

```python
from katas.linked_list import ListNode, is_palindrome_node

head = ListNode(1)
head.add(1)
list(head)                                 # [1, 1]
is_palindrome_node(head)                   # True
```

## Command line

Installing the package provides a `katas` command, which takes no options
apart from `--help`:

```
katas
```

It prints the list returned by `katas.kyu5.solution(0, 2**64 - 1)`: the
fourth powers of the numbers from 0 to 65536 that pass that function's
primality test. The test lets 0 and 1 through, so the list begins
`[0, 1, 16, 81, ...]`.