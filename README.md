# judgekit

judgekit is a collection of small, well-known programming exercises. Each one
is a plain Python function that takes values and returns its answer. You can
use the functions to study the exercises, to check your own solutions against
them, or as parts of larger programs.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `judgekit.arithmetic` holds one-line arithmetic and formatting exercises:
  `add`, `subtract`, `multiply`, `divide`, `four_operations`,
  `modulo_identities`, `long_multiplication`, `buddhist_to_gregorian`,
  `oven_finish`, `alarm_before`, `triangular_sum`, `snail_days`,
  `is_leap_year`, `compare`, `quadrant`, `score_grade`, `midpoint_dots`,
  `zigzag_fraction`, `honeycomb_distance`, `long_type_name`,
  `multiplication_table`, `case_sums`, `case_equations`, `hello_world`,
  `dog_art` and the complexity helpers `constant_complexity`,
  `linear_complexity` and `quadratic_complexity`.
- `judgekit.sequences` holds exercises on lists and grids: `count_value`,
  `fill_baskets`, `reverse_baskets`, `swap_balls`, `min_max`, `below`,
  `max_with_position`, `grid_max`, `chess_shortfall`, `distinct_remainders`,
  `missing_students`, `curved_mean`, `coin_change`, `matrix_add`,
  `covered_area`, `fourth_vertex`, `dice_prize`, `receipt_matches` and
  `nearest_edge`.
- `judgekit.strings` holds text exercises: `read_vertically`,
  `first_positions`, `surprise`, `is_palindrome`, `char_code`, `digit_sum`,
  `count_words`, `most_common_letter`, `is_group_word`, `count_group_words`,
  `repeat_chars`, `text_length`, `char_at`, `reversed_max`,
  `croatian_length`, `dial_time`, `first_last`, the star shapes
  `left_triangle`, `right_triangle` and `diamond`, and the grade helpers
  `letter_grade_points` and `gpa`.
- `judgekit.numbers` holds number theory exercises: `sieve`, `to_base`,
  `from_base`, `prime_factors`, `count_primes`, `prime_sum_and_min`,
  `smallest_generator`, `kth_divisor`, `divisibility`,
  `perfect_number_report` and `closest_blackjack`.
- The contest problems each have a module. Each module has a function that
  works on parsed values and a `solve(text)` function. `solve` takes the whole
  problem input as a string and returns the full output, one
  `Case #n: ...` line per case:
  - `judgekit.projectile` has `launch_angle`, the angle in degrees that
    throws a projectile a given distance. It returns 45 when the distance
    cannot be reached.
  - `judgekit.rational_tree` has `node_value` and `node_index`, for the
    binary tree of positive rationals.
  - `judgekit.bookshelf` has `arrange_books`. It sorts odd values up and
    even values down, and each value keeps a slot of its own parity.
  - `judgekit.phone` has `read_number`, which reads a phone number aloud
    with "double", "triple" and the other repeat words.
  - `judgekit.bad_horse` has `can_split`, which checks whether pairs can be
    split into two groups.
  - `judgekit.moist` has `sorting_cost`, the number of cards that must be
    moved to sort a hand.
  - `judgekit.maze` has `walk_maze`, a walk that keeps the left hand on the
    wall and gives up after 10000 steps.
  - `judgekit.spaceship` has `color_index` and `shortest_times`, the
    shortest travel times between rooms. Rooms of the same colour are joined
    by free teleports.

Invalid input raises `ValueError`. `char_at` raises `IndexError` when the
position is out of range.

## Example

```python
from judgekit.arithmetic import oven_finish
from judgekit.numbers import to_base, prime_factors
from judgekit.phone import read_number
from judgekit.bookshelf import arrange_books
from judgekit.bad_horse import can_split
from judgekit.rational_tree import node_value, solve

oven_finish(23, 48, 25)        # (0, 13)
to_base(60466175, 36)          # "ZZZZZ"
prime_factors(72)              # [2, 2, 2, 3, 3]
read_number("15012233444", "3-4-4")
# "one five zero one double two three three triple four"
arrange_books([5, 2, 4, 3, 1]) # [1, 4, 2, 3, 5]
can_split([("a", "b"), ("b", "c"), ("c", "a")])  # False
node_value(2)                  # (1, 2)

print(solve("2\n1 2\n2 1 2\n"), end="")
# Case #1: 1 2
# Case #2: 2
```

## What it does not do

judgekit is a library only. It installs no command-line program, and no
function reads standard input or writes to standard output. To answer a
problem from a file or a pipe, read the text yourself, pass it to that
module's `solve`, and print the string that comes back.