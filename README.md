# drillbook

Solutions to classic programming exercises, written as plain Python functions and grouped by topic. The package has no dependencies outside the standard library.

## Installation

```
pip install drillbook
```

To run the tests:

```
pip install "drillbook[test]"
pytest
```

## Modules

- `drillbook.numbers`: digit puzzles
  - `is_palindrome_number`
  - `digit_square_sum`
  - `is_happy`
  - `add_digits`
  - `is_power_of_three`
- `drillbook.strings`: text exercises
  - `roman_to_int`
  - `find_substring`
  - `is_anagram`
  - `reverse_chars`
  - `first_unique_char`
  - `longest_palindrome_length`
  - `find_anagrams`
  - `to_lower_case`
  - `is_rotation`
  - `merge_alternately`
- `drillbook.searching`: binary-search problems
  - `search_range`
  - `search_insert`
  - `search_matrix`
  - `find_peak_element`
  - `guess_number`
  - `can_split`
  - `split_array`
- `drillbook.counting`: hashing and counting problems
  - `two_sum`
  - `longest_consecutive`
  - `single_number`
  - `majority_element`
  - `majority_elements`
  - `contains_duplicate`
  - `contains_nearby_duplicate`
  - `missing_number`
  - `find_duplicate`
  - `subarray_sum`
  - `num_subarrays_with_sum`
  - `unique_occurrences`
  - `find_difference`
- `drillbook.arrays`: array manipulation
  - `max_area`
  - `remove_element`
  - `sort_colors`
  - `merge_sorted`
  - `max_profit`
  - `increasing_triplet`
  - `third_max`
  - `array_pair_sum`
  - `can_place_flowers`
  - `pivot_index`
  - `transpose`
  - `sort_by_parity`
  - `replace_elements`
  - `kids_with_candies`
  - `max_operations`
  - `apply_operations`

## Examples

```python
from drillbook.counting import two_sum
from drillbook.searching import guess_number, split_array
from drillbook.strings import roman_to_int

two_sum([2, 7, 11, 15], 9)        # [0, 1]
roman_to_int("MCMXCIV")           # 1994
split_array([7, 2, 5, 10, 8], 2)  # 18

# guess_number takes the feedback function:
# it returns -1 if the guess is too high, 1 if it is too low, and 0 when it is right.
picked = 6
guess_number(10, lambda g: (picked > g) - (picked < g))  # 6
```

## Behaviour worth knowing

Some functions change the list you pass to them:

- `remove_element` moves the kept values to the front and returns their count
- `sort_colors` sorts in place
- `merge_sorted` fills and sorts `nums1` in place
- `reverse_chars` reverses in place and returns the same list
- `apply_operations` rewrites the list in place and returns it

`can_place_flowers` works on a copy and leaves the flowerbed untouched.

Several lookups return `-1` or an empty list when there is no answer (`find_substring`, `first_unique_char`, `search_range`, `find_peak_element`, `guess_number`, `split_array`, `single_number`, `find_duplicate`, `pivot_index`, `two_sum`). Others raise `ValueError`:

- `is_happy` for numbers below 1
- `majority_element` for an empty list or when no value occurs in more than half of the positions
- `max_profit` and `third_max` for an empty list
- `merge_sorted` when `nums1` has fewer than `m + n` slots

## What it does not do

This is a library only. It has no command-line tool and reads no input of its own. You call the functions from your own code or from the tests.