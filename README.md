# puzzlesolvers

A collection of small, well-known programming-practice puzzles solved in
plain Python. Each puzzle is a function you can import and call. You can
also run the same puzzles from the command line. The command reads the
puzzle's usual text input and writes the answer.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The puzzles are grouped by theme:

| Module | Functions |
| --- | --- |
| `puzzlesolvers.numbers` | `solve_me_first`, `fizz_buzz`, `extra_long_factorial`, `find_digits`, `utopian_tree`, `viral_advertising`, `reverse_digits`, `beautiful_days`, `squares`, `save_the_prisoner` |
| `puzzlesolvers.timekeeping` | `day_of_programmer`, `time_conversion`, `library_fine` |
| `puzzlesolvers.positions` | `kangaroo`, `page_count`, `cat_and_mouse` |
| `puzzlesolvers.strings` | `append_and_delete`, `bigger_is_greater`, `encryption`, `designer_pdf_viewer`, `repeated_string`, `counting_valleys`, `acm_team` |
| `puzzlesolvers.counting` | `birthday_cake_candles`, `migratory_birds`, `sock_merchant`, `equalize_array`, `picking_numbers`, `divisible_sum_pairs`, `birthday`, `angry_professor`, `hurdle_race` |
| `puzzlesolvers.sequences` | `breaking_records`, `count_apples_and_oranges`, `cut_the_sticks`, `circular_array_rotation`, `climbing_leaderboard`, `permutation_equation`, `grading_students` |
| `puzzlesolvers.grids` | `forming_magic_square`, `organizing_containers`, `queens_attack`, `non_divisible_subset`, `get_total_x`, `jumping_on_clouds` |
| `puzzlesolvers.shopping` | `bon_appetit`, `get_money_spent`, `get_min_cost`, `filled_orders` |

```python
from puzzlesolvers.numbers import fizz_buzz, solve_me_first
from puzzlesolvers.timekeeping import time_conversion
from puzzlesolvers.positions import kangaroo

solve_me_first(2, 3)            # 5
fizz_buzz(5)                    # ["1", "2", "Fizz", "4", "Buzz"]
time_conversion("07:05:45PM")   # "19:05:45"
kangaroo(0, 3, 4, 2)            # "YES"
```

Functions return their answers; none of them print. Bad input raises a
normal Python exception, such as `ValueError`, `ZeroDivisionError` or
`IndexError`.

Each theme module also provides `commands()`. It returns a dictionary that
maps puzzle names to handlers. A handler takes the puzzle's input text and
returns its output text. `puzzlesolvers.cli.run(problem, text)` looks the
name up across all the modules and returns the output text. An unknown name
raises `ValueError`.

```python
from puzzlesolvers.cli import run

run("time-conversion", "07:05:45PM\n")   # "19:05:45\n"
```

## Command line

The `puzzlesolvers` command takes a puzzle name and reads that puzzle's
input from standard input:

```
printf '2\n3\n' | puzzlesolvers solve-me-first
echo 07:05:45PM | puzzlesolvers time-conversion
puzzlesolvers --help
```

By default the answer goes to standard output. You can send it to a file
instead in either of two ways:

- give the file with `-o FILE` or `--output FILE`;
- set the `OUTPUT_PATH` environment variable. `--output` overrides it.

If the input cannot be solved, the command writes the error to standard
error and exits with status 1.

Puzzle names accepted by the command:

| Module | Names |
| --- | --- |
| numbers | `solve-me-first`, `fizz-buzz`, `extra-long-factorials`, `find-digits`, `utopian-tree`, `viral-advertising`, `beautiful-days`, `sherlock-and-squares`, `save-the-prisoner` |
| timekeeping | `day-of-the-programmer`, `time-conversion`, `library-fine` |
| positions | `kangaroo`, `drawing-book`, `cats-and-a-mouse` |
| strings | `append-and-delete`, `bigger-is-greater`, `encryption`, `designer-pdf-viewer`, `repeated-string`, `counting-valleys`, `acm-icpc-team` |
| counting | `birthday-cake-candles`, `migratory-birds`, `sales-by-match`, `equalize-the-array`, `picking-numbers`, `divisible-sum-pairs`, `subarray-division`, `angry-professor`, `the-hurdle-race` |
| sequences | `breaking-the-records`, `apple-and-orange`, `cut-the-sticks`, `circular-array-rotation`, `climbing-the-leaderboard`, `sequence-equation`, `grading-students` |
| grids | `forming-a-magic-square`, `organizing-containers`, `queens-attack-2`, `non-divisible-subset`, `between-two-sets`, `jumping-on-the-clouds` |
| shopping | `bill-division`, `electronic-shop`, `road-repair`, `unexpected-demand` |