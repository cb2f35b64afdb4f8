# advent-solver

Solvers for a collection of daily programming puzzles: days 1 to 15 and
days 18 to 20. Each day has two parts. Each part takes the whole puzzle
input as text and returns one answer.

## Installation

```
pip install .
```

To run the test suite, install with the test extra:

```
pip install .[test]
pytest
```

## Command line

```
advent-solver DAY PART INPUT
```

`INPUT` is the path of the puzzle input file. Give `-` to read the input
from standard input. For example, this prints the answer to day 5, part 2,
for the input in `input.txt`:

```
advent-solver 5 2 input.txt
```

The command prints the answer and exits with status 0. It prints a message
to standard error and exits with status 1 in these cases: the day has no
solver, the part is not 1 or 2, the file cannot be read, or the input is
malformed.

## Library use

Each day is a module named `advent_solver.dayNN`, for example
`advent_solver.day01` and `advent_solver.day20`. Each module has
`part1(text)` and `part2(text)`. Each module also has smaller functions that
work on parsed data. `advent_solver.cli.solve(day, part, text)` runs a part
by its day and part number.

```python
from advent_solver import day01, day07
from advent_solver.cli import solve

left, right = day01.parse_lists("3 4\n4 3\n2 5\n")
print(day01.total_distance(left, right))

print(day07.can_produce([10, 19], 190, concatenate=False))  # True

print(solve(3, 1, "mul(2,4)mul(3,7)"))  # 29
```

Most answers are integers. These are the exceptions:

- `day14.part2` returns the robot picture (101 rows of `#` and spaces),
  followed by a last line that holds the number of seconds. `find_tree`
  returns the seconds and the picture rows as a tuple.
- `day18.part2` returns the blocking coordinate as the string `"x,y"`.

## Fixed values

A few parts use fixed values:

- Day 11 blinks 25 times in part 1 and 75 times in part 2 (`PART1_BLINKS`,
  `PART2_BLINKS`). `count_stones` takes the number of blinks as an argument.
- Day 13, part 2 moves every prize by `PART2_OFFSET` (10,000,000,000,000) on
  both axes. `min_tokens` takes the offset as an argument and returns `None`
  when the prize cannot be reached exactly.
- Day 14 uses a 101 × 103 floor (`WIDTH`, `HEIGHT`). Part 1 gives the safety
  factor after `PART1_SECONDS` (1) second. `safety_factor` and `find_tree`
  take the width and height as arguments.
- Day 18 uses a 71 × 71 grid (`MAP_SIZE`). Part 1 uses the first
  `MAX_DROPS` (1024) bytes. `shortest_path` and `first_blocking_byte` take
  the size as an argument.
- Day 20 counts cheats that save at least `MIN_SAVING` (100) steps. Cheats
  are up to 2 steps long in part 1 and up to 20 steps in part 2.
  `count_cheats` takes the maximum cheat length and the minimum saving as
  arguments.

## Limits

- Days 16 and 17 have no solvers. The command rejects them and lists the
  days that are available.
- The package does not download puzzle inputs. You supply the input as a
  file, on standard input, or as a string.
- Day 12 and day 20 need a map that is at least as tall as it is wide.
  They raise `ValueError` for a wider map.