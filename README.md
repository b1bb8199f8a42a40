# sortlab

A set of small algorithm exercises: array and matrix helpers, binary
searches that count their comparisons, and a few command-line programs
built on them. These are a phone directory sorted through index arrays, a
binary file of passenger records, a word sorter, school/hostel/student
record tasks and some introductory numeric tasks.

No third-party libraries are needed.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Arrays and matrices (`sortlab.arrays`)

- `fill_inc(n)` and `fill_dec(n)` return `1..n` and `n..1`.
- `fill_rand(n, rng)` returns `n` random integers in `0..RAND_MAX`.
- `check_sum(values)` returns the sum of the values.
- `run_numbers(values)` returns the number of non-decreasing runs.
- `format_array(values)` returns the values joined by single spaces.
- `gen_rand_array`, `gen_rand_matrix` and `gen_jagged_matrix` build random
  data. `format_jagged_matrix` prints a jagged matrix as a row count followed
  by `length:` lines.
- Square matrices can be read along their diagonals with `right_diagonals`
  and `left_diagonals`, or as spirals with `spiral_from_center` and
  `spiral_from_corner`.

Functions that need randomness take an `rng` argument, a `random.Random`
instance, so a fixed seed reproduces the results.

```python
from sortlab.arrays import fill_dec, run_numbers, spiral_from_corner

print(run_numbers(fill_dec(5)))                  # 5
print(spiral_from_corner([[1, 2], [3, 4]]))      # [1, 2, 4, 3]
```

### Binary search (`sortlab.search`)

Every search returns a `SearchResult`. Its `indexes` field holds the
positions found and `comparisons` holds the comparisons made. The `found`
and `index` properties summarise the result, and `index` is `-1` when the
key is absent.

- `bsearch1(values, key)` stops as soon as the middle element matches.
- `bsearch2(values, key)` finds the leftmost match and tests for equality
  only at the end.
- `bsearch_all1(values, key)` finds every position by searching again with
  the found positions left out.
- `bsearch_all2(values, key)` finds the leftmost match and then scans to the
  right.

```python
from sortlab.search import bsearch_all2

result = bsearch_all2([1, 2, 2, 2, 5], 2)
print(result.indexes, result.comparisons)
```

### Records (`sortlab.records`)

- `School` has a `share()` method, and `sort_by_applicant_share` orders
  schools by it, highest first.
- `HostelRoom` holds a room, and `faculty_summary` counts rooms, students
  and the average area per student for each faculty.
- `Student` has a `passed()` method. `sort_by_surname` and `passed_session`
  order and filter lists of students.
- `StudentTree` is a binary search tree keyed by surname, with `insert`,
  `ascending`, `descending` and `find`.

### Phone directory (`sortlab.phonebook`)

`PhoneEntry` records are never reordered. Instead, `sort_indexes(entries,
less)` returns the entry positions sorted by straight insertion. The
comparators are `less_name`, `less_street`, `less_name_phone`,
`more_name_phone`, `less_address_phone`, `more_address_phone`,
`less_address` and `more_address`.

To find every matching entry through such an index, use `search_all`,
`search_all_by_name` or `search_all_by_street`. `format_table` prints the
entries as an aligned table, and `sample_directory()` returns five sample
records.

### Other modules

- `sortlab.basics` covers the Easter date (`easter_date`) and integer powers
  (`power_n`). It also has a Taylor-series cosine (`cosine`), recursion-style
  list tasks (`positives_reversed`, `negatives_then_positives`,
  `to_binary`), triangle perimeter and area (`triangle`), `factorial` and
  `birth_probability`.
- `sortlab.words` provides `count_words`, `insertion_sort_words` and
  `sort_file(source, target)`.
- `sortlab.passengers` stores `Passenger` records as fixed-size binary
  records. It provides `read_passengers`, `write_passengers`,
  `append_passenger`, `remove_light_passengers` and `change_baggage_weight`.

## Commands

| Command | What it does |
| --- | --- |
| `sortlab-records [--seed N] [--surname NAME]` | school statistics, hostel summary, student lists and tree lookup on random data |
| `sortlab-basics TASK ...` | one introductory task: `easter`, `power`, `cos`, `positives`, `order`, `binary`, `triangle` or `birth` |
| `sortlab-phonebook [show \| sort [--by KEY] [--desc] \| search {name,street} KEY]` | shows, sorts or searches the sample directory |
| `sortlab-words [--source F] [--target F] [--keep]` | writes a sample text to the source file (unless `--keep`) and its sorted words to the target file |
| `sortlab-passengers [FILE]` | menu for creating, viewing, appending to, pruning and editing a passenger file |

For example:

```
sortlab-basics easter 2024
sortlab-phonebook search street "Kropotkina, 138"
```

## What this package does not do

The package contains no sorting routines of its own. It has no counted
comparison and move statistics for sorts, no sort timing and no complexity
tables. It writes no data series for plots and runs no plotting scripts.
It does not include the matrix and array exercises beyond those listed
above, the foxes-and-rabbits field simulation, or the snake game logic.