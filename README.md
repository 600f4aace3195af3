# cpsolver

Plain-Python solvers for well-known competitive-programming problems. Each
problem is a function: give it the input as Python values and it returns the
answer. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `cpsolver.intro_basic` | `collatz_sequence`, `missing_number`, `longest_repetition`, `increasing_array_moves`, `beautiful_permutation`, `number_spiral`, `two_knights`, `two_knights_counts`, `two_sets`, `bit_strings`, `trailing_zeros`, `coin_piles`, `palindrome_reorder`, `apple_division` |
| `cpsolver.number_theory` | `common_divisors`, `count_divisors`, `power_tower`, `sum_of_divisors` |
| `cpsolver.intro_search` | `grey_code`, `hanoi_moves`, `distinct_permutations`, `count_queen_placements`, `digit_at`, `count_grid_paths` |
| `cpsolver.grid_search` | `labyrinth_path`, `escape_monsters` |
| `cpsolver.dp_counting` | `array_descriptions`, `coin_combinations_ordered`, `coin_combinations_unordered`, `counting_towers`, `dice_combinations`, `grid_paths`, `two_sets_count`, `money_sums`, `book_shop`, `minimizing_coins` |
| `cpsolver.dp_optimization` | `MaxFenwickTree`, `edit_distance`, `elevator_rides`, `longest_increasing_subsequence`, `max_project_reward`, `rectangle_cuts`, `removal_game`, `removing_digits` |
| `cpsolver.connectivity` | `DisjointSet`, `building_roads`, `building_teams`, `count_rooms`, `road_construction`, `road_reparation`, `planets_and_kingdoms`, `flight_routes_check`, `message_route` |
| `cpsolver.graph_cycles` | `course_schedule`, `round_trip`, `round_trip_directed`, `planet_cycles`, `planet_queries`, `planet_distances` |
| `cpsolver.shortest_paths` | `shortest_routes`, `all_pairs_shortest`, `flight_discount`, `k_cheapest_routes`, `negative_cycle`, `high_score`, `investigation`, `game_routes`, `longest_flight_route` |

Two small data structures are public as well: `MaxFenwickTree` (prefix
maxima with `update(index, value)` and `query(index)`) and `DisjointSet`
(union-find with `find(x)`, `union(a, b)`, `component_size(x)` and the
`components` and `largest` counters).

## Example

```python
from cpsolver.intro_basic import collatz_sequence, apple_division
from cpsolver.dp_counting import dice_combinations
from cpsolver.dp_optimization import edit_distance
from cpsolver.connectivity import message_route

collatz_sequence(3)              # [3, 10, 5, 16, 8, 4, 2, 1]
apple_division([3, 2, 7, 4, 1])  # 1
dice_combinations(3)             # 4
edit_distance("LOVE", "MOVIE")   # 2
message_route(3, [(1, 2), (2, 3)])  # [1, 2, 3]
```

## Conventions

- Graph functions number their nodes from 1 and take edges as tuples, such as
  `(source, target)` or `(source, target, weight)`. A node outside `1..n`
  raises `ValueError`.
- Grid and board functions take either one string whose rows are separated by
  whitespace or an iterable of row strings.
- Counting results are reduced modulo 10^9 + 7.
- Where a problem has no answer the function returns `None` (for example
  `beautiful_permutation`, `two_sets`, `palindrome_reorder`, `labyrinth_path`,
  `minimizing_coins`, `course_schedule`, `negative_cycle`). Invalid input raises
  `ValueError`. Each function's docstring gives the details.

## What it does not do

There is no command-line program: the package does not read problem input
from standard input or print answers in a judge's output format. Call the
functions from Python and format the results yourself.