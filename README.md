# contestkit

Classic contest algorithms — sliding windows, subarray counting, range
queries, a recursively numbered table, strings, graphs, dynamic programming,
greedy scheduling and searching — as small, self-contained Python functions
and classes.

## Installation

```
pip install contestkit
```

To run the test suite:

```
pip install "contestkit[test]"
pytest
```

## Modules

| Module | What it covers |
| --- | --- |
| `contestkit.windows` | `longest_unique_run`, `generate_sequence`, `sliding_minimum_xor`, `sliding_xor_xor`, `sliding_sum_xor`, `sliding_distinct_counts` |
| `contestkit.subarrays` | `count_at_most_k_distinct`, `count_divisible_subarrays`, `count_positive_sum_subarrays`, `count_sum_subarrays` |
| `contestkit.rangequeries` | `SegmentTree`, `RangeUpdateArray`, `PrefixSums`, `xor_range_queries`, `min_range_queries`, `find_pile`, `worm_piles` |
| `contestkit.quadtable` | `cell_number` and `cell_position` in a 2^n × 2^n table filled by recursive quadrant order |
| `contestkit.strings` | `longest_repetition`, `z_array`, `count_occurrences`, `shortest_missing_substring`, `balance_difference` |
| `contestkit.graphs` | `shortest_paths` (Dijkstra), `all_pairs_shortest` and `route_queries` (Floyd–Warshall), `subordinate_counts`, `tree_diameter`, `max_tree_matching` |
| `contestkit.dynamic` | `rectangle_cuts`, `removal_game_score`, `min_digit_removals`, `count_equal_partitions`, `minimal_grid_path` |
| `contestkit.mathematics` | `hanoi_moves`, `trailing_zeros`, `weird_sequence`, `two_knights`, `split_two_sets` |
| `contestkit.greedy` | `reading_time`, `max_customers`, `allocate_rooms`, `smallest_missing_sum`, `stick_cost`, `deadline_reward`, `count_towers`, `third_side` |
| `contestkit.searching` | `two_sum_positions`, `three_sum_positions`, `traffic_light_gaps` |

## Examples

```python
from contestkit.windows import longest_unique_run
from contestkit.rangequeries import PrefixSums, SegmentTree, xor_range_queries
from contestkit.strings import count_occurrences
from contestkit.graphs import shortest_paths
from contestkit.mathematics import hanoi_moves, split_two_sets
from contestkit.searching import traffic_light_gaps

longest_unique_run([1, 2, 1, 3, 2, 7, 4, 2])     # 5

sums = PrefixSums([3, 2, 4, 5, 1, 1, 5, 3])
sums.sum(2, 4)                                   # 10  (positions 2..4, counted from 0)

tree = SegmentTree([3, 2, 4, 5], min, float("inf"))
tree.query(1, 3)                                 # 2

xor_range_queries([3, 2, 4], [(1, 2), (2, 3)])   # [1, 6]  (bounds counted from 1)

count_occurrences("saippuakauppias", "pp")       # 2

shortest_paths(3, [(1, 2, 6), (1, 3, 2), (3, 2, 3)])   # [0, 5, 2]

hanoi_moves(2)                                   # [(1, 2), (1, 3), (2, 3)]
split_two_sets(7)                                # ([7, 2, 5], [1, 6, 3, 4])

traffic_light_gaps(8, [3, 6, 2])                 # [5, 3, 3]
```

## Conventions

- `SegmentTree.query`, `RangeUpdateArray.add`, `RangeUpdateArray.value_at`
  and `PrefixSums.sum` take positions counted from 0, with inclusive bounds.
- `xor_range_queries` and `min_range_queries` take query bounds counted from 1,
  inclusive; `find_pile`, `worm_piles`, `two_sum_positions`,
  `three_sum_positions` and `allocate_rooms` return positions counted from 1.
- Graph nodes are numbered from 1. `shortest_paths` and `all_pairs_shortest`
  give `None` for unreachable nodes; `route_queries` gives `-1`.
- Invalid input (out-of-range indices, empty inputs where a value is required,
  non-positive sizes) raises `ValueError` or `IndexError`.

## What this package does not do

It has no command-line program and reads no input files: every routine takes
Python values and returns Python values, and parsing problem input is left to
the caller.