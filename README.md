# dsakit

Classic data structures and algorithms as plain, dependency-free Python:
binary trees and search trees, graphs, heaps, hash tables, tries, linked
lists, stacks and queues, sorting, greedy methods, dynamic programming and
backtracking.

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
| `dsakit.binary_tree` | `TreeNode`; `build_tree` from a preorder sequence with `-1` for a missing child; `preorder`, `inorder`, `postorder`, `level_order` (values grouped by level); `count_nodes`, `sum_nodes`, `height`, `leaf_depths`, `diameter`, `diameter_naive`, `is_identical`, `is_subtree`, `top_view` |
| `dsakit.tree_queries` | `kth_level` (root is level 1), `kth_ancestor`, `node_path`, `lowest_common_ancestor`, `min_distance` (edges between two values), `to_sum_tree` (in place) |
| `dsakit.bst` | `bst_insert` (equal values go right), `build_bst`, `bst_search`, `delete_node`, `values_in_range` (strictly between the bounds), `root_to_leaf_paths`, `is_valid_bst`, `build_balanced_bst`, `balance`, `largest_bst_size`, `merge_bsts` |
| `dsakit.backtracking` | `grid_ways`, `n_queens`, `format_board`, `permutations`, `subsets`, `solve_sudoku` (0 marks an empty cell; returns a new grid) |
| `dsakit.recursion` | `friend_pairings`, `tiling_ways`, `remove_duplicates`, `binary_strings` (no two consecutive ones) |
| `dsakit.graphs` | `Graph` on vertices `0..n-1`, directed or not, with `add_edge`, `neighbours`, `describe`, `bfs`, `dfs`, `has_path`, `has_cycle`, `connected_components`, `is_bipartite`, `topological_sort`, `kahn_topological_sort`; `Edge` and `dijkstra` for weighted adjacency lists |
| `dsakit.sorting` | `merge_sort`, `quick_sort`, `heap_sort` (each returns a new list), `search_rotated` |
| `dsakit.knapsack` | 0/1 knapsack three ways: `knapsack_recursive`, `knapsack_memoized`, `knapsack_tabulated` |
| `dsakit.hash_table` | `HashTable`: string keys, integer values, separate chaining, doubles its buckets when the load factor passes 1; `insert`, `remove`, `get`, `items`, `rehash`, `bucket_index`, `format_table`, `capacity`, plus `[]`, `in` and `len` |
| `dsakit.hashing_problems` | `count_distinct`, `itinerary`, `count_subarrays_with_sum`, `longest_zero_sum_subarray`, `majority_elements` (more than a third), `union`, `intersection`, `is_anagram` |
| `dsakit.greedy` | `Job` (with a letter `name`), `max_activities`, `fractional_knapsack`, `coin_change` (Indian denominations by default), `job_sequence`, `max_chain_length`, `min_absolute_difference` |
| `dsakit.linked_list` | `ListNode`; `LinkedList` with push/pop at both ends, `insert`, `find`, `remove_nth_from_end`, `reverse`, `has_cycle`, `make_cycle`, `remove_cycle`, `sort` (merge sort on nodes), `zigzag`; `DoublyLinkedList` with `push_front`, `pop_front`, forward and reversed iteration |
| `dsakit.heaps` | `MaxHeap` (`push`, `pop`, `top`, `len`), `connect_ropes`, `nearest_cars`, `sliding_window_max`, `weakest_rows` |
| `dsakit.queues` | `CircularQueue`, `DequeQueue`, `DequeStack`, `StackFromQueues`, `QueueFromStacks`, `first_non_repeating`, `interleave`, `reverse_queue` |
| `dsakit.stacks` | `LinkedStack`, `has_duplicate_parentheses`, `is_valid_parentheses`, `max_histogram_area`, `next_greater`, `stock_span`, `push_at_bottom`, `reverse_stack` |
| `dsakit.trie` | `Trie` (`insert`, `search`, `in`, `shortest_unique_prefix`, `longest_complete_word`, `node_count`, `prefixes`), `longest_word_with_all_prefixes`, `distinct_substrings`, `word_break` |

## Examples

```python
from dsakit.binary_tree import build_tree, inorder, height
from dsakit.graphs import Graph, Edge, dijkstra
from dsakit.trie import Trie, word_break

root = build_tree([1, 2, -1, -1, 3, -1, 4, -1, -1])
print(inorder(root), height(root))          # [2, 1, 3, 4] 3

g = Graph(5, directed=False)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 3), (3, 4)]:
    g.add_edge(u, v)
print(g.bfs(0), g.has_path(0, 4))           # [0, 1, 2, 3, 4] True

print(dijkstra([[Edge(1, 2)], [], []], 0))  # [0, 2, inf]

trie = Trie(["apple", "le", "cherry"])
print("le" in trie)                         # True
print(word_break("applele", ["apple", "le"]))  # True
```

## Errors

Failures are raised as ordinary Python exceptions:

- popping from or peeking at an empty heap, stack, queue or list raises
  `IndexError`; pushing onto a full `CircularQueue` raises `OverflowError`;
- `HashTable.remove` and `HashTable[key]` raise `KeyError` for a missing key;
- invalid input raises `ValueError`, for example a preorder sequence that ends
  too early, an unsolvable or conflicting sudoku, a topological sort of a graph
  with a cycle or of an undirected graph, or negative edge weights in
  `dijkstra`.

## What it does not do

This is a library only: it has no command-line program, and the structures
live in memory with no storage on disk.