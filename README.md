# algostudy

A collection of classic algorithms and data structures, written as plain,
dependency-free Python (3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algostudy.numbers` | Bit tricks and number puzzles: `add_without_plus`, `count_set_bits`, `count_set_bits_kernighan`, `count_set_bits_table`, `lowest_set_bit`, `set_bit`, `clear_bit`, `clear_bits_from_msb`, `next_with_same_bits`, `to_binary`, `to_binary_32`, `trailing_zeros_of_factorial`, `factorial`, `power_set`, `smallest_number_with_digit_product`, `lowest_common_ancestor`, `tree_distance`, `reverse_digits`, `add_reversed`, `proper_divisor_sum`, `find_duplicate`, `max_ones_after_flip`, `count_chessboard_squares`, `largest_number`, `plus_one` |
| `algostudy.heap` | Max-heap helpers on plain lists: `heap_push`, `heap_pop`, `build_heap`, `heap_sort`, `sift_down` |
| `algostudy.sequences` | `longest_common_subsequence`, `longest_increasing_subsequence_length`, `substring_diff`, `max_subarray_sums`, `max_increasing_chain_weight`, `stock_max_profit` |
| `algostudy.puzzles` | Short puzzle solutions: `anagram_changes`, `class_cancelled`, `birthday_gift_expectation`, `count_dividing_digits`, `gemstones`, `is_pangram`, `palindrome_index`, `counting_sort_strings`, `position_of`, `minimum_draws`, `handshakes`, `diwali_light_patterns`, `restaurant_pieces`, `balanced_index_exists`, `pair_sums` |
| `algostudy.graphs` | `Graph` (adjacency lists) with `add_edge`, `neighbours`, `bfs`, `dfs`, `is_bipartite` and Dijkstra `shortest_path`; `even_tree_removable_edges`, `snakes_and_ladders_moves` |
| `algostudy.sorting` | Sorting analysis: `count_inversions`, `quicksort_comparisons`, `quicksort_swaps`, `insertion_sort_shifts`, `shift_swap_difference`, `hoare_quicksort`, `closest_pairs`, `counter_game_winner` |
| `algostudy.doubly_linked` | `DoublyNode`, `DoublyLinkedList` (push, insert, delete, reverse, in-place quicksort) and `copy_with_random` |
| `algostudy.queues` | `ArrayQueue` (bounded ring buffer), `LinkedQueue`, `StackQueue`, the exceptions `QueueEmpty` and `QueueFull`, `petrol_start`, `binary_numbers` |
| `algostudy.binary_tree` | `TreeNode`, `build_tree`, `tree_depth`, `in_order`, `swap_at_multiples`, `swap_nodes` |
| `algostudy.linked_list` | `Node`, `LinkedList` with push/pop, middle, cycle check, reversal, insertion and merge sort, front/back and alternating splits, shuffle and sorted merges, sorted intersection and `swap_kth`; `delete_node`, `add_two_numbers` |

## Examples

```python
from algostudy.numbers import count_set_bits, largest_number
from algostudy.queues import ArrayQueue, binary_numbers
from algostudy.linked_list import LinkedList, add_two_numbers
from algostudy.graphs import Graph

count_set_bits(13)                 # 3
largest_number([8, 89])            # "898"

queue = ArrayQueue(3)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                    # 1

binary_numbers(4)                  # ["1", "10", "11", "100"]

numbers = LinkedList([3, 1, 2])
numbers.merge_sort()
list(numbers)                      # [1, 2, 3]

list(add_two_numbers([2, 4, 3], [5, 6, 4]))   # [7, 0, 8]

graph = Graph(3)
graph.add_edge(0, 1, directed=True, weight=3.0)
graph.add_edge(1, 2, directed=True, weight=1.0)
graph.add_edge(0, 2, directed=True, weight=8.0)
graph.shortest_path(0, 2)          # 4.0
```

Operations that cannot succeed raise exceptions instead of returning sentinel
values: bad arguments raise `ValueError` or `IndexError`, an empty queue
raises `QueueEmpty`, and a full `ArrayQueue` raises `QueueFull`.

## What it does not do

This is a library only: it has no command-line program and reads no input
files. It also has no dynamic-programming routines such as coin change, edit
distance or knapsack, and no even/odd list rearrangement or list command
processing.