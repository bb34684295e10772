"""Classic data structures and algorithms in plain Python: trees, graphs, heaps,
hash tables, tries, linked lists, stacks, queues, sorting, greedy methods,
knapsack and backtracking."""

__version__ = "0.1.0"