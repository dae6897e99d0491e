"""Classic algorithm patterns grouped by technique: arrays, two pointers,
sliding windows, dynamic programming, integers, hashing, stacks, queues,
prefix sums, strings, linked lists, grids and trees."""

__version__ = "0.1.0"