"""Sorting, heaps, linked lists, stacks, queues, backtracking and star patterns."""

__version__ = "0.1.0"