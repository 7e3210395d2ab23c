"""Quicksort, merge sort, depth-first graph traversal and a command-line tool around them."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "input_parser", "sorting"]