"""Command line entry point: sorting, graph traversal and benchmarks."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, MutableSequence, Sequence

from .graph import Graph
from .input_parser import read_int_file
from .sorting import merge_sort, quick_sort

USAGE = (
    "Usage:\n"
    "  dsa-toolbox sort --algo quicksort|mergesort --input file\n"
    "  dsa-toolbox benchmark --input file\n"
)
SORT_USAGE = "Usage: dsa-toolbox sort --algo quicksort|mergesort --input file\n"
BENCHMARK_USAGE = "Usage: dsa-toolbox benchmark --input file\n"
BENCHMARK_GRAPH_USAGE = "Usage: dsa-toolbox benchmark-graph --input file\n"
GRAPH_USAGE = "Usage: dsa-toolbox graph --algo dfs --input file\n"
EMPTY_INPUT = "Error: Input file is empty or not found.\n"

SORTERS: dict[str, Callable[[MutableSequence[int]], None]] = {
    "quicksort": quick_sort,
    "mergesort": merge_sort,
}


def _error(message: str) -> None:
    sys.stderr.write(message)


def _spaced(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def _load_numbers(path: str) -> list[int] | None:
    try:
        data = read_int_file(path)
    except OSError:
        _error(f"Error opening file: {path}\n")
        data = []
    if not data:
        _error(EMPTY_INPUT)
        return None
    return data


def _load_graph(path: str) -> Graph | None:
    graph = Graph()
    try:
        graph.load_from_file(path)
    except OSError:
        _error(f"Error opening file: {path}\n")
        return None
    except ValueError as exc:
        _error(f"Error reading graph: {exc}\n")
        return None
    return graph


def _timed_microseconds(action: Callable[[], object]) -> tuple[object, int]:
    start = time.perf_counter_ns()
    result = action()
    return result, (time.perf_counter_ns() - start) // 1000


def _sort(args: list[str]) -> int:
    if len(args) < 4 or args[0] != "--algo" or args[2] != "--input":
        _error(SORT_USAGE)
        return 1
    algo, path = args[1], args[3]
    data = _load_numbers(path)
    if data is None:
        return 1
    print(f"Before sorting: {_spaced(data)}")
    sorter = SORTERS.get(algo)
    if sorter is None:
        _error(f"Unknown algorithm: {algo}\n")
        return 1
    sorter(data)
    print(f"After sorting: {_spaced(data)}")
    return 0


def _benchmark_sort(args: list[str]) -> int:
    if len(args) < 2 or args[0] != "--input":
        _error(BENCHMARK_USAGE)
        return 1
    data = _load_numbers(args[1])
    if data is None:
        return 1
    for label, sorter in (("QuickSort", quick_sort), ("MergeSort", merge_sort)):
        copy = list(data)
        _, elapsed = _timed_microseconds(lambda: sorter(copy))
        print(f"{label} took: {elapsed} microseconds")
    return 0


def _benchmark_graph(args: list[str]) -> int:
    if len(args) < 2:
        _error(BENCHMARK_GRAPH_USAGE)
        return 1
    path = args[1]
    if _load_numbers(path) is None:
        return 1
    graph = _load_graph(path)
    if graph is None:
        return 1
    order, elapsed = _timed_microseconds(lambda: graph.dfs(0))
    print(_spaced(order), end="")
    print(f"Graph traversal took: {elapsed} microseconds")
    return 0


def _graph(args: list[str]) -> int:
    if len(args) < 4 or args[0] != "--algo" or args[2] != "--input":
        _error(GRAPH_USAGE)
        return 1
    algo, path = args[1], args[3]
    if algo != "dfs":
        _error(f"Unknown graph algorithm: {algo}\n")
        return 1
    graph = _load_graph(path)
    if graph is None:
        return 1
    print(f"DFS traversal: {_spaced(graph.dfs(0))}")
    graph.print_adjacency(sys.stdout)
    return 0


_COMMANDS: dict[str, Callable[[list[str]], int]] = {
    "sort": _sort,
    "benchmark-sort": _benchmark_sort,
    "benchmark-graph": _benchmark_graph,
    "graph": _graph,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        _error(USAGE)
        return 1
    action, *rest = args
    command = _COMMANDS.get(action)
    if command is None:
        _error("Invalid command. Use 'sort' or 'benchmark or graph'.\n")
        return 1
    return command(rest)


if __name__ == "__main__":
    sys.exit(main())