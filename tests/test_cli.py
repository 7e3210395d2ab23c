import re

import pytest

from dsatoolbox.cli import main


@pytest.fixture
def numbers_file(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("3 1 2", encoding="utf-8")
    return path


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("3 2\n0 1\n1 2\n", encoding="utf-8")
    return path


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "dsa-toolbox sort --algo quicksort|mergesort --input file" in capsys.readouterr().err


def test_unknown_command(capsys):
    assert main(["frobnicate"]) == 1
    assert "Invalid command" in capsys.readouterr().err


@pytest.mark.parametrize("algo", ["quicksort", "mergesort"])
def test_sort_command(capsys, numbers_file, algo):
    assert main(["sort", "--algo", algo, "--input", str(numbers_file)]) == 0
    out = capsys.readouterr().out
    assert out == "Before sorting: 3 1 2 \nAfter sorting: 1 2 3 \n"


def test_sort_with_bad_flags(capsys, numbers_file):
    assert main(["sort", "--method", "quicksort", "--input", str(numbers_file)]) == 1
    assert capsys.readouterr().err.startswith("Usage: dsa-toolbox sort")


def test_sort_unknown_algorithm(capsys, numbers_file):
    assert main(["sort", "--algo", "bogosort", "--input", str(numbers_file)]) == 1
    captured = capsys.readouterr()
    assert "Unknown algorithm: bogosort" in captured.err
    assert captured.out.startswith("Before sorting:")


def test_sort_missing_file(capsys, tmp_path):
    missing = tmp_path / "missing.txt"
    assert main(["sort", "--algo", "quicksort", "--input", str(missing)]) == 1
    err = capsys.readouterr().err
    assert f"Error opening file: {missing}" in err
    assert "Error: Input file is empty or not found." in err


def test_benchmark_sort(capsys, numbers_file):
    assert main(["benchmark-sort", "--input", str(numbers_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"QuickSort took: \d+ microseconds", lines[0])
    assert re.fullmatch(r"MergeSort took: \d+ microseconds", lines[1])


def test_benchmark_sort_usage(capsys):
    assert main(["benchmark-sort"]) == 1
    assert "Usage: dsa-toolbox benchmark --input file" in capsys.readouterr().err


def test_benchmark_graph(capsys, graph_file):
    assert main(["benchmark-graph", "--input", str(graph_file)]) == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"0 1 2 Graph traversal took: \d+ microseconds\n", out)


def test_graph_dfs(capsys, graph_file):
    assert main(["graph", "--algo", "dfs", "--input", str(graph_file)]) == 0
    assert capsys.readouterr().out == (
        "DFS traversal: 0 1 2 \nNode 0: 1 \nNode 1: 0 2 \nNode 2: 1 \n"
    )


def test_graph_unknown_algorithm(capsys, graph_file):
    assert main(["graph", "--algo", "bfs", "--input", str(graph_file)]) == 1
    assert "Unknown graph algorithm: bfs" in capsys.readouterr().err


def test_graph_malformed_file(capsys, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("3 2\n0 1\n", encoding="utf-8")
    assert main(["graph", "--algo", "dfs", "--input", str(path)]) == 1
    assert "Error reading graph" in capsys.readouterr().err