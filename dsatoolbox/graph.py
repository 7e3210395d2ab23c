"""Undirected graph stored as an adjacency list."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import TextIO

from .input_parser import parse_ints


class Graph:
    """An undirected graph whose nodes are integers."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[int]] = {}

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, []).append(u)

    def load_from_text(self, text: str) -> None:
        """Add the edges described by ``text``.

        The text starts with a node count and an edge count, followed by
        that many pairs of node numbers.
        """
        values = parse_ints(text)
        if len(values) < 2:
            raise ValueError("graph data must start with node and edge counts")
        edge_count = max(values[1], 0)
        endpoints = values[2 : 2 + 2 * edge_count]
        if len(endpoints) < 2 * edge_count:
            raise ValueError(
                f"expected {edge_count} edges, found {len(endpoints) // 2}"
            )
        for u, v in zip(endpoints[::2], endpoints[1::2]):
            self.add_edge(u, v)

    def load_from_file(self, path: str | os.PathLike[str]) -> None:
        """Add the edges described by the file at ``path``."""
        with open(path, encoding="utf-8") as handle:
            self.load_from_text(handle.read())

    def dfs(self, start: int) -> list[int]:
        """Return the nodes reachable from ``start`` in depth-first order."""
        order = [start]
        visited = {start}
        stack = [iter(self._adjacency.get(start, ()))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adjacency.get(neighbor, ())))
                    break
            else:
                stack.pop()
        return order

    def adjacency_lines(self) -> Iterator[str]:
        """Yield one ``Node n: a b ...`` line per node."""
        for node, neighbors in self._adjacency.items():
            yield f"Node {node}: " + "".join(f"{n} " for n in neighbors)

    def print_adjacency(self, stream: TextIO | None = None) -> None:
        """Write the adjacency lines to ``stream`` (standard output by default)."""
        out = sys.stdout if stream is None else stream
        for line in self.adjacency_lines():
            out.write(line + "\n")