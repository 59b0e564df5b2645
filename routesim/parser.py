"""Sectioned topology files with ``# Nodes`` and ``# Links`` headers."""

from __future__ import annotations

from os import PathLike

from routesim.node import Graph, Node


def load_topology(filename: str | PathLike[str]) -> Graph:
    """Read a sectioned topology file into a graph of routers.

    Links naming a router that has not been declared are ignored.
    """
    graph: Graph = {}
    reading_nodes = reading_links = False
    with open(filename, encoding="utf-8") as stream:
        for raw in stream:
            line = raw.rstrip("\n")
            if not line or line.startswith("#"):
                if "# Nodes" in line:
                    reading_nodes, reading_links = True, False
                elif "# Links" in line:
                    reading_nodes, reading_links = False, True
                continue
            tokens = line.split()
            if not tokens:
                continue
            if reading_nodes:
                name = tokens[0]
                protocol = tokens[1] if len(tokens) > 1 else ""
                graph[name] = Node(name, protocol)
            elif reading_links:
                if len(tokens) < 4:
                    raise ValueError(f"malformed link line: {line!r}")
                first, second = tokens[0], tokens[1]
                try:
                    cost, bandwidth = int(tokens[2]), int(tokens[3])
                except ValueError as exc:
                    raise ValueError(f"malformed link line: {line!r}") from exc
                if first in graph and second in graph:
                    graph[first].add_neighbor(second, cost, bandwidth)
                    graph[second].add_neighbor(first, cost, bandwidth)
    return graph