"""Routers, the links between them and their routing tables."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(frozen=True)
class Link:
    """A link from one router to a neighbour."""

    neighbor: str
    cost: int
    bandwidth: int


@dataclass
class Node:
    """A router running an interior routing protocol."""

    name: str
    protocol: str
    neighbors: list[Link] = field(default_factory=list)
    routing_table: dict[str, str] = field(default_factory=dict)

    def add_neighbor(self, neighbor_name: str, cost: int, bandwidth: int) -> None:
        """Record a link to ``neighbor_name``."""
        self.neighbors.append(Link(neighbor_name, cost, bandwidth))

    def format_routing_table(self) -> str:
        """Render the routing table, destinations in sorted order."""
        lines = [f"Routing Table for Node {self.name} ({self.protocol}):"]
        lines.extend(
            f"  Destination: {dest} -> Next Hop: {hop}"
            for dest, hop in sorted(self.routing_table.items())
        )
        return "\n".join(lines) + "\n\n"

    def print_routing_table(self, file: TextIO | None = None) -> None:
        """Write the routing table to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        out.write(self.format_routing_table())


Graph = dict[str, Node]