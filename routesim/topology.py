"""Topology description files: routers and the links between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from routesim.node import Graph, Node


@dataclass
class NodeInfo:
    """The protocol a router runs."""

    protocol: str


@dataclass
class LinkInfo:
    """A bidirectional link between two routers."""

    node1: str
    node2: str
    cost: int
    bandwidth: int


@dataclass
class Topology:
    """Routers and links read from a topology file."""

    nodes: dict[str, NodeInfo] = field(default_factory=dict)
    links: list[LinkInfo] = field(default_factory=list)

    def load_from_file(self, filename: str | PathLike[str]) -> None:
        """Read a topology file.

        Lines beginning with ``R`` declare a router (``R1 OSPF``); any other
        non-comment line declares a link (``A B 10 100``).
        """
        with open(filename, encoding="utf-8") as stream:
            for raw in stream:
                line = raw.rstrip("\n")
                if not line or line.startswith("#") or not line.strip():
                    continue
                tokens = line.split()
                if line.startswith("R"):
                    protocol = tokens[1] if len(tokens) > 1 else ""
                    self.nodes[tokens[0]] = NodeInfo(protocol)
                else:
                    self.links.append(_parse_link(tokens, line))

    def build_graph(self) -> Graph:
        """Build routers with their neighbours from the loaded description."""
        graph: Graph = {
            name: Node(name, info.protocol) for name, info in sorted(self.nodes.items())
        }
        for link in self.links:
            for here, there in ((link.node1, link.node2), (link.node2, link.node1)):
                node = graph.setdefault(here, Node(here, ""))
                node.add_neighbor(there, link.cost, link.bandwidth)
        return graph


def _parse_link(tokens: list[str], line: str) -> LinkInfo:
    if len(tokens) < 4:
        raise ValueError(f"malformed link line: {line!r}")
    try:
        cost, bandwidth = int(tokens[2]), int(tokens[3])
    except ValueError as exc:
        raise ValueError(f"malformed link line: {line!r}") from exc
    return LinkInfo(tokens[0], tokens[1], cost, bandwidth)