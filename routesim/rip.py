"""A single round of distance-vector exchange."""

from __future__ import annotations

from routesim.node import Graph


def run_rip(network: Graph, source_name: str) -> None:
    """Rebuild the source's table from one exchange with its neighbours.

    The source marks itself ``-`` and every other known router as unresolved
    (empty). Each neighbour, in link order, then offers its own table; any
    still-unresolved destination is routed through the first neighbour that
    knows of it, and each neighbour is reachable directly.
    """
    source = network[source_name]
    table = source.routing_table
    for name in network:
        table[name] = "-" if name == source_name else ""

    for link in source.neighbors:
        neighbour_name = link.neighbor
        neighbour = network[neighbour_name]
        for dest in list(neighbour.routing_table):
            if dest == source_name:
                continue
            if not table.get(dest):
                table[dest] = neighbour_name
        if not table.get(neighbour_name):
            table[neighbour_name] = neighbour_name