"""Distance-vector routing with composite cost, modelled on link costs."""

from __future__ import annotations

from routesim.node import Graph
from routesim.ospf import shortest_next_hops


def run_eigrp(network: Graph, source_name: str) -> dict[str, str]:
    """Fill the source router's routing table with lowest-cost next hops."""
    hops = shortest_next_hops(network, source_name)
    network[source_name].routing_table.update(hops)
    return hops