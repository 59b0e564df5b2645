"""Link-state routing: shortest paths by Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math

from routesim.node import Graph


def shortest_next_hops(network: Graph, source_name: str) -> dict[str, str]:
    """Return the next hop from ``source_name`` to every reachable router.

    Ties between equal-cost paths go to the path found first, with routers
    of equal distance explored in name order.
    """
    if source_name not in network:
        raise KeyError(source_name)

    dist: dict[str, float] = {name: math.inf for name in network}
    dist[source_name] = 0
    prev: dict[str, str] = {}
    heap: list[tuple[float, str]] = [(0, source_name)]

    while heap:
        current_dist, current = heapq.heappop(heap)
        if current_dist > dist[current]:
            continue
        for link in network[current].neighbors:
            if link.neighbor not in network:
                continue
            candidate = current_dist + link.cost
            if candidate < dist[link.neighbor]:
                dist[link.neighbor] = candidate
                prev[link.neighbor] = current
                heapq.heappush(heap, (candidate, link.neighbor))

    hops: dict[str, str] = {}
    for dest in network:
        if dest == source_name:
            continue
        current, first_hop = dest, None
        while current != source_name and current in prev:
            first_hop = current
            current = prev[current]
        if current == source_name and first_hop is not None:
            hops[dest] = first_hop
    return hops


def run_ospf(network: Graph, source_name: str) -> dict[str, str]:
    """Fill the source router's routing table with shortest-path next hops."""
    hops = shortest_next_hops(network, source_name)
    network[source_name].routing_table.update(hops)
    return hops