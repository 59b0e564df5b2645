"""Path-vector routing between autonomous systems."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class BGPRoute:
    """A route to a prefix with the AS path it was learnt over."""

    destination: str
    as_path: list[int] = field(default_factory=list)
    next_hop: str = ""

    def copy(self) -> BGPRoute:
        return BGPRoute(self.destination, list(self.as_path), self.next_hop)


class BGPNode:
    """A border router belonging to one autonomous system."""

    def __init__(self, node_id: int, asn: int) -> None:
        self.node_id = node_id
        self._asn = asn
        self._routes: dict[str, BGPRoute] = {}

    @property
    def asn(self) -> int:
        return self._asn

    def advertise_route(self, destination: str) -> None:
        """Originate a route to ``destination`` from this AS."""
        self._routes[destination] = BGPRoute(destination, [self._asn], "self")

    def receive_route(self, route: BGPRoute) -> None:
        """Consider a route offered by a peer.

        Routes whose path already holds this AS are dropped; otherwise the
        route is kept if it is new or strictly shorter once this AS is added.
        """
        if self._asn in route.as_path:
            return
        if not route.as_path:
            raise ValueError(f"route to {route.destination} has an empty AS path")
        current = self._routes.get(route.destination)
        if current is None or len(route.as_path) + 1 < len(current.as_path):
            self._routes[route.destination] = BGPRoute(
                route.destination,
                [self._asn, *route.as_path],
                f"via ASN {route.as_path[0]}",
            )

    def withdraw_route(self, destination: str) -> None:
        """Forget the route to ``destination`` if there is one."""
        self._routes.pop(destination, None)

    def export_routes(self) -> list[BGPRoute]:
        """Return copies of all known routes, ordered by destination."""
        return [route.copy() for _, route in sorted(self._routes.items())]

    def format_routing_table(self) -> str:
        """Render the BGP table, destinations in sorted order."""
        parts = [f"\nBGP Table [AS {self._asn}]:\n"]
        for route in self.export_routes():
            path = "".join(f"{asn} " for asn in route.as_path)
            parts.append(f"  {route.destination} via {path}| Next hop: {route.next_hop}\n")
        return "".join(parts)

    def display_routing_table(self, file: TextIO | None = None) -> None:
        """Write the BGP table to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        out.write(self.format_routing_table())