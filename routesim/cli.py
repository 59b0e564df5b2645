"""Command-line entry point: load a topology, run each router's protocol, print tables."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from routesim.bgp import BGPNode
from routesim.eigrp import run_eigrp
from routesim.node import Graph, Node
from routesim.ospf import run_ospf
from routesim.rip import run_rip
from routesim.topology import Topology

BGP_ASN: dict[str, int] = {"R1": 65001, "R2": 65002, "R3": 65003}
ADVERTISED_PREFIX = "10.1.0.0/16"

_INTERIOR_PROTOCOLS = {
    "OSPF": run_ospf,
    "RIP": run_rip,
    "EIGRP": run_eigrp,
}


@dataclass
class Simulation:
    """Routers after a simulation run."""

    graph: Graph = field(default_factory=dict)
    bgp_nodes: dict[str, BGPNode] = field(default_factory=dict)
    missing_asn: list[str] = field(default_factory=list)

    def write(self, out: TextIO) -> None:
        """Write every interior routing table, then every BGP table."""
        for name in sorted(self.graph):
            self.graph[name].print_routing_table(out)
        for name in sorted(self.bgp_nodes):
            self.bgp_nodes[name].display_routing_table(out)


def _bgp_node_id(name: str) -> int:
    digit = name[1:2]
    if not digit.isdigit():
        raise ValueError(f"cannot derive a node id from {name!r}")
    return int(digit)


def simulate(topology: Topology) -> Simulation:
    """Build routers from ``topology``, run their protocols and exchange BGP routes.

    BGP routers take their AS number from a fixed table; a BGP router not in
    that table is left out and recorded in ``missing_asn``. Links are only
    made between routers that run interior protocols.
    """
    result = Simulation()

    for name, info in sorted(topology.nodes.items()):
        if info.protocol == "BGP":
            asn = BGP_ASN.get(name)
            if asn is None:
                result.missing_asn.append(name)
                continue
            result.bgp_nodes[name] = BGPNode(_bgp_node_id(name), asn)
        else:
            result.graph[name] = Node(name, info.protocol)

    graph = result.graph
    for link in topology.links:
        if link.node1 in graph and link.node2 in graph:
            graph[link.node1].add_neighbor(link.node2, link.cost, link.bandwidth)
            graph[link.node2].add_neighbor(link.node1, link.cost, link.bandwidth)

    for name in sorted(graph):
        run = _INTERIOR_PROTOCOLS.get(graph[name].protocol)
        if run is not None:
            run(graph, name)

    bgp = result.bgp_nodes
    if "R1" in bgp:
        bgp["R1"].advertise_route(ADVERTISED_PREFIX)
        if "R2" in bgp:
            for route in bgp["R1"].export_routes():
                bgp["R2"].receive_route(route)
            if "R3" in bgp:
                for route in bgp["R2"].export_routes():
                    bgp["R3"].receive_route(route)

    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator on the topology file named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: routesim <topology_file>", file=sys.stderr)
        return 1

    filename = args[0]
    topology = Topology()
    try:
        topology.load_from_file(filename)
    except OSError as exc:
        print(f"Error: Cannot open {filename}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = simulate(topology)
    for name in result.missing_asn:
        print(f"ASN not defined for BGP node: {name}", file=sys.stderr)
    result.write(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())