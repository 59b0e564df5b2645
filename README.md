# routesim

A small routing protocol simulator. It reads a network topology from a plain
text file, builds a routing table for every router according to the protocol
that router runs, and prints the resulting tables.

Protocols:

- **OSPF** (`routesim.ospf.run_ospf`) and **EIGRP** (`routesim.eigrp.run_eigrp`):
  shortest-path next hops by link cost, computed with Dijkstra's algorithm
  (`routesim.ospf.shortest_next_hops`). Both use the same cost model.
- **RIP** (`routesim.rip.run_rip`): a single round of distance-vector exchange
  with the router's direct neighbours. Destinations no neighbour knows of stay
  in the table with an empty next hop; the router itself is marked `-`.
- **BGP** (`routesim.bgp.BGPNode`): path-vector route advertisement with AS-path
  loop prevention; a received route replaces a known one only if it is strictly
  shorter.

## Installation

```
pip install .
```

## Topology files

`routesim.topology.Topology.load_from_file` reads the format used by the
command. Blank lines and lines starting with `#` are ignored. A line starting
with `R` declares a router and its protocol (`R1 OSPF`). Any other line
declares a link: two router names, an integer cost and an integer bandwidth.
Because every line beginning with `R` is taken as a router, link lines between
`R`-named routers must be indented:

```
# Nodes
R1 OSPF
R2 OSPF
R3 OSPF
R4 RIP
# Links
  R1 R2 10 100
  R2 R3 5 100
  R1 R3 20 100
  R3 R4 1 100
```

A link line with fewer than four fields, or a cost or bandwidth that is not an
integer, raises `ValueError`.

`Topology.build_graph()` turns the loaded description into a dictionary of
`routesim.node.Node` objects with their neighbours; a router named only in a
link is created with an empty protocol.

A second loader, `routesim.parser.load_topology(filename)`, reads files
divided into sections by a `# Nodes` header and a `# Links` header. Inside
these sections lines need no particular prefix, and links naming an undeclared
router are ignored. It returns the graph directly.

## Command line

```
routesim topology.txt
```

The command loads the file with `Topology`, then (`routesim.cli.simulate`):

1. creates a `Node` for every non-BGP router and a `BGPNode` for every BGP
   router; BGP routers take their AS number from a fixed table
   (`R1 -> 65001`, `R2 -> 65002`, `R3 -> 65003`), and a BGP router not in that
   table is reported as `ASN not defined for BGP node: <name>` on standard
   error and left out;
2. adds links, in both directions, between routers that are not BGP routers;
3. runs each router's protocol, routers taken in name order;
4. has `R1` advertise `10.1.0.0/16`, passes `R1`'s routes to `R2` and then
   `R2`'s routes to `R3`, as far as those BGP routers exist.

It prints the routing table of every non-BGP router followed by the BGP table
of every BGP router, both in name order. Without an argument it prints a usage
line and exits with status 1; a file that cannot be opened or a malformed link
line also gives status 1.

## Library use

```python
from routesim.topology import Topology
from routesim.ospf import run_ospf

topology = Topology()
topology.load_from_file("topology.txt")
graph = topology.build_graph()

hops = run_ospf(graph, "R1")          # also stored in graph["R1"].routing_table
print(graph["R1"].format_routing_table())
```

BGP routers can be driven directly:

```python
from routesim.bgp import BGPNode

r1 = BGPNode(1, 65001)
r2 = BGPNode(2, 65002)
r1.advertise_route("10.1.0.0/16")
for route in r1.export_routes():
    r2.receive_route(route)
print(r2.format_routing_table())
```

`print_routing_table(file)` and `display_routing_table(file)` write the same
text to a stream, standard output by default. `withdraw_route(destination)`
removes a route; `BGPNode.asn` gives the router's AS number.

## Limitations

- BGP peering is not taken from the topology: links to BGP routers are ignored,
  and the command only exchanges routes along the fixed chain `R1 -> R2 -> R3`.
- RIP performs one exchange round only, so its result depends on which
  neighbours have already filled their tables.
- Bandwidth is recorded on links but not used in any cost calculation.
- Nothing runs continuously or over a real network; each run computes the
  tables once and prints them.

## Running the tests

```
pip install .[test]
pytest
```