"""Routing protocol simulator: OSPF, RIP, EIGRP and BGP routing tables from text topologies."""

__version__ = "0.1.0"