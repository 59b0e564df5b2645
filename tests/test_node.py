import io

from routesim.node import Link, Node


def test_add_neighbor_records_link():
    node = Node("A", "OSPF")
    node.add_neighbor("B", 5, 100)
    node.add_neighbor("C", 2, 10)
    assert node.neighbors == [Link("B", 5, 100), Link("C", 2, 10)]


def test_new_node_has_empty_state():
    node = Node("A", "RIP")
    assert node.neighbors == []
    assert node.routing_table == {}


def test_format_routing_table_sorted():
    node = Node("A", "OSPF")
    node.routing_table["C"] = "B"
    node.routing_table["B"] = "B"
    expected = (
        "Routing Table for Node A (OSPF):\n"
        "  Destination: B -> Next Hop: B\n"
        "  Destination: C -> Next Hop: B\n"
        "\n"
    )
    assert node.format_routing_table() == expected


def test_format_empty_table():
    node = Node("X", "EIGRP")
    assert node.format_routing_table() == "Routing Table for Node X (EIGRP):\n\n"


def test_print_routing_table_to_file():
    node = Node("A", "RIP")
    node.routing_table["A"] = "-"
    buffer = io.StringIO()
    node.print_routing_table(buffer)
    assert buffer.getvalue() == node.format_routing_table()


def test_print_routing_table_defaults_to_stdout(capsys):
    node = Node("A", "RIP")
    node.routing_table["B"] = "B"
    node.print_routing_table()
    assert capsys.readouterr().out == node.format_routing_table()