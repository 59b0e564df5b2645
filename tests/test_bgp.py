import io

import pytest

from routesim.bgp import BGPNode, BGPRoute

PREFIX = "10.1.0.0/16"


def test_advertise_originates_route():
    node = BGPNode(1, 65001)
    node.advertise_route(PREFIX)
    assert node.export_routes() == [BGPRoute(PREFIX, [65001], "self")]
    assert node.asn == 65001


def test_chain_of_three_systems():
    r1, r2, r3 = BGPNode(1, 65001), BGPNode(2, 65002), BGPNode(3, 65003)
    r1.advertise_route(PREFIX)
    for route in r1.export_routes():
        r2.receive_route(route)
    for route in r2.export_routes():
        r3.receive_route(route)
    assert r2.export_routes() == [BGPRoute(PREFIX, [65002, 65001], "via ASN 65001")]
    assert r3.export_routes() == [
        BGPRoute(PREFIX, [65003, 65002, 65001], "via ASN 65002")
    ]


def test_loop_is_rejected():
    node = BGPNode(1, 65001)
    node.receive_route(BGPRoute(PREFIX, [65002, 65001], "x"))
    assert node.export_routes() == []


def test_shorter_path_replaces_and_equal_does_not():
    node = BGPNode(1, 65001)
    node.receive_route(BGPRoute(PREFIX, [65003, 65004], "x"))
    node.receive_route(BGPRoute(PREFIX, [65005, 65006], "x"))
    assert node.export_routes()[0].as_path == [65001, 65003, 65004]
    node.receive_route(BGPRoute(PREFIX, [65007], "x"))
    assert node.export_routes()[0].as_path == [65001, 65007]


def test_own_route_not_replaced_by_learnt_one():
    node = BGPNode(1, 65001)
    node.advertise_route(PREFIX)
    node.receive_route(BGPRoute(PREFIX, [65002], "x"))
    assert node.export_routes() == [BGPRoute(PREFIX, [65001], "self")]


def test_withdraw_route():
    node = BGPNode(1, 65001)
    node.advertise_route(PREFIX)
    node.withdraw_route(PREFIX)
    node.withdraw_route("absent")
    assert node.export_routes() == []


def test_exported_routes_are_copies():
    node = BGPNode(1, 65001)
    node.advertise_route(PREFIX)
    exported = node.export_routes()
    exported[0].as_path.append(1)
    assert node.export_routes()[0].as_path == [65001]


def test_empty_path_raises():
    with pytest.raises(ValueError):
        BGPNode(1, 65001).receive_route(BGPRoute(PREFIX, [], ""))


def test_format_routing_table():
    node = BGPNode(1, 65001)
    node.advertise_route(PREFIX)
    expected = "\nBGP Table [AS 65001]:\n  10.1.0.0/16 via 65001 | Next hop: self\n"
    assert node.format_routing_table() == expected
    buffer = io.StringIO()
    node.display_routing_table(buffer)
    assert buffer.getvalue() == expected