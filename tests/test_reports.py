from railnet.services import reports

from .networks import make_network, make_route


def test_network_name_and_route_names(notional_network):
    assert reports.network_name(notional_network) == "Notional Railway Company"
    assert reports.get_routes(notional_network) is notional_network.routes
    assert reports.route_names(notional_network) == [
        "Cambleton Line",
        "Northern Line",
        "Central Line",
    ]
    assert (
        reports.route_names_to_string(notional_network)
        == "Cambleton Line,\nNorthern Line,\nCentral Line"
    )


def test_get_route_and_stop(notional_network):
    northern = reports.get_route(notional_network, "Northern Line")

    assert northern is notional_network.routes[1]
    assert reports.get_stop(northern, "Tadcaster").station_name == "Tadcaster"
    assert reports.get_stop(northern, "Dunmore") is None
    assert reports.get_route(notional_network, "Victoria Line") is None


def test_route_distance(notional_network):
    distances = [reports.route_distance(route) for route in notional_network.routes]

    assert distances == [75, 90, 75]


def test_route_to_string(notional_network):
    cambleton = notional_network.routes[0]

    assert reports.route_to_string(cambleton) == (
        "ROUTE: Cambleton Line(Magenta)\n"
        "STATIONS:\n"
        "1 Campbell Glen 0 miles\n"
        "2 Bridgeford 25 miles\n"
        "3 Tadcaster 55 miles\n"
        "4 Dunmore 75 miles\n"
        "Total Route Distance: 75 miles"
    )


def test_route_summary(notional_network):
    summary = reports.route_summary(notional_network)
    lines = summary.splitlines()

    assert lines[:2] == ["Routes Summary", "=============="]
    assert len(lines) == 5
    assert lines[3].startswith("Northern Line")
    assert "Ashwick" in lines[3]
    assert "Kingsbury" in lines[3]
    assert lines[3].endswith("90 miles")
    assert lines[3] == (
        f"{'Northern Line':<25}-{'Ashwick':<25}{'Kingsbury':<25}-{'90':>15} miles"
    )


def test_route_summary_leaves_termini_blank_for_empty_route():
    network = make_network(make_route("Ghost Line", [], []))

    row = reports.route_summary(network).splitlines()[2]

    assert row == f"{'Ghost Line':<25}-{'':<50}-{'0':>15} miles"


def test_total_stations(notional_network):
    assert reports.total_stations(notional_network) == 8


def test_find_longest_route(notional_network):
    assert reports.find_longest_route(notional_network).name == "Northern Line"
    assert reports.find_longest_route(make_network()) is None


def test_sort_routes_by_name(notional_network):
    ascending = reports.sort_routes_by_name(notional_network)
    descending = reports.sort_routes_by_name(notional_network, ascending=False)

    assert reports.route_names(ascending) == [
        "Cambleton Line",
        "Central Line",
        "Northern Line",
    ]
    assert reports.route_names(descending) == [
        "Northern Line",
        "Central Line",
        "Cambleton Line",
    ]
    # the source network is left as loaded
    assert reports.route_names(notional_network)[0] == "Cambleton Line"


def test_sort_routes_by_length(notional_network):
    ascending = reports.sort_routes_by_length(notional_network)
    descending = reports.sort_routes_by_length(notional_network, ascending=False)

    assert reports.route_names(ascending) == [
        "Cambleton Line",
        "Central Line",
        "Northern Line",
    ]
    assert reports.route_names(descending)[0] == "Northern Line"


def test_find_direct_route_forward_and_backward(notional_network):
    assert (
        reports.find_direct_route(notional_network, "Tadcaster", "Kingsbury")
        == "Northern Line: Tadcaster to Kingsbury 2 stops and 75 miles"
    )
    assert (
        reports.find_direct_route(notional_network, "Kingsbury", "Tadcaster")
        == "Northern Line: Kingsbury to Tadcaster 2 stops and 77 miles"
    )


def test_find_direct_route_reports_last_matching_route():
    network = make_network(
        make_route("Slow", ["A", "X", "B"], [5, 5]),
        make_route("Fast", ["A", "B"], [7]),
    )

    assert reports.find_direct_route(network, "A", "B") == "Fast: A to B 1 stops and 7 miles"


def test_find_direct_route_missing(notional_network):
    assert (
        reports.find_direct_route(notional_network, "Campbell Glen", "Kingsbury")
        == "No direct route found between Campbell Glen and Kingsbury"
    )
