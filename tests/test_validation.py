from railnet.domain.models import Route, Stop
from railnet.services.validation import describe_conflicts, find_station_conflicts

from .networks import make_network


def _stop(number, name, station_id):
    return Stop(number=number, station_name=name, station_id=station_id)


def test_clean_network(notional_network):
    conflicts = find_station_conflicts(notional_network)

    assert conflicts.is_clean
    assert describe_conflicts(conflicts) == "No station conflicts found"


def test_reports_shared_names_and_renamed_ids(caplog):
    network = make_network(
        Route("One", (_stop(1, "Newport", 10), _stop(2, "Carlisle", 11))),
        Route("Two", (_stop(1, "Newport", 20), _stop(2, "Carlise", 11))),
    )

    conflicts = find_station_conflicts(network)

    assert not conflicts.is_clean
    assert conflicts.shared_names == {"Newport": (10, 20)}
    assert conflicts.renamed_ids == {11: ("Carlise", "Carlisle")}
    text = describe_conflicts(conflicts)
    assert "Station name 'Newport' is used by ids 10, 20" in text
    assert "Station id 11 is named 'Carlise', 'Carlisle'" in text
    assert "Station name conflicts detected" in caplog.text
