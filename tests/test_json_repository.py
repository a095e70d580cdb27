import json

import pytest
from pydantic import ValidationError

from railnet.adapters.network import JSONNetworkRepository
from railnet.config import NetworkConfig
from railnet.domain.errors import NetworkLoadError

from .networks import DATA_DIR


def _write(tmp_path, payload):
    path = tmp_path / "network.json"
    path.write_text(
        payload if isinstance(payload, str) else json.dumps(payload),
        encoding="utf-8",
    )
    return path


def test_loads_notional_network():
    network = JSONNetworkRepository(DATA_DIR / "notional_ra.json").load()

    assert network.network_name == "Notional Railway Company"
    assert len(network.routes) == 3
    first_route = network.routes[0]
    assert first_route.name == "Cambleton Line"
    assert first_route.color == "Magenta"
    first_stop = first_route.stops[0]
    assert first_stop.number == 1
    assert first_stop.station_name == "Campbell Glen"
    assert first_stop.station_id == 1
    # written as "25" in the file
    assert first_stop.distance_to_next == 25.0
    assert first_stop.distance_to_prev is None


@pytest.mark.parametrize("field", ["distanceToNext", "distanceToPrev"])
def test_boolean_distance_is_rejected(tmp_path, field):
    stops = [
        {"stop": 1, "stationName": "A", "stationID": 1, "distanceToNext": 10},
        {"stop": 2, "stationName": "B", "stationID": 2, "distanceToPrev": 10},
    ]
    stops[0 if field == "distanceToNext" else 1][field] = True
    path = _write(
        tmp_path,
        {"networkName": "Flags", "routes": [{"name": "Line", "stops": stops}]},
    )

    with pytest.raises(NetworkLoadError) as excinfo:
        JSONNetworkRepository(path).load()

    assert isinstance(excinfo.value.cause, ValidationError)


def test_load_is_cached():
    repository = JSONNetworkRepository(DATA_DIR / "simpleton_railway.json")

    first = repository.load()
    assert repository.load() is first

    repository.clear_cache()
    reloaded = repository.load()
    assert reloaded is not first
    assert reloaded == first


def test_missing_file_raises(tmp_path):
    path = tmp_path / "absent.json"

    with pytest.raises(NetworkLoadError) as excinfo:
        JSONNetworkRepository(path).load()

    assert excinfo.value.file_path == str(path)
    assert isinstance(excinfo.value.cause, OSError)


def test_broken_json_raises(tmp_path):
    path = _write(tmp_path, '{"networkName": "Broken", "routes": [')

    with pytest.raises(NetworkLoadError) as excinfo:
        JSONNetworkRepository(path).load()

    assert isinstance(excinfo.value.cause, ValidationError)


@pytest.mark.parametrize(
    "stop",
    [
        {"stop": 1, "stationID": 1},
        {"stop": 1, "stationName": "A", "stationID": 1, "distanceToNext": "far"},
        {"stop": 0, "stationName": "A", "stationID": 1},
    ],
)
def test_schema_violations_raise(tmp_path, stop):
    path = _write(
        tmp_path,
        {"networkName": "Bad", "routes": [{"name": "Line", "stops": [stop]}]},
    )

    with pytest.raises(NetworkLoadError):
        JSONNetworkRepository(path).load()


def test_from_config_resolves_against_data_dir():
    config = NetworkConfig(data_dir=DATA_DIR)

    named = JSONNetworkRepository.from_config(config, "simpleton_railway.json")
    default = JSONNetworkRepository.from_config(config)

    assert named.path == DATA_DIR / "simpleton_railway.json"
    assert default.path == DATA_DIR / "notional_ra.json"
    assert named.load().network_name == "Simpleton Railway"
