"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from railnet.adapters.network import JSONNetworkRepository
from railnet.config import reset_config
from railnet.graph import build_graph

from .networks import DATA_DIR, make_route


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def notional_network():
    return JSONNetworkRepository(DATA_DIR / "notional_ra.json").load()


@pytest.fixture
def notional_graph(notional_network):
    return build_graph(notional_network)


@pytest.fixture
def simpleton_graph():
    return build_graph(JSONNetworkRepository(DATA_DIR / "simpleton_railway.json").load())


@pytest.fixture
def loop_graph():
    return build_graph(JSONNetworkRepository(DATA_DIR / "loop_railway.json").load())


@pytest.fixture
def complete_graph():
    """Five stations, every pair joined by its own two-stop route."""
    names = ["A", "B", "C", "D", "E"]
    routes = [
        make_route(f"{a}{b}", [a, b], [1])
        for i, a in enumerate(names)
        for b in names[i + 1 :]
    ]
    return build_graph(routes)
