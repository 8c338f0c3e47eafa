"""Shared fixtures for store tests."""

from __future__ import annotations

import pytest

from xpdispatch.contracts.aircraft import Aircraft, Livery
from xpdispatch.contracts.position import StartPosition
from xpdispatch.contracts.procedure import ResolvedPosition, SelectedProcedure, Waypoint
from xpdispatch.state.launch import LaunchConfigStore
from xpdispatch.state.selection import SelectionStore
from tests.persistence.fake_storage import InMemoryStorage

C172_PATH = "Aircraft/Laminar Research/Cessna 172 SP/Cessna_172SP.acf"


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def selection():
    return SelectionStore()


@pytest.fixture
def launch(storage):
    return LaunchConfigStore(storage)


@pytest.fixture
def ksfo():
    """Stand-in for a parsed airport record."""
    return {"icao": "KSFO", "name": "San Francisco Intl", "runways": ["10L/28R", "10R/28L"]}


@pytest.fixture
def procedure():
    return SelectedProcedure(
        kind="SID",
        name="SSTIK5",
        runway="RW28L",
        transition=None,
        waypoints=[
            Waypoint(fix_id="SSTIK", fix_region="K2", fix_type="E", path_terminator="TF",
                     resolved=True, position=ResolvedPosition(latitude=37.5, longitude=-122.6)),
            Waypoint(fix_id="SNS", fix_region="K2", fix_type="V", path_terminator="TF",
                     turn_direction="L"),
        ],
    )


@pytest.fixture
def start_position():
    return StartPosition(
        kind="runway", name="28L", airport="KSFO",
        latitude=37.6117, longitude=-122.3583, heading=298.0, index=1,
    )


@pytest.fixture
def c172():
    return Aircraft(
        path=C172_PATH,
        name="Cessna 172 SP",
        icao="C172",
        liveries=[Livery(name="N172SP"), Livery(name="Red Tail")],
    )
