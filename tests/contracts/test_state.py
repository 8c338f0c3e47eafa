"""Tests for state snapshot contracts."""

import pytest
from pydantic import ValidationError

from xpdispatch.contracts.aircraft import DEFAULT_LIVERY, Aircraft, Livery
from xpdispatch.contracts.position import StartPosition
from xpdispatch.contracts.state import (
    DEFAULT_MAP_STYLE_URL,
    MAP_STYLE_PRESETS,
    FavoritesRecord,
    LaunchConfigState,
    LaunchSession,
    MapSettings,
    SelectedAirport,
    SelectionState,
)


class TestSelectionState:
    def test_defaults(self):
        state = SelectionState()
        assert state.selected_airport is None
        assert state.selected_procedure is None
        assert state.start_position is None
        assert state.sidebar_visible is True
        assert state.settings_visible is False
        assert state.launch_dialog_visible is False

    def test_airport_shortcuts(self):
        data = {"icao": "KSFO", "runways": []}
        state = SelectionState(selected_airport=SelectedAirport(icao="KSFO", data=data))
        assert state.selected_icao == "KSFO"
        assert state.selected_airport_data == data

    def test_no_airport_shortcuts(self):
        state = SelectionState()
        assert state.selected_icao is None
        assert state.selected_airport_data is None


class TestLaunchConfigState:
    def test_defaults(self):
        state = LaunchConfigState()
        assert state.selected_aircraft is None
        assert state.selected_livery == "Default"
        assert state.fuel_percentage == 50
        assert state.time_of_day == 12
        assert state.use_real_world_time is False
        assert state.cold_and_dark is False
        assert state.selected_weather == "clear"
        assert state.is_launching is False
        assert state.launch_error is None
        assert state.favorites == ()

    def test_flat_view_reads_sub_records(self):
        state = LaunchConfigState(
            session=LaunchSession(fuel_percentage=80),
            durable=FavoritesRecord(favorites=("a.acf",)),
        )
        assert state.fuel_percentage == 80
        assert state.favorites == ("a.acf",)


class TestFavoritesRecord:
    def test_list_input_becomes_tuple(self):
        assert FavoritesRecord(favorites=["a", "b"]).favorites == ("a", "b")

    def test_duplicates_dropped_in_order(self):
        assert FavoritesRecord(favorites=["b", "a", "b"]).favorites == ("b", "a")

    def test_extra_keys_rejected(self):
        with pytest.raises(ValidationError):
            FavoritesRecord.model_validate({"favorites": [], "version": 0})


class TestAircraft:
    def test_livery_names_default_first(self):
        aircraft = Aircraft(
            path="Aircraft/C172/c172.acf",
            name="Cessna 172",
            liveries=[Livery(name="Red Stripe"), Livery(name="Default")],
        )
        assert aircraft.livery_names() == [DEFAULT_LIVERY, "Red Stripe"]


class TestStartPosition:
    def test_accepts_type_alias(self):
        pos = StartPosition.model_validate(
            {"type": "ramp", "name": "Gate A1", "airport": "KSFO",
             "latitude": 37.6, "longitude": -122.4, "index": 3}
        )
        assert pos.kind == "ramp"
        assert pos.xplane_index is None

    def test_runway_xplane_index_string(self):
        pos = StartPosition(
            kind="runway", name="28L", airport="KSFO",
            latitude=37.6, longitude=-122.4, xplane_index="0_1",
        )
        assert pos.xplane_index == "0_1"


class TestMapSettings:
    def test_defaults(self):
        settings = MapSettings()
        assert settings.nav_data_radius_nm == 100
        assert settings.vatsim_refresh_interval == 15
        assert settings.map_style_url == DEFAULT_MAP_STYLE_URL == MAP_STYLE_PRESETS[0].url

    def test_presets(self):
        assert [p.id for p in MAP_STYLE_PRESETS] == [
            "ofm-liberty", "ofm-bright", "ofm-positron",
            "carto-dark", "carto-positron", "carto-voyager",
        ]

    def test_accepts_camel_and_snake(self):
        assert MapSettings(navDataRadiusNm=50) == MapSettings(nav_data_radius_nm=50)

    def test_radius_must_be_positive(self):
        with pytest.raises(ValidationError):
            MapSettings(nav_data_radius_nm=0)
