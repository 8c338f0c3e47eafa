"""Tests for MapViewStore: layer flags, night mode, session fields, persistence."""

from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from xpdispatch.contracts.enums import AirwaysMode
from xpdispatch.contracts.map_view import (
    FeatureDebugInfo,
    LayerVisibility,
    MapViewSession,
    NavLayerVisibility,
)
from xpdispatch.persistence.storage import JsonFileStorage
from xpdispatch.state.map_view import (
    MapViewStore,
    select_debug_enabled,
    select_is_night_mode,
    select_layer_visibility,
    select_nav_visibility,
    select_vatsim_enabled,
)
from tests.persistence.fake_storage import FailingStorage, InMemoryStorage


@pytest.fixture
def map_view(storage):
    return MapViewStore(storage)


def _stored(storage: InMemoryStorage) -> dict:
    return json.loads(storage.items["xplane-viz-map"])


class TestDefaults:
    def test_fresh_store(self, map_view):
        state = map_view.get_state()
        assert state.layer_visibility == LayerVisibility()
        assert state.nav_visibility.dmes is False
        assert state.nav_visibility.waypoints is False
        assert state.nav_visibility.airways_mode == AirwaysMode.OFF
        assert state.is_night_mode is False
        assert state.current_zoom == 2
        assert state.map_bearing == 0
        assert state.selected_feature is None

    def test_creation_does_not_write(self, storage, map_view):
        assert storage.writes == []


class TestLayerVisibility:
    def test_merge_keeps_other_layers(self, map_view):
        map_view.set_layer_visibility(signs=False, gates=False)
        flags = map_view.get_state().layer_visibility
        assert flags.signs is False
        assert flags.gates is False
        assert flags.runways is True

    def test_unknown_layer_rejected(self, map_view):
        with pytest.raises(TypeError, match="runwys"):
            map_view.set_layer_visibility(runwys=False)
        assert map_view.get_state().layer_visibility == LayerVisibility()

    def test_toggle_layer_twice_restores(self, map_view):
        map_view.toggle_layer("windsocks")
        assert map_view.get_state().layer_visibility.windsocks is False
        map_view.toggle_layer("windsocks")
        assert map_view.get_state().layer_visibility == LayerVisibility()

    def test_toggle_unknown_layer_rejected(self, map_view):
        with pytest.raises(ValueError):
            map_view.toggle_layer("clouds")


class TestNavVisibility:
    def test_merge_keeps_other_layers(self, map_view):
        map_view.set_nav_visibility(dmes=True)
        nav = map_view.get_state().nav_visibility
        assert nav.dmes is True
        assert nav.vors is True

    def test_toggle_nav_layer(self, map_view):
        map_view.toggle_nav_layer("waypoints")
        assert map_view.get_state().nav_visibility.waypoints is True

    def test_airways_mode_is_not_toggleable(self, map_view):
        with pytest.raises(ValueError, match="airways_mode"):
            map_view.toggle_nav_layer("airways_mode")

    def test_set_airways_mode(self, map_view):
        map_view.set_airways_mode(AirwaysMode.HIGH)
        assert map_view.get_state().nav_visibility.airways_mode == "high"
        map_view.set_airways_mode("low")
        assert map_view.get_state().nav_visibility.airways_mode == AirwaysMode.LOW

    def test_invalid_airways_mode_rejected(self, map_view):
        with pytest.raises(ValidationError):
            map_view.set_airways_mode("both")
        assert map_view.get_state().nav_visibility == NavLayerVisibility()


class TestResetLayerVisibility:
    def test_restores_both_sets_and_keeps_night_mode(self, map_view):
        map_view.set_layer_visibility(runways=False)
        map_view.set_nav_visibility(airspaces=False, airways_mode="low")
        map_view.set_is_night_mode(True)

        map_view.reset_layer_visibility()

        state = map_view.get_state()
        assert state.layer_visibility == LayerVisibility()
        assert state.nav_visibility == NavLayerVisibility()
        assert state.is_night_mode is True

    def test_noop_on_defaults(self, map_view):
        calls = []
        map_view.subscribe(lambda new, old: calls.append(new))
        map_view.reset_layer_visibility()
        assert calls == []


class TestNightMode:
    def test_toggle(self, map_view):
        map_view.toggle_night_mode()
        assert map_view.get_state().is_night_mode is True
        map_view.toggle_night_mode()
        assert map_view.get_state().is_night_mode is False

    def test_selector_only_fires_on_night_mode(self, map_view):
        calls = []
        map_view.subscribe(lambda new, old: calls.append((new, old)), selector=select_is_night_mode)
        map_view.set_current_zoom(9)
        map_view.toggle_layer("signs")
        map_view.set_is_night_mode(True)
        assert calls == [(True, False)]


class TestSession:
    def test_setters(self, map_view):
        feature = FeatureDebugInfo(kind="sign", name="A1", properties={"size": 2},
                                   coordinates=(37.61, -122.38), raw_data="20 37.61 -122.38")
        map_view.set_current_zoom(14.5)
        map_view.set_map_bearing(280)
        map_view.set_debug_enabled(True)
        map_view.set_selected_feature(feature)
        map_view.set_vatsim_enabled(True)

        state = map_view.get_state()
        assert state.current_zoom == 14.5
        assert state.map_bearing == 280
        assert state.debug_enabled is True
        assert state.selected_feature == feature
        assert state.vatsim_enabled is True

    def test_line_feature_coordinates(self):
        feature = FeatureDebugInfo.model_validate(
            {"type": "line", "coordinates": [[37.6, -122.3], [37.7, -122.4]]}
        )
        assert feature.coordinates == ((37.6, -122.3), (37.7, -122.4))

    def test_session_changes_do_not_write(self, storage, map_view):
        map_view.set_current_zoom(10)
        map_view.set_debug_enabled(True)
        map_view.set_vatsim_enabled(True)
        assert storage.writes == []


class TestPersistence:
    def test_writes_versioned_camel_case_record(self, storage, map_view):
        map_view.set_layer_visibility(runway_markings=False)
        data = _stored(storage)
        assert data["version"] == 1
        assert data["layerVisibility"]["runwayMarkings"] is False
        assert data["navVisibility"]["airwaysMode"] == "off"
        assert data["isNightMode"] is False
        assert set(data) == {"version", "layerVisibility", "navVisibility", "isNightMode"}

    def test_preferences_survive_restart_session_does_not(self, storage):
        first = MapViewStore(storage)
        first.toggle_layer("taxiway_lights")
        first.set_airways_mode("high")
        first.toggle_night_mode()
        first.set_current_zoom(12)
        first.set_vatsim_enabled(True)

        second = MapViewStore(storage)
        state = second.get_state()
        assert state.layer_visibility.taxiway_lights is False
        assert state.nav_visibility.airways_mode == AirwaysMode.HIGH
        assert state.is_night_mode is True
        assert state.session == MapViewSession()

    def test_restart_with_json_files(self, tmp_path):
        MapViewStore(JsonFileStorage(tmp_path)).set_nav_visibility(ils=False)
        assert MapViewStore(JsonFileStorage(tmp_path)).get_state().nav_visibility.ils is False

    def test_missing_layer_keys_fill_defaults(self):
        payload = json.dumps({"version": 1, "layerVisibility": {"signs": False}, "isNightMode": True})
        store = MapViewStore(InMemoryStorage({"xplane-viz-map": payload}))
        state = store.get_state()
        assert state.layer_visibility.signs is False
        assert state.layer_visibility.runways is True
        assert state.nav_visibility == NavLayerVisibility()
        assert state.is_night_mode is True

    @pytest.mark.parametrize(
        "payload",
        [
            "{broken",
            '{"version": 2, "isNightMode": true}',
            '{"version": 1, "layerVisibility": {"clouds": true}}',
            '{"version": 1, "navVisibility": {"airwaysMode": "both"}}',
        ],
    )
    def test_corrupt_payload_loads_defaults(self, payload, caplog):
        storage = InMemoryStorage({"xplane-viz-map": payload})
        with caplog.at_level(logging.WARNING, logger="xpdispatch.state.map_view"):
            store = MapViewStore(storage)
        assert store.get_state().durable == MapViewStore(InMemoryStorage()).get_state().durable
        assert "Ignoring stored map view" in caplog.text

    def test_old_version_loads_defaults(self):
        payload = json.dumps({"version": 0, "isNightMode": True})
        store = MapViewStore(InMemoryStorage({"xplane-viz-map": payload}))
        assert store.get_state().is_night_mode is False

    def test_write_failure_keeps_memory_and_notifies(self, caplog):
        store = MapViewStore(FailingStorage(fail_writes=True))
        calls = []
        store.subscribe(lambda new, old: calls.append(new), selector=select_layer_visibility)
        with caplog.at_level(logging.WARNING, logger="xpdispatch.state.map_view"):
            store.toggle_layer("animations")
        assert store.get_state().layer_visibility.animations is False
        assert len(calls) == 1
        assert "Failed to persist map view" in caplog.text


class TestSelectors:
    def test_values(self, map_view):
        map_view.set_nav_visibility(dmes=True)
        state = map_view.get_state()
        assert select_layer_visibility(state) is state.layer_visibility
        assert select_nav_visibility(state).dmes is True
        assert select_is_night_mode(state) is False
        assert select_debug_enabled(state) is False
        assert select_vatsim_enabled(state) is False
