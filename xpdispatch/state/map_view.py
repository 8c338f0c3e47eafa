"""Map view store: layer visibility, night mode, camera, debug pick, VATSIM.

Layer and navigation visibility and night mode survive a restart; the
rest starts at its defaults.  Visibility updates merge into the current
flags, so callers only pass the layers they change.
"""

from __future__ import annotations

import logging

from xpdispatch.contracts.common import StateModel
from xpdispatch.contracts.enums import AirwaysMode
from xpdispatch.contracts.map_view import (
    FeatureDebugInfo,
    LayerVisibility,
    MapViewPreferences,
    MapViewState,
    NavLayerVisibility,
)
from xpdispatch.persistence.errors import PersistenceError
from xpdispatch.persistence.repositories.map_view_repo import MapViewRepository
from xpdispatch.persistence.storage import KeyValueStorage
from xpdispatch.state.store import Store, replace

logger = logging.getLogger(__name__)


def _check_names(model: type[StateModel], names, what: str) -> None:
    unknown = set(names) - set(model.model_fields)
    if unknown:
        raise TypeError(f"Unknown {what}(s): {', '.join(sorted(unknown))}")


def _toggleable(model: type[StateModel], name: str) -> None:
    field = model.model_fields.get(name)
    if field is None or field.annotation is not bool:
        raise ValueError(f"Not a toggleable layer: {name!r}")


class MapViewStore(Store[MapViewState]):
    name = "map-view"

    def __init__(self, storage: KeyValueStorage):
        self._repo = MapViewRepository(storage)
        super().__init__(MapViewState(durable=self._rehydrate()))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _rehydrate(self) -> MapViewPreferences:
        try:
            preferences = self._repo.load_preferences()
        except PersistenceError as exc:
            logger.warning("Ignoring stored map view: %s", exc)
            return MapViewPreferences()
        return preferences or MapViewPreferences()

    def _on_change(self, previous: MapViewState, current: MapViewState) -> None:
        if previous.durable == current.durable:
            return
        try:
            self._repo.save_preferences(current.durable)
        except PersistenceError as exc:
            logger.warning("Failed to persist map view: %s", exc)

    def _update_durable(self, **changes) -> None:
        self._apply(
            lambda state: replace(state, durable=replace(state.durable, **changes))
        )

    def _update_session(self, **changes) -> None:
        self._apply(
            lambda state: replace(state, session=replace(state.session, **changes))
        )

    def _update_flags(self, field: str, update) -> None:
        """Merge ``update(current_flags)`` into the ``field`` flag record."""

        def transition(state: MapViewState) -> MapViewState:
            flags = getattr(state.durable, field)
            merged = replace(flags, **update(flags))
            return replace(state, durable=replace(state.durable, **{field: merged}))

        self._apply(transition)

    # ------------------------------------------------------------------
    # Airport layers
    # ------------------------------------------------------------------

    def set_layer_visibility(self, **visibility: bool) -> None:
        """Merge *visibility* into the airport layer flags."""
        _check_names(LayerVisibility, visibility, "layer")
        self._update_flags("layer_visibility", lambda flags: visibility)

    def toggle_layer(self, layer: str) -> None:
        _toggleable(LayerVisibility, layer)
        self._update_flags("layer_visibility", lambda flags: {layer: not getattr(flags, layer)})

    # ------------------------------------------------------------------
    # Navigation layers
    # ------------------------------------------------------------------

    def set_nav_visibility(self, **visibility) -> None:
        """Merge *visibility* into the navigation layer flags."""
        _check_names(NavLayerVisibility, visibility, "nav layer")
        self._update_flags("nav_visibility", lambda flags: visibility)

    def toggle_nav_layer(self, layer: str) -> None:
        """Flip one navaid/airspace flag.  ``airways_mode`` is not a flag."""
        _toggleable(NavLayerVisibility, layer)
        self._update_flags("nav_visibility", lambda flags: {layer: not getattr(flags, layer)})

    def set_airways_mode(self, mode: AirwaysMode | str) -> None:
        self.set_nav_visibility(airways_mode=mode)

    def reset_layer_visibility(self) -> None:
        """Restore both layer sets to their defaults.  Night mode is kept."""
        self._update_durable(
            layer_visibility=LayerVisibility(),
            nav_visibility=NavLayerVisibility(),
        )

    # ------------------------------------------------------------------
    # Night mode
    # ------------------------------------------------------------------

    def set_is_night_mode(self, value: bool) -> None:
        self._update_durable(is_night_mode=value)

    def toggle_night_mode(self) -> None:
        self._apply(lambda state: replace(
            state, durable=replace(state.durable, is_night_mode=not state.is_night_mode)
        ))

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def set_current_zoom(self, zoom: float) -> None:
        self._update_session(current_zoom=zoom)

    def set_map_bearing(self, bearing: float) -> None:
        self._update_session(map_bearing=bearing)

    def set_debug_enabled(self, value: bool) -> None:
        self._update_session(debug_enabled=value)

    def set_selected_feature(self, feature: FeatureDebugInfo | None) -> None:
        self._update_session(selected_feature=feature)

    def set_vatsim_enabled(self, value: bool) -> None:
        self._update_session(vatsim_enabled=value)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


def select_layer_visibility(state: MapViewState) -> LayerVisibility:
    return state.layer_visibility


def select_nav_visibility(state: MapViewState) -> NavLayerVisibility:
    return state.nav_visibility


def select_is_night_mode(state: MapViewState) -> bool:
    return state.is_night_mode


def select_debug_enabled(state: MapViewState) -> bool:
    return state.debug_enabled


def select_vatsim_enabled(state: MapViewState) -> bool:
    return state.vatsim_enabled
