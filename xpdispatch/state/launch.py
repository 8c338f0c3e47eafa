"""Launch configuration store: aircraft, livery, flight conditions, favorites.

Only ``favorites`` survives a restart.  The snapshot keeps it in its own
``durable`` sub-record, which is written to storage whenever it changes;
the ``session`` sub-record starts at its defaults on every process start
and is what ``reset_config`` restores.

Storage is a best-effort mirror of memory: unreadable or malformed
favorites load as an empty set, and a failed write is logged without
touching the in-memory value.
"""

from __future__ import annotations

import logging

from xpdispatch.contracts.aircraft import DEFAULT_LIVERY, Aircraft
from xpdispatch.contracts.state import FavoritesRecord, LaunchConfigState, LaunchSession
from xpdispatch.persistence.errors import PersistenceError
from xpdispatch.persistence.repositories.favorites_repo import FavoritesRepository
from xpdispatch.persistence.storage import KeyValueStorage
from xpdispatch.state.store import Store, replace

logger = logging.getLogger(__name__)


class LaunchConfigStore(Store[LaunchConfigState]):
    name = "launch"

    def __init__(self, storage: KeyValueStorage):
        self._repo = FavoritesRepository(storage)
        super().__init__(LaunchConfigState(durable=self._rehydrate()))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _rehydrate(self) -> FavoritesRecord:
        try:
            record = self._repo.load()
        except PersistenceError as exc:
            logger.warning("Ignoring stored favorites: %s", exc)
            return FavoritesRecord()
        if record is None:
            return FavoritesRecord()
        logger.debug("Loaded %d favorite(s) from %s", len(record.favorites), self._repo.key)
        return record

    def _on_change(self, previous: LaunchConfigState, current: LaunchConfigState) -> None:
        if previous.durable == current.durable:
            return
        try:
            self._repo.save(current.durable)
        except PersistenceError as exc:
            logger.warning("Failed to persist favorites: %s", exc)

    def _update_session(self, **changes) -> None:
        self._apply(
            lambda state: replace(state, session=replace(state.session, **changes))
        )

    # ------------------------------------------------------------------
    # Aircraft and flight conditions
    # ------------------------------------------------------------------

    def select_aircraft(self, aircraft: Aircraft | None) -> None:
        """Select *aircraft*; liveries are per aircraft, so the livery resets."""
        self._update_session(
            selected_aircraft=aircraft,
            selected_livery=DEFAULT_LIVERY,
            launch_error=None,
        )

    def set_selected_livery(self, livery: str) -> None:
        self._update_session(selected_livery=livery)

    def set_fuel_percentage(self, value: float) -> None:
        self._update_session(fuel_percentage=value)

    def set_time_of_day(self, value: float) -> None:
        self._update_session(time_of_day=value)

    def set_use_real_world_time(self, value: bool) -> None:
        self._update_session(use_real_world_time=value)

    def set_cold_and_dark(self, value: bool) -> None:
        self._update_session(cold_and_dark=value)

    def set_selected_weather(self, value: str) -> None:
        self._update_session(selected_weather=value)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def toggle_favorite(self, path: str) -> None:
        """Remove *path* if present, otherwise append it at the end."""

        def transition(state: LaunchConfigState) -> LaunchConfigState:
            favorites = state.favorites
            if path in favorites:
                favorites = tuple(p for p in favorites if p != path)
            else:
                favorites = favorites + (path,)
            return replace(state, durable=FavoritesRecord(favorites=favorites))

        self._apply(transition)

    def is_favorite(self, path: str) -> bool:
        return path in self._state.favorites

    # ------------------------------------------------------------------
    # Launch status
    # ------------------------------------------------------------------

    def set_is_launching(self, value: bool) -> None:
        self._update_session(is_launching=value)

    def set_launch_error(self, error: str | None) -> None:
        self._update_session(launch_error=error)

    def reset_config(self) -> None:
        """Restore every session field to its default.  Favorites are kept."""
        self._apply(lambda state: replace(state, session=LaunchSession()))
