"""Selection store: airport, procedure, start position and panel visibility.

Cross-field rules:
- selecting an airport shows the sidebar and drops the procedure, which
  belonged to the previous airport;
- clearing the airport also clears the procedure and the start position;
- a procedure can only be selected while an airport is selected.

The last rule is also checked on every snapshot by ``_check``.
"""

from __future__ import annotations

import logging
from typing import Any

from xpdispatch.contracts.position import StartPosition
from xpdispatch.contracts.procedure import SelectedProcedure
from xpdispatch.contracts.state import SelectedAirport, SelectionState
from xpdispatch.state.errors import InvariantViolation
from xpdispatch.state.store import Store, replace

logger = logging.getLogger(__name__)


class SelectionStore(Store[SelectionState]):
    name = "selection"

    def __init__(self, initial: SelectionState | None = None):
        super().__init__(initial if initial is not None else SelectionState())

    def _check(self, state: SelectionState) -> None:
        if state.selected_procedure is not None and state.selected_airport is None:
            raise InvariantViolation(self.name, "procedure selected without an airport")

    # ------------------------------------------------------------------
    # Airport
    # ------------------------------------------------------------------

    def select_airport(self, icao: str, data: Any) -> None:
        """Select *icao*; the previous procedure no longer applies."""
        self._set(
            selected_airport=SelectedAirport(icao=icao, data=data),
            sidebar_visible=True,
            selected_procedure=None,
        )

    def clear_airport(self) -> None:
        self._set(
            selected_airport=None,
            selected_procedure=None,
            start_position=None,
        )

    # ------------------------------------------------------------------
    # Panels
    # ------------------------------------------------------------------

    def set_sidebar_visible(self, visible: bool) -> None:
        self._set(sidebar_visible=visible)

    def set_settings_visible(self, visible: bool) -> None:
        self._set(settings_visible=visible)

    def set_launch_dialog_visible(self, visible: bool) -> None:
        self._set(launch_dialog_visible=visible)

    # ------------------------------------------------------------------
    # Procedure / start position
    # ------------------------------------------------------------------

    def select_procedure(self, procedure: SelectedProcedure | None) -> None:
        """Replace the selected procedure.

        Ignored (with a warning) when no airport is selected; clearing
        with ``None`` is always accepted.
        """

        def transition(state: SelectionState) -> SelectionState:
            if procedure is not None and state.selected_airport is None:
                logger.warning(
                    "Ignoring procedure %s: no airport selected", procedure.name
                )
                return state
            return replace(state, selected_procedure=procedure)

        self._apply(transition)

    def set_start_position(self, position: StartPosition | None) -> None:
        self._set(start_position=position)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


def select_icao(state: SelectionState) -> str | None:
    return state.selected_icao


def select_airport_data(state: SelectionState) -> Any:
    return state.selected_airport_data


def select_sidebar_visible(state: SelectionState) -> bool:
    return state.sidebar_visible


def select_settings_visible(state: SelectionState) -> bool:
    return state.settings_visible


def select_launch_dialog_visible(state: SelectionState) -> bool:
    return state.launch_dialog_visible


def select_selected_procedure(state: SelectionState) -> SelectedProcedure | None:
    return state.selected_procedure


def select_start_position(state: SelectionState) -> StartPosition | None:
    return state.start_position
