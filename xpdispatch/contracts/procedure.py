"""SelectedProcedure and Waypoint: a SID, STAR or approach picked by the user.

Procedures and their legs are produced by the airport-data parser
(CIFP records) and handed to ``SelectionStore.select_procedure``.  The
state layer never edits them; a new selection replaces the whole record.

Coordinate resolution of each fix happens later, in the airport-data
collaborator, which then publishes a new procedure record with
``resolved=True`` legs.
"""

from typing import Self

from pydantic import Field, field_validator, model_validator

from xpdispatch.contracts.common import Coordinates, StateModel
from xpdispatch.contracts.enums import ProcedureKind, TurnDirection

_TURN_CODES = {"L": TurnDirection.LEFT, "R": TurnDirection.RIGHT}


class AltitudeConstraint(StateModel):
    """Altitude restriction on a procedure leg.

    ``descriptor`` is the CIFP altitude description character
    (``+`` at or above, ``-`` at or below, ``B`` between, blank = at).
    """

    descriptor: str = ""
    altitude1: float | None = None
    altitude2: float | None = None


class ResolvedPosition(Coordinates):
    """Geographic position of a fix once the navdata lookup succeeded."""


class Waypoint(StateModel):
    """One leg of a procedure: a fix plus optional constraints."""

    fix_id: str = Field(..., min_length=1)
    fix_region: str = ""
    fix_type: str = ""
    path_terminator: str = Field(default="", description="ARINC 424 leg type, e.g. 'TF', 'CF'")
    course: float | None = Field(default=None, ge=0, le=360)
    distance: float | None = Field(default=None, ge=0)
    altitude: AltitudeConstraint | None = None
    speed: float | None = Field(default=None, ge=0)
    turn_direction: TurnDirection | None = None

    resolved: bool = False
    position: ResolvedPosition | None = None

    @field_validator("turn_direction", mode="before")
    @classmethod
    def accept_turn_codes(cls, v: object) -> object:
        if isinstance(v, str):
            return _TURN_CODES.get(v.upper(), v)
        return v

    @model_validator(mode="after")
    def validate_resolution(self) -> Self:
        if self.resolved and self.position is None:
            raise ValueError(f"Waypoint {self.fix_id} is marked resolved but has no position")
        return self

    @property
    def latitude(self) -> float | None:
        return self.position.latitude if self.position else None

    @property
    def longitude(self) -> float | None:
        return self.position.longitude if self.position else None


class SelectedProcedure(StateModel):
    """A named departure, arrival or approach with its ordered legs."""

    kind: ProcedureKind
    name: str = Field(..., min_length=1)
    runway: str | None = None
    transition: str | None = None
    waypoints: tuple[Waypoint, ...] = ()

    @property
    def is_fully_resolved(self) -> bool:
        """True once every leg has coordinates (vacuously true when empty)."""
        return all(wp.resolved for wp in self.waypoints)
