"""Base classes and shared types for xpdispatch contracts.

Unit conventions (all contracts):
- **Distances**: nautical miles (NM), suffix ``_nm`` where ambiguous
- **Courses/headings**: degrees true
- **Fuel**: percentage of tank capacity, 0–100
- **Time of day**: decimal local hour, 0 ≤ h < 24
- **Coordinates**: WGS84 decimal degrees

Every state snapshot is immutable: stores replace records wholesale and
never mutate them in place.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class StateModel(BaseModel):
    """Base model for immutable state records.

    - Frozen: a snapshot handed to a subscriber can never change under it.
    - Enums serialize as string values.
    - ``to_storage()`` produces a JSON-safe dict for durable storage.
    - ``from_storage()`` hydrates from such a dict.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_storage(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_storage(cls, data: dict[str, Any]) -> "StateModel":
        """Create a model instance from a stored dict."""
        return cls.model_validate(data)


class Coordinates(StateModel):
    """WGS84 geographic coordinate."""

    latitude: float
    longitude: float
