"""Pydantic model for stored user preferences."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cafefinder.cafes.models import check_price_range
from cafefinder.constants import (
    DEFAULT_MAX_DISTANCE,
    DISTANCE_CHOICES,
    NO_DISTANCE_LIMIT,
)

_LIST_FIELDS = ("cafe_types", "price_range", "amenities")


def toggle(values: list[str], value: str) -> list[str]:
    """Return a copy of ``values`` with ``value`` removed or appended."""
    if value in values:
        return [v for v in values if v != value]
    return [*values, value]


class UserPreferences(BaseModel):
    """Filter criteria a user picked for cafe discovery.

    Accepts both snake_case names and the camelCase keys used in
    stored preference files (``cafeTypes``, ``maxDistance``, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True
    )

    cafe_types: list[str] = Field(default_factory=list)
    price_range: list[str] = Field(default_factory=list)
    max_distance: str = DEFAULT_MAX_DISTANCE
    amenities: list[str] = Field(default_factory=list)

    @field_validator("price_range")
    @classmethod
    def _check_price_ranges(cls, values):
        return [check_price_range(v) for v in values]

    @field_validator("max_distance", mode="before")
    @classmethod
    def _coerce_distance(cls, value):
        # Whole numbers only; 2.9 must not become the 2 km choice
        if (
            isinstance(value, int | float)
            and not isinstance(value, bool)
            and float(value).is_integer()
        ):
            value = str(int(value))
        if value not in DISTANCE_CHOICES:
            raise ValueError(
                f"max_distance must be one of {', '.join(DISTANCE_CHOICES)}"
            )
        return value

    @property
    def max_distance_km(self) -> float | None:
        """Distance limit in km, or None when unlimited."""
        if self.max_distance == NO_DISTANCE_LIMIT:
            return None
        return float(self.max_distance)

    def toggle(self, field: str, value: str) -> "UserPreferences":
        """Return new preferences with ``value`` toggled in a list field."""
        if field not in _LIST_FIELDS:
            raise ValueError(f"Not a list preference: {field}")
        return self.model_copy(
            update={field: toggle(getattr(self, field), value)}
        )
