"""Pydantic models for the cafe catalog."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cafefinder.constants import PRICE_RANGES


def check_price_range(value: str) -> str:
    if value not in PRICE_RANGES:
        raise ValueError(
            f"price range must be one of {', '.join(PRICE_RANGES)}"
        )
    return value


class Cafe(BaseModel):
    """A cafe entry of the catalog."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    address: str = ""
    district: str = ""
    cafe_types: list[str] = Field(default_factory=list)
    price_range: str | None = None
    distance_km: float | None = Field(default=None, ge=0)
    amenities: list[str] = Field(default_factory=list)
    rating: float | None = Field(default=None, ge=0, le=5)
    description: str = ""

    @field_validator("price_range")
    @classmethod
    def _check_price_range(cls, value):
        if value is None:
            return value
        return check_price_range(value)


class CafeSummary(BaseModel):
    id: int
    name: str
    district: str = ""
    price_range: str | None = None
    rating: float | None = None


class CafeSearchResult(BaseModel):
    total: int = 0
    results: list[CafeSummary] = Field(default_factory=list)
    error: str | None = None
