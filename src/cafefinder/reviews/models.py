"""Pydantic model for cafe reviews."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

AspectRating = Annotated[int, Field(ge=1, le=5)]


class Review(BaseModel):
    """A user's review of a cafe.

    The overall ``rating`` is the mean of the four aspect ratings and
    is never taken from input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True
    )

    id: str
    cafe_id: int
    username: str
    drink_rating: AspectRating
    food_rating: AspectRating
    service_rating: AspectRating
    atmosphere_rating: AspectRating
    text: str = ""
    date: str = ""
    timestamp: int = 0

    @computed_field
    @property
    def rating(self) -> float:
        return (
            self.drink_rating
            + self.food_rating
            + self.service_rating
            + self.atmosphere_rating
        ) / 4

    def edit(self, **changes) -> "Review":
        """Return a re-validated copy with ``changes`` applied."""
        data = self.model_dump(exclude={"rating"})
        data.update(changes)
        return Review.model_validate(data)
