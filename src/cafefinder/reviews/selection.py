"""Review loading and list operations."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from cafefinder.reviews.models import Review

logger = logging.getLogger(__name__)


def load_reviews(path: str | Path) -> list[Review]:
    """Load reviews from a JSON list, skipping invalid records.

    A missing or unreadable file yields an empty list.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Reviews unavailable from %s: %s", path, exc)
        return []

    if not isinstance(data, list):
        logger.warning("Review file %s is not a list", path)
        return []

    reviews: list[Review] = []
    for index, record in enumerate(data):
        try:
            reviews.append(Review.model_validate(record))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid review record #%d: %s", index, exc
            )
    return reviews


def reviews_for_cafe(reviews: list[Review], cafe_id: int) -> list[Review]:
    return [r for r in reviews if r.cafe_id == cafe_id]


def reviews_by_user(reviews: list[Review], username: str) -> list[Review]:
    return [r for r in reviews if r.username == username]


def remove_review(reviews: list[Review], review_id: str) -> list[Review]:
    return [r for r in reviews if r.id != review_id]


def replace_review(reviews: list[Review], review: Review) -> list[Review]:
    """Swap in ``review`` for the entry with the same id."""
    return [review if r.id == review.id else r for r in reviews]
