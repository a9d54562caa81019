"""Preference based cafe filtering and preference file loading."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from cafefinder.cafes.models import Cafe
from cafefinder.diacritics import matches
from cafefinder.preferences.models import UserPreferences

logger = logging.getLogger(__name__)


def _any_match(wanted: list[str], offered: list[str]) -> bool:
    return any(matches(o, w) for w in wanted for o in offered)


def _all_match(wanted: list[str], offered: list[str]) -> bool:
    return all(
        any(matches(o, w) for o in offered) for w in wanted
    )


def matches_preferences(cafe: Cafe, preferences: UserPreferences) -> bool:
    """Return True if the cafe satisfies every non-empty criterion.

    Cafe types need one hit, amenities need all of them. Type and
    amenity names are compared with the diacritics-insensitive
    matcher; a cafe with unknown distance passes the distance check.
    """
    if preferences.cafe_types and not _any_match(
        preferences.cafe_types, cafe.cafe_types
    ):
        return False

    if preferences.price_range and (
        cafe.price_range not in preferences.price_range
    ):
        return False

    limit = preferences.max_distance_km
    if (
        limit is not None
        and cafe.distance_km is not None
        and cafe.distance_km > limit
    ):
        return False

    if preferences.amenities and not _all_match(
        preferences.amenities, cafe.amenities
    ):
        return False

    return True


def load_preferences(path: str | Path) -> UserPreferences:
    """Load stored preferences, falling back to defaults.

    Args:
        path: JSON file with the preference object.

    Returns:
        The stored preferences, or defaults when the file is missing
        or malformed.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug("No preference file at %s, using defaults", path)
        return UserPreferences()
    except (OSError, ValueError) as exc:
        logger.warning("Unreadable preference file %s: %s", path, exc)
        return UserPreferences()

    if not isinstance(raw, dict):
        logger.warning("Preference file %s is not an object", path)
        return UserPreferences()

    try:
        return UserPreferences.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Invalid preferences in %s: %s", path, exc)
        return UserPreferences()
