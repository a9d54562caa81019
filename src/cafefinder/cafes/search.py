"""Cafe search implementation.

Diacritics-insensitive search over the cafe catalog, optionally
narrowed by the user's stored preferences.
"""

import json
import logging
from pathlib import Path

from cafefinder.cafes.catalog import CatalogError, read_catalog
from cafefinder.cafes.models import Cafe, CafeSearchResult, CafeSummary
from cafefinder.constants import (
    CAFE_LINK_PREFIX,
    DEFAULT_MAX_RESULTS,
    UNKNOWN_CAFE,
)
from cafefinder.diacritics import matches
from cafefinder.preferences.filter import matches_preferences
from cafefinder.preferences.models import UserPreferences

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Mapping helpers
# ---------------------------------------------------------------------------


def _to_summary(cafe: Cafe) -> CafeSummary:
    return CafeSummary(
        id=cafe.id,
        name=cafe.name,
        district=cafe.district,
        price_range=cafe.price_range,
        rating=cafe.rating,
    )


def _matches_query(cafe: Cafe, query: str) -> bool:
    """Return True if any searchable cafe field matches the query."""
    fields = [cafe.name, cafe.address, cafe.district, cafe.description]
    fields.extend(cafe.cafe_types)
    fields.extend(cafe.amenities)
    return any(matches(field, query) for field in fields)


# ---------------------------------------------------------------------------
# Public functions
# ---------------------------------------------------------------------------


def search_cafes(
    cafes: list[Cafe],
    query: str | None = None,
    preferences: UserPreferences | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> CafeSearchResult:
    """Search cafes by free text and preferences.

    A blank query lists every cafe. ``total`` counts all hits,
    ``results`` holds at most ``max_results`` of them in catalog
    order.
    """
    browse_all = not query or not query.strip()
    hits = [
        cafe
        for cafe in cafes
        if (browse_all or _matches_query(cafe, query))
        and (preferences is None or matches_preferences(cafe, preferences))
    ]
    logger.debug(
        "Cafe search %r: %d of %d cafes matched",
        query,
        len(hits),
        len(cafes),
    )
    return CafeSearchResult(
        total=len(hits),
        results=[_to_summary(c) for c in hits[: max(max_results, 0)]],
    )


def get_cafe(cafes: list[Cafe], cafe_id: int) -> Cafe | None:
    """Find a cafe by id."""
    for cafe in cafes:
        if cafe.id == cafe_id:
            return cafe
    return None


def cafe_name(cafes: list[Cafe], cafe_id: int) -> str:
    """Return the cafe's name, or "Unknown Cafe" for unknown ids."""
    cafe = get_cafe(cafes, cafe_id)
    return cafe.name if cafe else UNKNOWN_CAFE


def cafe_link(cafe_id: int) -> str:
    """Return the detail page path of a cafe."""
    return f"{CAFE_LINK_PREFIX}/{cafe_id}"


# ---------------------------------------------------------------------------
# JSON front ends
# ---------------------------------------------------------------------------


def _cafe_search(
    catalog: str | Path,
    query: str | None = None,
    preferences: UserPreferences | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> str:
    """Search the catalog file and return a JSON string.

    Args:
        catalog: Path to the catalog JSON file.
        query: Free text; cafe name, address, district, type or
            amenity fragment, with or without diacritics.
        preferences: Optional preference filter.
        max_results: Maximum number of results to return.

    Returns:
        JSON string with keys ``total`` and ``results``, plus
        ``error`` when the catalog cannot be loaded.
    """
    try:
        cafes = read_catalog(catalog)
    except CatalogError as exc:
        logger.error("Failed to load cafe catalog: %s", exc)
        result = CafeSearchResult(error=f"Catalog unavailable: {exc}")
        return json.dumps(
            result.model_dump(), ensure_ascii=False
        )

    result = search_cafes(cafes, query, preferences, max_results)
    return json.dumps(
        result.model_dump(exclude={"error"}),
        ensure_ascii=False,
    )


def _cafe_get(catalog: str | Path, cafe_id: int) -> str:
    """Get full cafe details by id as a JSON string.

    Returns an error object when the catalog cannot be loaded or the
    id is unknown.
    """
    try:
        cafes = read_catalog(catalog)
    except CatalogError as exc:
        logger.error("Failed to load cafe catalog: %s", exc)
        return json.dumps(
            {"error": f"Catalog unavailable: {exc}"},
            ensure_ascii=False,
        )

    cafe = get_cafe(cafes, cafe_id)
    if cafe is None:
        return json.dumps(
            {"error": f"Cafe not found: {cafe_id}"},
            ensure_ascii=False,
        )

    data = cafe.model_dump()
    data["link"] = cafe_link(cafe.id)
    return json.dumps(data, ensure_ascii=False)
