"""Cafe catalog: models, loading, search and lookup."""

from cafefinder.cafes.catalog import CatalogError, load_cafes, read_catalog
from cafefinder.cafes.models import Cafe, CafeSearchResult, CafeSummary
from cafefinder.cafes.search import (
    cafe_link,
    cafe_name,
    get_cafe,
    search_cafes,
)

__all__ = [
    "Cafe",
    "CafeSearchResult",
    "CafeSummary",
    "CatalogError",
    "cafe_link",
    "cafe_name",
    "get_cafe",
    "load_cafes",
    "read_catalog",
    "search_cafes",
]
