"""Cafe catalog loader.

Reads the catalog JSON file (a list of cafes, or an object with a
``cafes`` list) into :class:`Cafe` models. Broken records are
skipped one by one so a single bad entry does not hide the rest.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from cafefinder.cafes.models import Cafe

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """The catalog file could not be read or has the wrong shape."""


def _read_records(path: Path) -> list:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc}") from exc
    except ValueError as exc:
        raise CatalogError(f"Invalid JSON in catalog {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("cafes", [])
    if not isinstance(data, list):
        raise CatalogError(f"Catalog {path} holds no cafe list")
    return data


def parse_cafes(records: list) -> list[Cafe]:
    """Validate raw cafe dicts, skipping invalid ones."""
    cafes: list[Cafe] = []
    for index, record in enumerate(records):
        try:
            cafes.append(Cafe.model_validate(record))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid cafe record #%d: %s", index, exc
            )
    return cafes


def read_catalog(path: str | Path) -> list[Cafe]:
    """Load the catalog, raising :class:`CatalogError` on failure."""
    cafes = parse_cafes(_read_records(Path(path)))
    logger.debug("Loaded %d cafes from %s", len(cafes), path)
    return cafes


def load_cafes(path: str | Path) -> list[Cafe]:
    """Load the catalog, returning an empty list on failure."""
    try:
        return read_catalog(path)
    except CatalogError as exc:
        logger.warning("Cafe catalog unavailable: %s", exc)
        return []
