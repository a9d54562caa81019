"""CLI commands for cafe discovery."""

import json
import logging
from enum import Enum
from typing import Annotated

import typer
from pydantic import ValidationError

from cafefinder.constants import (
    CAFEFINDER_CATALOG,
    CAFEFINDER_LOG_LEVEL,
    DEFAULT_MAX_RESULTS,
    NO_DISTANCE_LIMIT,
)
from cafefinder.diacritics import canonicalize, matches

app = typer.Typer(
    help="Cafe discovery tools with diacritics-insensitive search.",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    json = "json"
    human = "human"


cafes_app = typer.Typer(help="Cafe catalog commands.")
reviews_app = typer.Typer(help="Cafe review commands.")

app.add_typer(cafes_app, name="cafes", no_args_is_help=True)
app.add_typer(reviews_app, name="reviews", no_args_is_help=True)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Debug logging")
    ] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else CAFEFINDER_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _output(data: dict | list | str, fmt: OutputFormat) -> None:
    """Output data in the requested format."""
    if fmt == OutputFormat.json:
        if isinstance(data, str):
            typer.echo(data)
        else:
            typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        if isinstance(data, str):
            typer.echo(data)
        elif isinstance(data, dict):
            for k, v in data.items():
                typer.echo(f"{k}: {v}")
        elif isinstance(data, list):
            for item in data:
                if isinstance(item, dict):
                    for k, v in item.items():
                        typer.echo(f"  {k}: {v}")
                    typer.echo("---")
                else:
                    typer.echo(f"  {item}")


FMT_OPT = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format",
    ),
]

CATALOG_OPT = Annotated[
    str,
    typer.Option(
        "--catalog",
        "-c",
        help="Cafe catalog JSON file",
        envvar="CAFEFINDER_CATALOG",
    ),
]


# ---------------------------------------------------------------------------
# Text commands
# ---------------------------------------------------------------------------


@app.command("normalize")
def normalize(
    text: Annotated[str, typer.Argument(help="Text to canonicalize")],
) -> None:
    """Print the diacritics-free search key of TEXT."""
    typer.echo(canonicalize(text))


@app.command("match")
def match(
    target: Annotated[str, typer.Argument(help="Text searched in")],
    query: Annotated[str, typer.Argument(help="Search query")],
) -> None:
    """Check whether QUERY is found within TARGET (exit 1 if not)."""
    found = matches(target, query)
    typer.echo("true" if found else "false")
    if not found:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Cafe commands
# ---------------------------------------------------------------------------


def _build_preferences(
    preferences_file: str | None,
    cafe_types: list[str] | None,
    price_range: list[str] | None,
    max_distance: str | None,
    amenities: list[str] | None,
):
    """Merge stored preferences with command line overrides."""
    from cafefinder.preferences import UserPreferences, load_preferences

    overrides = {
        key: value
        for key, value in (
            ("cafe_types", cafe_types),
            ("price_range", price_range),
            ("max_distance", max_distance),
            ("amenities", amenities),
        )
        if value
    }
    if preferences_file:
        base = load_preferences(preferences_file)
    elif overrides:
        base = UserPreferences(max_distance=NO_DISTANCE_LIMIT)
    else:
        return None

    try:
        return UserPreferences.model_validate(
            {**base.model_dump(), **overrides}
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


@cafes_app.command("search")
def cafes_search(
    catalog: CATALOG_OPT = CAFEFINDER_CATALOG,
    query: Annotated[
        str | None,
        typer.Option("--query", "-q", help="Name, address, type or amenity"),
    ] = None,
    cafe_types: Annotated[
        list[str] | None,
        typer.Option("--type", help="Preferred cafe type (repeatable)"),
    ] = None,
    price_range: Annotated[
        list[str] | None,
        typer.Option("--price", help="cheap, moderate or expensive"),
    ] = None,
    max_distance: Annotated[
        str | None,
        typer.Option("--max-distance", help="2, 5, 10, 20 or any"),
    ] = None,
    amenities: Annotated[
        list[str] | None,
        typer.Option("--amenity", help="Required amenity (repeatable)"),
    ] = None,
    preferences_file: Annotated[
        str | None,
        typer.Option("--preferences", help="Stored preferences JSON"),
    ] = None,
    max_results: Annotated[
        int, typer.Option(help="Max results")
    ] = DEFAULT_MAX_RESULTS,
    fmt: FMT_OPT = OutputFormat.json,
) -> None:
    """Search the cafe catalog."""
    from cafefinder.cafes.search import _cafe_search

    preferences = _build_preferences(
        preferences_file, cafe_types, price_range, max_distance, amenities
    )
    data = json.loads(
        _cafe_search(catalog, query, preferences, max_results)
    )
    _output(data, fmt)
    if "error" in data:
        raise typer.Exit(code=1)


@cafes_app.command("get")
def cafes_get(
    cafe_id: Annotated[int, typer.Argument(help="Cafe ID")],
    catalog: CATALOG_OPT = CAFEFINDER_CATALOG,
    fmt: FMT_OPT = OutputFormat.json,
) -> None:
    """Get full cafe details by ID."""
    from cafefinder.cafes.search import _cafe_get

    data = json.loads(_cafe_get(catalog, cafe_id))
    _output(data, fmt)
    if "error" in data:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Review commands
# ---------------------------------------------------------------------------


@reviews_app.command("list")
def reviews_list(
    file: Annotated[
        str, typer.Option("--file", help="Reviews JSON file")
    ],
    cafe_id: Annotated[
        int | None, typer.Option("--cafe", help="Cafe ID")
    ] = None,
    username: Annotated[
        str | None, typer.Option("--user", help="Author username")
    ] = None,
    catalog: Annotated[
        str | None,
        typer.Option(
            "--catalog", "-c", help="Cafe catalog JSON for cafe names"
        ),
    ] = None,
    fmt: FMT_OPT = OutputFormat.json,
) -> None:
    """List reviews, optionally for one cafe or one author."""
    from cafefinder.cafes import cafe_name, load_cafes
    from cafefinder.reviews import (
        load_reviews,
        reviews_by_user,
        reviews_for_cafe,
    )

    reviews = load_reviews(file)
    if cafe_id is not None:
        reviews = reviews_for_cafe(reviews, cafe_id)
    if username:
        reviews = reviews_by_user(reviews, username)

    rows = [r.model_dump() for r in reviews]
    if catalog:
        cafes = load_cafes(catalog)
        for row in rows:
            row["cafe_name"] = cafe_name(cafes, row["cafe_id"])
    _output(rows, fmt)
