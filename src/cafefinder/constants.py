"""Configuration constants for cafefinder.

Values that depend on the deployment can be overridden with
environment variables.
"""

import os

# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------

CAFEFINDER_CATALOG = os.environ.get("CAFEFINDER_CATALOG", "cafes.json")
CAFEFINDER_LOG_LEVEL = os.environ.get(
    "CAFEFINDER_LOG_LEVEL", "WARNING"
).upper()

try:
    DEFAULT_MAX_RESULTS = int(
        os.environ.get("CAFEFINDER_MAX_RESULTS", "10")
    )
except ValueError:
    DEFAULT_MAX_RESULTS = 10

# ---------------------------------------------------------------------------
# Preference vocabularies
# ---------------------------------------------------------------------------

PRICE_RANGES = ("cheap", "moderate", "expensive")

# Kilometres, or "any" for no limit
DISTANCE_CHOICES = ("2", "5", "10", "20", "any")
DEFAULT_MAX_DISTANCE = "5"
NO_DISTANCE_LIMIT = "any"

# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------

CAFE_LINK_PREFIX = "/cafe"
UNKNOWN_CAFE = "Unknown Cafe"
