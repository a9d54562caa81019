from cafefinder.preferences.filter import (
    load_preferences,
    matches_preferences,
)
from cafefinder.preferences.models import UserPreferences, toggle

__all__ = [
    "UserPreferences",
    "load_preferences",
    "matches_preferences",
    "toggle",
]
