from .diacritics import canonicalize, matches

from . import constants
from . import cafes
from . import preferences
from . import reviews


__all__ = [
    "cafes",
    "canonicalize",
    "constants",
    "matches",
    "preferences",
    "reviews",
]
