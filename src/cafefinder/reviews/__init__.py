from cafefinder.reviews.models import Review
from cafefinder.reviews.selection import (
    load_reviews,
    remove_review,
    replace_review,
    reviews_by_user,
    reviews_for_cafe,
)

__all__ = [
    "Review",
    "load_reviews",
    "remove_review",
    "replace_review",
    "reviews_by_user",
    "reviews_for_cafe",
]
