"""
Rating aggregation for listings.

Kept independent from the ORM: it works on any iterable of objects exposing
``rating`` (reviews, mocks) or on bare numbers.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional

ONE_DECIMAL = Decimal("0.1")


class RatingSummary(NamedTuple):
    avg_rating: Optional[Decimal]
    review_count: int


def _rating_of(review):
    if isinstance(review, (int, float, Decimal)):
        value = review
    else:
        value = getattr(review, "rating", None)
    # A review without a rating counts as 0
    return Decimal(str(value)) if value is not None else Decimal(0)


def summarize_reviews(reviews) -> RatingSummary:
    """
    Return ``(avg_rating, review_count)``.

    ``avg_rating`` is ``None`` when there are no reviews, otherwise the mean
    rounded half-up to one decimal place (``[1, 1, 2]`` -> ``Decimal("1.3")``).
    """
    ratings = [_rating_of(r) for r in reviews]
    if not ratings:
        return RatingSummary(None, 0)
    average = sum(ratings) / len(ratings)
    return RatingSummary(average.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP), len(ratings))


def annotate_rating(listing):
    """Attach ``avg_rating`` / ``review_count`` to a listing instance and return it."""
    summary = listing.rating_summary
    listing.avg_rating = summary.avg_rating
    listing.review_count = summary.review_count
    return listing
