from django.db.models import Prefetch
from django_filters.utils import translate_validation
from rest_framework.exceptions import NotFound

from reviews.models import Review
from .filters import ListingFilter
from .likes import liked_listing_ids
from .models import Listing
from .ratings import annotate_rating


def _annotate(listings, viewer):
    liked_ids = liked_listing_ids(viewer)
    for listing in listings:
        annotate_rating(listing)
        listing.is_liked = listing.pk in liked_ids
    return listings


def query_listings(search=None, category=None, viewer=None, queryset=None) -> list:
    """
    Listings matching the optional search text and category, each annotated
    with ``avg_rating``, ``review_count`` and ``is_liked`` for ``viewer``.

    Raises ValidationError when a filter value is malformed (e.g. contains
    a NUL character) rather than returning an unfiltered index.
    """
    if queryset is None:
        queryset = Listing.objects.all()
    queryset = queryset.select_related("owner").prefetch_related("reviews")

    data = {}
    if search is not None:
        data["search"] = search
    if category is not None:
        data["category"] = category
    if data:
        filterset = ListingFilter(data, queryset=queryset)
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)
        queryset = filterset.qs
    return _annotate(list(queryset), viewer)


def get_listing(listing_id, viewer=None) -> Listing:
    """One listing with owner and reviews (with authors) resolved, annotated like the index."""
    qs = Listing.objects.select_related("owner").prefetch_related(
        Prefetch("reviews", queryset=Review.objects.select_related("author"))
    )
    try:
        listing = qs.get(pk=listing_id)
    except (Listing.DoesNotExist, ValueError, TypeError):
        raise NotFound(detail="Listing you requested for does not exist!")
    return _annotate([listing], viewer)[0]
