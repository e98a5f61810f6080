"""
Per-user like registry (wishlist).

The liked set lives in ``User.liked_listings``. Toggling locks the user row
for the duration of the read-modify-write so two concurrent toggles by the
same user are serialized.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.exceptions import NotFound

from .models import Listing
from .ratings import annotate_rating

logger = logging.getLogger(__name__)


def _is_viewer(user):
    return user is not None and getattr(user, "is_authenticated", False)


def liked_listing_ids(user) -> set:
    if not _is_viewer(user):
        return set()
    return set(user.liked_listings.values_list("id", flat=True))


def is_liked(user, listing) -> bool:
    if not _is_viewer(user):
        return False
    listing_id = getattr(listing, "pk", listing)
    return user.liked_listings.filter(pk=listing_id).exists()


def toggle_like(user, listing_id) -> bool:
    """
    Flip the like state of ``listing_id`` for ``user``.
    Returns the new state (True = liked). Raises NotFound for an unknown listing.
    """
    try:
        listing = Listing.objects.get(pk=listing_id)
    except (Listing.DoesNotExist, ValueError, TypeError):
        raise NotFound(detail="Listing not found")

    User = get_user_model()
    with transaction.atomic():
        locked_user = User.objects.select_for_update().get(pk=user.pk)
        if locked_user.liked_listings.filter(pk=listing.pk).exists():
            locked_user.liked_listings.remove(listing)
            liked = False
        else:
            locked_user.liked_listings.add(listing)
            liked = True

    logger.info("Like toggled listing_id=%s user_id=%s liked=%s", listing.pk, user.pk, liked)
    return liked


def list_liked(user) -> list:
    """Resolved wishlist of ``user`` with ratings; every entry is liked by definition."""
    if not _is_viewer(user):
        return []
    listings = (
        user.liked_listings
        .select_related("owner")
        .prefetch_related("reviews")
        .order_by("-created_at", "-id")
    )
    result = []
    for listing in listings:
        annotate_rating(listing)
        listing.is_liked = True
        result.append(listing)
    return result
