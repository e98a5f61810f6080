from decimal import Decimal

import pytest
from django.contrib.auth.models import AnonymousUser
from rest_framework.exceptions import NotFound

from listings.likes import toggle_like, is_liked, liked_listing_ids, list_liked


@pytest.mark.django_db
def test_toggle_flips_state(user_factory, listing_factory):
    user = user_factory("liker@example.com")
    listing = listing_factory()

    assert toggle_like(user, listing.id) is True
    assert is_liked(user, listing) is True
    assert liked_listing_ids(user) == {listing.id}

    assert toggle_like(user, listing.id) is False
    assert is_liked(user, listing) is False
    assert liked_listing_ids(user) == set()


@pytest.mark.django_db
def test_double_toggle_restores_original_set(user_factory, listing_factory):
    user = user_factory("liker@example.com")
    kept, flipped = listing_factory(), listing_factory()
    user.liked_listings.add(kept)
    before = liked_listing_ids(user)

    toggle_like(user, flipped.id)
    toggle_like(user, flipped.id)

    assert liked_listing_ids(user) == before == {kept.id}


@pytest.mark.django_db
def test_toggle_is_per_user(user_factory, listing_factory):
    alice = user_factory("alice@example.com")
    bob = user_factory("bob@example.com")
    listing = listing_factory()

    toggle_like(alice, listing.id)

    assert is_liked(alice, listing) is True
    assert is_liked(bob, listing) is False


@pytest.mark.django_db
def test_toggle_unknown_listing(user_factory):
    user = user_factory("liker@example.com")
    with pytest.raises(NotFound):
        toggle_like(user, 999999)
    assert liked_listing_ids(user) == set()


@pytest.mark.django_db
def test_toggle_accepts_string_ids(user_factory, listing_factory):
    user = user_factory("liker@example.com")
    listing = listing_factory()
    assert toggle_like(user, str(listing.id)) is True


@pytest.mark.django_db
@pytest.mark.parametrize("viewer", [None, AnonymousUser()])
def test_anonymous_is_never_liked(listing_factory, viewer):
    listing = listing_factory()
    assert is_liked(viewer, listing) is False
    assert is_liked(viewer, listing.id) is False
    assert liked_listing_ids(viewer) == set()
    assert list_liked(viewer) == []


@pytest.mark.django_db
def test_is_liked_accepts_id(user_factory, listing_factory):
    user = user_factory("liker@example.com")
    listing = listing_factory()
    user.liked_listings.add(listing)
    assert is_liked(user, listing.id) is True


@pytest.mark.django_db
def test_list_liked_is_annotated(user_factory, listing_factory, review_factory):
    user = user_factory("liker@example.com")
    rated = listing_factory(title="Rated")
    unrated = listing_factory(title="Unrated")
    listing_factory(title="Not liked")
    review_factory(rated, 1)
    review_factory(rated, 1)
    review_factory(rated, 2)
    toggle_like(user, rated.id)
    toggle_like(user, unrated.id)

    wishlist = {listing.title: listing for listing in list_liked(user)}

    assert set(wishlist) == {"Rated", "Unrated"}
    assert wishlist["Rated"].avg_rating == Decimal("1.3")
    assert wishlist["Rated"].review_count == 3
    assert wishlist["Unrated"].avg_rating is None
    assert wishlist["Unrated"].review_count == 0
    assert all(listing.is_liked for listing in wishlist.values())
