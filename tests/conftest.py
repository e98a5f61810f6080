import io
import itertools

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient

from listings.models import Listing, Category
from reviews.models import Review

_seq = itertools.count(1)


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    # Uploaded images never land in the project media folder
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def image_file():
    def make(name="photo.png", fmt="PNG"):
        buf = io.BytesIO()
        Image.new("RGB", (2, 2), "red").save(buf, format=fmt)
        return SimpleUploadedFile(name, buf.getvalue(), content_type=f"image/{fmt.lower()}")
    return make


@pytest.fixture
def listing_factory(db):
    def create_listing(owner=None, **fields):
        data = dict(
            title=f"Listing {next(_seq)}",
            description="A nice place to stay.",
            location="Berlin",
            country="Germany",
            price="100.00",
            category=Category.ICONIC_CITIES,
        )
        data.update(fields)
        return Listing.objects.create(owner=owner, **data)
    return create_listing


@pytest.fixture
def review_factory(user_factory):
    def create_review(listing, rating, author=None, comment="Lovely stay"):
        if author is None:
            author = user_factory(f"reviewer{next(_seq)}@example.com")
        return Review.objects.create(listing=listing, author=author, rating=rating, comment=comment)
    return create_review
