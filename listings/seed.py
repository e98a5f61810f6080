"""
Sample listings for development databases.

Nothing runs at import time: call ``seed_listings`` (or the
``seed_listings`` management command) with the database alias to fill.
"""
import logging

from django.db import transaction

from .models import Listing, Category

logger = logging.getLogger(__name__)

SAMPLE_LISTINGS = [
    {
        "title": "Cozy Beachfront Cottage",
        "description": "Escape to this charming beachfront cottage for a relaxing getaway.",
        "image_url": "https://images.unsplash.com/photo-1552733407-5d5c46c3bb3b?w=800",
        "image_filename": "",
        "price": "1500",
        "location": "Malibu",
        "country": "United States",
        "category": Category.BEACHFRONT,
    },
    {
        "title": "Modern Loft in Downtown",
        "description": "Stay in the heart of the city in this stylish loft apartment.",
        "image_url": "https://images.unsplash.com/photo-1501785888041-af3ef285b470?w=800",
        "image_filename": "",
        "price": "1200",
        "location": "New York City",
        "country": "United States",
        "category": Category.ICONIC_CITIES,
    },
    {
        "title": "Mountain Retreat",
        "description": "Unplug and unwind in this peaceful mountain cabin.",
        "image_url": "https://images.unsplash.com/photo-1571896349842-33c89424de2d?w=800",
        "image_filename": "",
        "price": "1000",
        "location": "Aspen",
        "country": "United States",
        "category": Category.MOUNTAINS,
    },
    {
        "title": "Historic Castle in Scotland",
        "description": "Live like royalty in this historic castle in the Scottish Highlands.",
        "image_url": "https://images.unsplash.com/photo-1585543805890-6051f7829f98?w=800",
        "image_filename": "",
        "price": "4000",
        "location": "Scottish Highlands",
        "country": "United Kingdom",
        "category": Category.CASTLES,
    },
    {
        "title": "Lakeside Camping Site",
        "description": "Pitch your tent by the lake and fall asleep under the stars.",
        "image_url": "https://images.unsplash.com/photo-1504280390367-361c6d9f38f4?w=800",
        "image_filename": "",
        "price": "90",
        "location": "Banff",
        "country": "Canada",
        "category": Category.CAMPING,
    },
    {
        "title": "Luxury Penthouse with City Views",
        "description": "Indulge in luxury living with panoramic city views.",
        "image_url": "https://images.unsplash.com/photo-1622396481328-9b1b78cdd9fd?w=800",
        "image_filename": "",
        "price": "3500",
        "location": "Paris",
        "country": "France",
        "category": Category.LUXURY,
    },
    {
        "title": "Rustic Cabin by the Vineyards",
        "description": "A quiet farmhouse surrounded by vineyards and rolling hills.",
        "image_url": "https://images.unsplash.com/photo-1600585154340-be6161a56a0c?w=800",
        "image_filename": "",
        "price": "800",
        "location": "Tuscany",
        "country": "Italy",
        "category": Category.COUNTRYSIDE,
    },
    {
        "title": "Houseboat on the Canals",
        "description": "Wake up on the water in a renovated canal houseboat.",
        "image_url": "https://images.unsplash.com/photo-1544551763-46a013bb70d5?w=800",
        "image_filename": "",
        "price": "650",
        "location": "Amsterdam",
        "country": "Netherlands",
        "category": Category.BOATS,
    },
]


def seed_listings(owner=None, using="default", data=None, reset=True) -> int:
    """
    Load sample listings into the database ``using``.

    reset=True replaces every listing (and, by cascade, their reviews);
    reset=False only adds samples whose title is not stored yet.
    Running it twice leaves the same set of listings. Returns the number inserted.
    """
    data = SAMPLE_LISTINGS if data is None else data
    manager = Listing.objects.using(using)

    with transaction.atomic(using=using):
        if reset:
            deleted, _ = manager.all().delete()
            logger.info("Seed: removed %s existing rows", deleted)
            existing = set()
        else:
            existing = set(manager.values_list("title", flat=True))

        to_create = [
            Listing(owner=owner, **item)
            for item in data
            if item["title"] not in existing
        ]
        manager.bulk_create(to_create)

    logger.info("Seed: inserted %s listings into %s", len(to_create), using)
    return len(to_create)
