from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from .ratings import summarize_reviews


class Category(models.TextChoices):
    BEACHFRONT = "Beachfront", "Beachfront"
    MOUNTAINS = "Mountains", "Mountains"
    ICONIC_CITIES = "Iconic Cities", "Iconic Cities"
    CASTLES = "Castles", "Castles"
    CAMPING = "Camping", "Camping"
    LUXURY = "Luxury", "Luxury"
    COUNTRYSIDE = "Countryside", "Countryside"
    BOATS = "Boats", "Boats"


# Query-string value meaning "no category filter"
ALL_CATEGORIES = "All"


class Listing(models.Model):
    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    country = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    category = models.CharField(max_length=20, choices=Category.choices)

    # Asset store reference: public URL + storage key
    image_url = models.CharField(max_length=500, blank=True)
    image_filename = models.CharField(max_length=255, blank=True)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="listings",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["category"]),
            models.Index(fields=["location"]),
            models.Index(fields=["country"]),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(price__gte=0), name="listing_price_non_negative"),
            models.CheckConstraint(
                condition=models.Q(category__in=Category.values),
                name="listing_category_valid",
            ),
        ]

    def __str__(self):
        return f"{self.title} ({self.location}, {self.country}) - ${self.price}/night"

    @property
    def rating_summary(self):
        """Average rating and review count, using prefetched reviews when available."""
        return summarize_reviews(self.reviews.all())
