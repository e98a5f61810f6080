import django_filters

from .models import Review


class ReviewFilter(django_filters.FilterSet):
    """
    Filters for the review list:
    - listing: reviews of one listing
    - rating: exact rating
    - rating_min / rating_max: inclusive rating range
    """
    listing = django_filters.NumberFilter(field_name="listing_id", lookup_expr="exact")
    rating = django_filters.NumberFilter(field_name="rating", lookup_expr="exact")
    rating_min = django_filters.NumberFilter(field_name="rating", lookup_expr="gte")
    rating_max = django_filters.NumberFilter(field_name="rating", lookup_expr="lte")

    class Meta:
        model = Review
        fields = ["listing", "rating", "rating_min", "rating_max"]
