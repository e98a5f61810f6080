import django_filters
from django.db.models import Q

from .models import Listing, Category, ALL_CATEGORIES


class ListingFilter(django_filters.FilterSet):
    """
    Filters for the listing index:
    - search: case-insensitive substring of location, country or title
    - category: exact category; "All" or an unknown value means no filter
    Both together are combined with AND.
    """
    search = django_filters.CharFilter(method="filter_search")
    category = django_filters.CharFilter(method="filter_category")

    class Meta:
        model = Listing
        fields = ["search", "category"]

    def filter_search(self, queryset, name, value):
        term = (value or "").strip()
        if not term:
            return queryset
        return queryset.filter(
            Q(location__icontains=term)
            | Q(country__icontains=term)
            | Q(title__icontains=term)
        )

    def filter_category(self, queryset, name, value):
        if value == ALL_CATEGORIES or value not in Category.values:
            return queryset
        return queryset.filter(category=value)
