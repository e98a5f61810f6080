from django.contrib import admin
from .models import Listing


class PriceRangeFilter(admin.SimpleListFilter):
    title = "Price"
    parameter_name = "price_range"

    def lookups(self, request, model_admin):
        return (
            ("<1000", "< 1000"),
            ("1000-2000", "1000–2000"),
            ("2000-5000", "2000–5000"),
            (">5000", "> 5000"),
        )

    def queryset(self, request, queryset):
        val = self.value()
        if val == "<1000":
            return queryset.filter(price__lt=1000)
        if val == "1000-2000":
            return queryset.filter(price__gte=1000, price__lte=2000)
        if val == "2000-5000":
            return queryset.filter(price__gte=2000, price__lte=5000)
        if val == ">5000":
            return queryset.filter(price__gt=5000)
        return queryset


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "owner", "location", "country", "price", "category", "created_at")
    list_select_related = ("owner",)
    search_fields = ("title", "location", "country", "owner__email")
    list_filter = (PriceRangeFilter, "category", ("created_at", admin.DateFieldListFilter), "country")
    ordering = ("-created_at",)
    date_hierarchy = "created_at"
