from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "listing", "author", "rating", "created_at")
    list_select_related = ("listing", "author")
    search_fields = ("listing__title", "author__email", "comment")
    list_filter = ("rating", ("listing", admin.RelatedOnlyFieldListFilter), ("author", admin.RelatedOnlyFieldListFilter))
    ordering = ("-id",)
