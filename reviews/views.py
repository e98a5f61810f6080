import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets, permissions, filters

from wanderlust.permissions import IsAuthorOrReadOnly
from .filters import ReviewFilter
from .models import Review
from .serializers import ReviewSerializer

logger = logging.getLogger(__name__)


class ReviewViewSet(viewsets.ModelViewSet):
    """
    Reviews of listings.
    - list/retrieve: anyone; ?listing=<id>, ?rating=, ?rating_min=, ?rating_max=
      (a malformed value answers 400)
    - create: authenticated users, the requester becomes the author
    - update/delete: the author only
    """
    queryset = Review.objects.select_related("listing", "author")
    serializer_class = ReviewSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsAuthorOrReadOnly]
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = ReviewFilter
    ordering_fields = ["created_at", "rating"]
    ordering = ["-created_at"]

    def perform_create(self, serializer):
        review = serializer.save()
        logger.info(
            "Review created review_id=%s listing_id=%s author_id=%s rating=%s",
            review.id,
            review.listing_id,
            review.author_id,
            review.rating,
        )

    def perform_destroy(self, instance):
        logger.info(
            "Review deleted review_id=%s listing_id=%s by user_id=%s",
            instance.id,
            instance.listing_id,
            self.request.user.id,
        )
        instance.delete()
