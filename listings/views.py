import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets, permissions, decorators, response, status, parsers
from rest_framework.exceptions import NotFound

from wanderlust.permissions import IsOwnerOrReadOnly
from .filters import ListingFilter
from .likes import toggle_like, list_liked
from .models import Listing, Category
from .queries import query_listings, get_listing
from .serializers import ListingSerializer, ListingDetailSerializer

logger = logging.getLogger(__name__)


class ListingViewSet(viewsets.ModelViewSet):
    """
    Listings API.

    - list (GET /api/listings/?search=&category=): public; search matches
      title, location or country, category "All" or unknown is ignored.
    - retrieve (GET /api/listings/{id}/): public; with reviews and owner.
    - create (POST, multipart with image): authenticated users, requester becomes owner.
    - update / partial_update / destroy: owner only. Deleting removes its reviews.
    - like (POST /api/listings/{id}/like/): authenticated; toggles the wishlist entry.
    - wishlist (GET /api/listings/wishlist/): authenticated; liked listings.
    - categories (GET /api/listings/categories/): the fixed category list.

    Every listing in a response carries avg_rating, review_count and is_liked
    for the requesting user.
    """
    queryset = Listing.objects.select_related("owner")
    serializer_class = ListingSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = ListingFilter
    parser_classes = [parsers.MultiPartParser, parsers.FormParser, parsers.JSONParser]
    lookup_value_regex = r"\d+"  # accept only numeric ids

    def get_permissions(self):
        if self.action in ["create", "like", "wishlist"]:
            return [permissions.IsAuthenticated()]
        if self.action in ["update", "partial_update", "destroy"]:
            return [permissions.IsAuthenticated(), IsOwnerOrReadOnly()]
        return [permissions.AllowAny()]

    def get_serializer_class(self):
        if self.action == "retrieve":
            return ListingDetailSerializer
        return ListingSerializer

    def get_object(self):
        try:
            obj = Listing.objects.select_related("owner").get(pk=self.kwargs["pk"])
        except (Listing.DoesNotExist, ValueError):
            raise NotFound(detail="Listing you requested for does not exist!")
        self.check_object_permissions(self.request, obj)
        return obj

    def permission_denied(self, request, message=None, code=None):
        if request.user and request.user.is_authenticated:
            logger.warning(
                "Listing %s forbidden listing_id=%s by user_id=%s",
                self.action,
                self.kwargs.get("pk"),
                request.user.id,
            )
        super().permission_denied(request, message=message, code=code)

    def list(self, request, *args, **kwargs):
        listings = query_listings(
            viewer=request.user,
            queryset=self.filter_queryset(self.get_queryset()),
        )
        return response.Response(self.get_serializer(listings, many=True).data)

    def retrieve(self, request, *args, **kwargs):
        listing = get_listing(self.kwargs["pk"], viewer=request.user)
        return response.Response(self.get_serializer(listing).data)

    def perform_create(self, serializer):
        listing = serializer.save()  # owner and image are set in serializer.create
        logger.info(
            "Listing created listing_id=%s owner_id=%s category=%s",
            listing.id,
            listing.owner_id,
            listing.category,
        )

    def perform_update(self, serializer):
        listing = serializer.save()
        logger.info("Listing updated listing_id=%s owner_id=%s", listing.id, listing.owner_id)

    def perform_destroy(self, instance):
        listing_id = instance.id
        review_count = instance.reviews.count()
        instance.delete()
        logger.info(
            "Listing deleted listing_id=%s by user_id=%s reviews_removed=%s",
            listing_id,
            self.request.user.id,
            review_count,
        )

    @decorators.action(detail=True, methods=["post"])
    def like(self, request, pk=None):
        try:
            liked = toggle_like(request.user, pk)
        except NotFound:
            logger.warning("Like failed, listing not found listing_id=%s user_id=%s", pk, request.user.id)
            return response.Response(
                {"success": False, "message": "Listing not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return response.Response({"success": True, "is_liked": liked})

    @decorators.action(detail=False, methods=["get"])
    def wishlist(self, request):
        listings = list_liked(request.user)
        return response.Response(self.get_serializer(listings, many=True).data)

    @decorators.action(detail=False, methods=["get"])
    def categories(self, request):
        return response.Response(list(Category.values))
