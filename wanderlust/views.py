from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse


@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request, format=None):
    """Entry point with links to the main endpoints."""
    return Response({
        "listings": reverse("listing-list", request=request, format=format),
        "categories": reverse("listing-categories", request=request, format=format),
        "wishlist": reverse("listing-wishlist", request=request, format=format),
        "reviews": reverse("review-list", request=request, format=format),
        "accounts": reverse("accounts-root", request=request, format=format),
        "token_obtain_pair": reverse("token_obtain_pair", request=request, format=format),
        "token_refresh": reverse("token_refresh", request=request, format=format),
        "docs": reverse("swagger-ui", request=request, format=format),
        "schema": reverse("schema", request=request, format=format),
    })
