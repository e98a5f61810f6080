import logging

from django.contrib.auth import get_user_model
from rest_framework import generics, permissions
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse

from .serializers import RegisterSerializer, UserSerializer

User = get_user_model()
logger = logging.getLogger(__name__)


class RegisterView(generics.CreateAPIView):
    """User registration endpoint"""

    queryset = User.objects.all()
    serializer_class = RegisterSerializer
    permission_classes = [permissions.AllowAny]

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info("User registered user_id=%s", user.id)


class MeView(generics.RetrieveAPIView):
    """Getting the current user."""

    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user


@api_view(["GET"])
@permission_classes([AllowAny])
def accounts_root(request, format=None):
    return Response({
        "token_obtain_pair": reverse("token_obtain_pair", request=request, format=format),
        "token_refresh": reverse("token_refresh", request=request, format=format),
        "login": reverse("rest_framework:login", request=request, format=format),
        "logout": reverse("rest_framework:logout", request=request, format=format),
        "register": reverse("register", request=request, format=format),
        "me": reverse("me", request=request, format=format),
    })
