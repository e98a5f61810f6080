from django.urls import path
from .views import RegisterView, MeView, accounts_root

urlpatterns = [
    path("", accounts_root, name="accounts-root"),

    path("register/", RegisterView.as_view(), name="register"),
    path("me/", MeView.as_view(), name="me"),
]
