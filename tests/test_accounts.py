import pytest
from django.contrib.auth import get_user_model

User = get_user_model()

PASSWORD = "Wander-lust-2024"


@pytest.mark.django_db
def test_register_and_obtain_token(api_client):
    resp = api_client.post("/api/accounts/register/", {
        "email": "new@example.com",
        "first_name": "New",
        "last_name": "User",
        "password": PASSWORD,
        "password_confirm": PASSWORD,
    }, format="json")
    assert resp.status_code == 201, resp.data
    assert "password" not in resp.data
    assert User.objects.get(email="new@example.com").check_password(PASSWORD)

    resp = api_client.post("/api/token/", {"email": "new@example.com", "password": PASSWORD}, format="json")
    assert resp.status_code == 200
    assert "access" in resp.data and "refresh" in resp.data


@pytest.mark.django_db
def test_register_password_mismatch(api_client):
    resp = api_client.post("/api/accounts/register/", {
        "email": "new@example.com",
        "password": PASSWORD,
        "password_confirm": PASSWORD + "x",
    }, format="json")
    assert resp.status_code == 400
    assert "password_confirm" in resp.data


@pytest.mark.django_db
def test_register_duplicate_email(api_client, user_factory):
    user_factory("taken@example.com")
    resp = api_client.post("/api/accounts/register/", {
        "email": "TAKEN@example.com",
        "password": PASSWORD,
        "password_confirm": PASSWORD,
    }, format="json")
    assert resp.status_code == 400
    assert "email" in resp.data


@pytest.mark.django_db
def test_me_with_jwt_shows_liked_listings(api_client, user_factory, listing_factory):
    user = user_factory("me@example.com", password=PASSWORD)
    listing = listing_factory()
    token = api_client.post("/api/token/", {"email": user.email, "password": PASSWORD}, format="json").data["access"]
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    api_client.post(f"/api/listings/{listing.id}/like/")
    resp = api_client.get("/api/accounts/me/")

    assert resp.status_code == 200
    assert resp.data["email"] == "me@example.com"
    assert resp.data["liked_listings"] == [listing.id]


@pytest.mark.django_db
def test_me_requires_authentication(api_client):
    assert api_client.get("/api/accounts/me/").status_code == 401


def test_create_user_requires_email(db):
    with pytest.raises(ValueError):
        User.objects.create_user(email="", password=PASSWORD)
