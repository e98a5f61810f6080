import pytest
from django.contrib.auth import get_user_model

@pytest.fixture
def user_factory(db):
    def create_user(email, password="Testpass123", name="Test User"):
        User = get_user_model()
        first_name, _, last_name = name.partition(" ")
        return User.objects.create_user(email=email, password=password, first_name=first_name, last_name=last_name)
    return create_user
