import pytest
from apps.accounts.models import User


@pytest.fixture
def member(db):
    """Create and return a test member."""
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        nickname='Theater Fan',
    )
