import pytest
from django.db import IntegrityError

from common.testing import make_user
from users.models import User


@pytest.mark.django_db
def test_new_user_gets_user_role():
    user = User.objects.create(name="Meera", email="meera@example.com", phone="+919800011122")

    assert user.role == User.Role.USER
    assert user.created_at is not None
    assert str(user) == "Meera <meera@example.com>"


@pytest.mark.django_db
def test_email_is_unique():
    make_user(email="dup@example.com")

    with pytest.raises(IntegrityError):
        make_user(email="dup@example.com")
