"""Tests for UserService."""

import pytest

from scenehub.shared.exceptions import UnauthenticatedError

from tests.constants import OWNER


def test_profile_missing_until_created(db_session, user_service):
    assert user_service.get_profile(db_session, OWNER) is None


def test_update_profile_creates_then_patches(db_session, user_service):
    created = user_service.update_profile(db_session, OWNER, name=" Olivia ", email="o@example.com")
    patched = user_service.update_profile(db_session, OWNER, name="Liv")

    assert created.name == "Olivia"
    assert patched.name == "Liv"
    assert patched.email == "o@example.com"
    assert user_service.get_profile(db_session, OWNER).name == "Liv"


def test_profile_requires_identity(db_session, user_service):
    with pytest.raises(UnauthenticatedError):
        user_service.get_profile(db_session, None)
    with pytest.raises(UnauthenticatedError):
        user_service.update_profile(db_session, None, name="x")
