"""Helpers shared by the HTTP tests."""

API = "/api/v1"


def as_user(user_id):
    """Identity headers as forwarded by the upstream authentication proxy."""
    return {"X-User-Id": user_id}
