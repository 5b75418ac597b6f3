"""
Service for the calling user's profile.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared.utils.types import UserId
from ..repository.entities import User
from ..repository.user_repository import UserRepository
from .authorization_service import require_user

log = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def get_profile(self, db: DBSession, user_id: Optional[UserId]) -> Optional[User]:
        user_id = require_user(user_id)
        return self.user_repository.find_by_id(db, user_id)

    def update_profile(
        self,
        db: DBSession,
        user_id: Optional[UserId],
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """Create or update the caller's profile row."""
        user_id = require_user(user_id)
        user = self.user_repository.upsert(
            db,
            user_id,
            name=name.strip() if name else None,
            email=email.strip() if email else None,
        )
        log.info(f"Updated profile for user {user_id}")
        return user
