"""
Repository for user profile data access operations.
"""

from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from .entities import User
from .models import UserModel


class UserRepository:
    """Repository for user profiles supplied by the identity provider."""

    def find_by_id(self, db: DBSession, user_id: str) -> Optional[User]:
        model = db.get(UserModel, user_id)
        return User.model_validate(model) if model else None

    def find_by_ids(self, db: DBSession, user_ids: list[str]) -> dict[str, User]:
        """Resolve several profiles at once; users without a profile are omitted."""
        if not user_ids:
            return {}
        models = db.query(UserModel).filter(UserModel.id.in_(user_ids)).all()
        return {model.id: User.model_validate(model) for model in models}

    def upsert(
        self,
        db: DBSession,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """
        Create the profile if missing, otherwise update the provided fields.

        Fields passed as None are left unchanged on an existing profile.
        """
        now_ms = now_epoch_ms()
        model = db.get(UserModel, user_id)
        if model is None:
            model = UserModel(
                id=user_id,
                name=name,
                email=email,
                created_at=now_ms,
                updated_at=now_ms,
            )
            db.add(model)
        else:
            if name is not None:
                model.name = name
            if email is not None:
                model.email = email
            model.updated_at = now_ms
        db.flush()
        return User.model_validate(model)
