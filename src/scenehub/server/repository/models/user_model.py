"""
SQLAlchemy model for user profiles.
"""

from sqlalchemy import BigInteger, Column, String

from .base import Base


class UserModel(Base):
    """
    Profile data for a user known to the identity provider.

    Rows may be absent for users that hold memberships; consumers must
    tolerate missing profiles.
    """

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True, index=True)
    role = Column(String, nullable=True)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)
