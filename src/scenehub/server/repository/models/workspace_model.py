"""
SQLAlchemy models for workspaces and workspace membership.
"""

from sqlalchemy import (
    JSON,
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from .base import Base


class WorkspaceModel(Base):
    """SQLAlchemy model for workspaces (tenant boundary)."""

    __tablename__ = "workspaces"

    id = Column(String, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    owner_id = Column(String, nullable=False, index=True)
    is_public = Column(Boolean, default=False, nullable=False)
    settings = Column(JSON, nullable=True)
    created_at = Column(BigInteger, nullable=False)  # Epoch timestamp in milliseconds
    updated_at = Column(BigInteger, nullable=True)

    members = relationship(
        "WorkspaceMemberModel", back_populates="workspace", passive_deletes=True
    )


class WorkspaceMemberModel(Base):
    """
    Junction table mapping (workspace, user) to a role.

    The identity provider owns users, so user_id carries no foreign key.
    """

    __tablename__ = "workspace_members"

    id = Column(String, primary_key=True)
    workspace_id = Column(
        String, ForeignKey("workspaces.id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(String, nullable=False)
    role = Column(String, nullable=False, default="viewer")  # owner, admin, editor, viewer
    invited_by = Column(String, nullable=True)
    joined_at = Column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("workspace_id", "user_id", name="uq_workspace_member"),
        Index("ix_workspace_members_user_id", "user_id"),
    )

    workspace = relationship("WorkspaceModel", back_populates="members")
