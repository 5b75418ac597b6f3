"""
SQLAlchemy model for collaboration presence.
"""

from sqlalchemy import JSON, BigInteger, Boolean, Column, ForeignKey, String, UniqueConstraint

from .base import Base


class CollaborationSessionModel(Base):
    """One presence row per (project, user)."""

    __tablename__ = "collaboration_sessions"

    id = Column(String, primary_key=True)
    project_id = Column(
        String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String, nullable=False, index=True)
    cursor = Column(JSON, nullable=True)  # {position: [x, y, z], target: model id}
    is_active = Column(Boolean, default=True, nullable=False)
    last_seen = Column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_collaboration_project_user"),
    )
