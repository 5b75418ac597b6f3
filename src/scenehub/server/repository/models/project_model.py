"""
SQLAlchemy model for projects.
"""

from sqlalchemy import JSON, BigInteger, Boolean, Column, ForeignKey, Index, String, Text

from .base import Base


class ProjectModel(Base):
    """SQLAlchemy model for projects (one 3D scene each)."""

    __tablename__ = "projects"

    id = Column(String, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    workspace_id = Column(
        String, ForeignKey("workspaces.id", ondelete="CASCADE"), nullable=False
    )
    created_by = Column(String, nullable=False, index=True)
    thumbnail = Column(String, nullable=True)  # Storage reference
    is_public = Column(Boolean, default=False, nullable=False)
    settings = Column(JSON, nullable=False)  # {render_settings: {...}, grid_settings: {...}}
    last_modified = Column(BigInteger, nullable=False, index=True)
    last_modified_by = Column(String, nullable=False)
    created_at = Column(BigInteger, nullable=False)
    # Per-workspace insertion sequence; listings are newest-inserted first
    insertion_order = Column(BigInteger, nullable=False, default=0)

    __table_args__ = (
        Index("ix_projects_workspace_order", "workspace_id", "insertion_order"),
    )
