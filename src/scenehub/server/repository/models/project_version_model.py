"""
SQLAlchemy model for project version snapshots.
"""

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String, Text, UniqueConstraint

from .base import Base


class ProjectVersionModel(Base):
    """Immutable serialized snapshot of a project and its scene objects."""

    __tablename__ = "project_versions"

    id = Column(String, primary_key=True)
    project_id = Column(
        String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    version_number = Column(Integer, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    data = Column(Text, nullable=False)  # JSON serialized project + models
    created_by = Column(String, nullable=False)
    thumbnail = Column(String, nullable=True)
    created_at = Column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("project_id", "version_number", name="uq_project_version_number"),
    )
