"""
SQLAlchemy model for scene objects ("models" table).
"""

from sqlalchemy import JSON, BigInteger, Boolean, Column, ForeignKey, String

from .base import Base


class SceneObjectModel(Base):
    """
    SQLAlchemy model for scene objects within a project.

    parent_id is indexed for child lookups and has no foreign key;
    removing a parent leaves its children pointing at the removed id.
    """

    __tablename__ = "models"

    id = Column(String, primary_key=True)
    project_id = Column(
        String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    type = Column(String(64), nullable=False)  # mesh, light, camera, empty, ...
    transform = Column(JSON, nullable=False)
    geometry = Column(JSON, nullable=True)
    material = Column(JSON, nullable=True)
    parent_id = Column(String, nullable=True, index=True)
    visible = Column(Boolean, default=True, nullable=False)
    locked = Column(Boolean, default=False, nullable=False)
    created_by = Column(String, nullable=False, index=True)
    last_modified = Column(BigInteger, nullable=False)
    last_modified_by = Column(String, nullable=False)
    created_at = Column(BigInteger, nullable=False)
