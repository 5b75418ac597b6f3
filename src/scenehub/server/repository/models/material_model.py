"""
SQLAlchemy model for the workspace material library.
"""

from sqlalchemy import JSON, BigInteger, Boolean, Column, ForeignKey, String

from .base import Base


class MaterialModel(Base):
    """Reusable named material scoped to a workspace."""

    __tablename__ = "materials"

    id = Column(String, primary_key=True)
    name = Column(String(255), nullable=False)
    workspace_id = Column(
        String, ForeignKey("workspaces.id", ondelete="CASCADE"), nullable=False, index=True
    )
    material_type = Column(String(32), nullable=False)  # basic, standard, pbr
    properties = Column(JSON, nullable=False)
    textures = Column(JSON, nullable=True)  # slot name -> storage reference
    created_by = Column(String, nullable=False, index=True)
    is_public = Column(Boolean, default=False, nullable=False)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=True)
