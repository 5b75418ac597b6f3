"""
Declarative base shared by all SceneHub SQLAlchemy models.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
