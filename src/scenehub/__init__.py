"""
SceneHub: multi-tenant backend for collaborative 3D scene editing.
"""

__version__ = "0.1.0"
