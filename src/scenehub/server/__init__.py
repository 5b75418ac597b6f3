"""
SceneHub HTTP server: routers, services and persistence.
"""
