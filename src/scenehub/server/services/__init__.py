"""
Business services for the SceneHub server.
"""
