"""
Type aliases shared across layers.
"""

UserId = str
WorkspaceId = str
ProjectId = str
ModelId = str
