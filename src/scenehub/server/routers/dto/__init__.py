"""
Data transfer objects for the HTTP API.
"""
