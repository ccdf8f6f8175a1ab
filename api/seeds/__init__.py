"""
Schema + dataset loader for development and test databases.

Not imported by the request path.
"""
