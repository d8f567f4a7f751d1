"""
API layer for the VideoHub account service.

Exposes HTTP endpoints under /api/v1/users (registration, session,
account updates, channel profile, watch history).
"""
