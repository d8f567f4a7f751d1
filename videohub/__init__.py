"""
VideoHub account service: users, sessions and channel read models.

This package contains the FastAPI app entry point (main.py), API routes,
the session protocol use cases, domain models, and MongoDB/Cloudinary
infrastructure.
"""
