from .cloudinary_client import CloudinaryClient

__all__ = ["CloudinaryClient"]
