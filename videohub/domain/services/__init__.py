from .media_storage import MediaStorage, MediaUploadResult

__all__ = ["MediaStorage", "MediaUploadResult"]
