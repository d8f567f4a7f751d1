"""Constants for Video documents (read-only in this service)"""


class VideoFields:
    """Field name constants for Video model"""
    ID = "id"
    OWNER = "owner"
    TITLE = "title"
    DESCRIPTION = "description"
    VIDEO_FILE = "video_file"
    THUMBNAIL = "thumbnail"
    DURATION = "duration"
    VIEWS = "views"
    IS_PUBLISHED = "is_published"
    CREATED_AT = "created_at"

    MONGO_ID = "_id"
