"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    USERNAME = "username"
    EMAIL = "email"
    FULL_NAME = "full_name"
    HASHED_PASSWORD = "hashed_password"
    AVATAR_URL = "avatar_url"
    COVER_IMAGE_URL = "cover_image_url"
    REFRESH_TOKEN = "refresh_token"
    WATCH_HISTORY = "watch_history"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
