# Standard library imports
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...core.exceptions import ConflictError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_object_id(user_id: Optional[str]) -> Optional[ObjectId]:
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique indexes that back username/email uniqueness"""
        await self.user_collection.create_index([(UserFields.USERNAME, ASCENDING)], unique=True)
        await self.user_collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
        logger.info("User collection indexes ensured")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        return self._document_to_user(document) if document is not None else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email.strip().lower()})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        return self._document_to_user(document) if document is not None else None

    async def find_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username.strip().lower()})
        except Exception as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}")
        return self._document_to_user(document) if document is not None else None

    async def find_by_username_or_email(
        self,
        username: Optional[str],
        email: Optional[str],
    ) -> Optional[User]:
        """
        Find the first user whose username or email matches

        Args:
            username: Username to match (case-insensitive), may be None
            email: Email to match, may be None

        Returns:
            User domain model if found, None otherwise
        """
        clauses: List[Dict[str, Any]] = []
        if username:
            clauses.append({UserFields.USERNAME: username.strip().lower()})
        if email:
            clauses.append({UserFields.EMAIL: email.strip().lower()})
        if not clauses:
            return None

        try:
            document = await self.user_collection.find_one({"$or": clauses})
        except Exception as e:
            raise RuntimeError(f"Error finding user by username or email: {str(e)}")
        return self._document_to_user(document) if document is not None else None

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If username or email collides with another user
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        now = _utcnow()

        try:
            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")

                user_dict[UserFields.UPDATED_AT] = now
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID}}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")

                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
                return self._document_to_user(document)

            # Create new user
            user_dict.pop(UserFields.MONGO_ID, None)
            user_dict[UserFields.CREATED_AT] = now
            user_dict[UserFields.UPDATED_AT] = now
            result = await self.user_collection.insert_one(user_dict)

            user_dict[UserFields.MONGO_ID] = result.inserted_id
            return self._document_to_user(user_dict)
        except DuplicateKeyError as e:
            raise ConflictError("User with email or username already exists") from e
        except (ValueError, RuntimeError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def update_fields(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        """
        Set fields on a user and return the updated record

        Returns:
            Updated User, or None if no user has this ID
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": {**fields, UserFields.UPDATED_AT: _utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise ConflictError("Email is already in use") from e
        except Exception as e:
            raise RuntimeError(f"Error updating user: {str(e)}")
        return self._document_to_user(document) if document is not None else None

    async def set_refresh_token(self, user_id: str, refresh_token: str) -> bool:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False

        try:
            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": {UserFields.REFRESH_TOKEN: refresh_token}},
            )
        except Exception as e:
            raise RuntimeError(f"Error storing refresh token: {str(e)}")
        return result.matched_count > 0

    async def clear_refresh_token(self, user_id: str) -> None:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return

        try:
            await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$unset": {UserFields.REFRESH_TOKEN: ""}},
            )
        except Exception as e:
            raise RuntimeError(f"Error clearing refresh token: {str(e)}")

    async def replace_refresh_token(
        self,
        user_id: str,
        expected_token: str,
        new_token: str,
    ) -> bool:
        """
        Compare-and-swap the stored refresh token in a single update

        The filter includes the expected token, so the write is skipped when
        another request already rotated it.
        """
        object_id = _to_object_id(user_id)
        if object_id is None or not expected_token:
            return False

        try:
            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id, UserFields.REFRESH_TOKEN: expected_token},
                {"$set": {UserFields.REFRESH_TOKEN: new_token}},
            )
        except Exception as e:
            raise RuntimeError(f"Error rotating refresh token: {str(e)}")
        return result.matched_count == 1

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            full_name=document.get(UserFields.FULL_NAME, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            avatar_url=document.get(UserFields.AVATAR_URL, ""),
            cover_image_url=document.get(UserFields.COVER_IMAGE_URL) or "",
            refresh_token=document.get(UserFields.REFRESH_TOKEN),
            watch_history=[str(video_id) for video_id in document.get(UserFields.WATCH_HISTORY, [])],
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
            UserFields.FULL_NAME: user.full_name,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.AVATAR_URL: user.avatar_url,
            UserFields.COVER_IMAGE_URL: user.cover_image_url,
            UserFields.WATCH_HISTORY: [
                object_id for object_id in (_to_object_id(v) for v in user.watch_history) if object_id
            ],
        }
        if user.refresh_token:
            user_dict[UserFields.REFRESH_TOKEN] = user.refresh_token

        # Only include _id if user.id is valid
        object_id = _to_object_id(user.id)
        if object_id is not None:
            user_dict[UserFields.MONGO_ID] = object_id

        return user_dict
