# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.profile_repository import ProfileRepository
from ...domain.models.channel import ChannelProfile, VideoOwner, WatchedVideo
from ...domain.constants import SubscriptionFields, UserFields, VideoFields
from .mongo_connection import get_subscription_collection, get_user_collection, get_video_collection

logger = logging.getLogger(__name__)

SUBSCRIBERS = "subscribers"
SUBSCRIBED_TO = "subscribed_to"
WATCHED_VIDEOS = "watched_videos"


def build_channel_profile_pipeline(
    username: str,
    subscriptions_collection: str,
    viewer_id: Optional[ObjectId] = None,
) -> List[Dict[str, Any]]:
    """
    Aggregation pipeline for a channel page

    Counts subscriptions where the user is the channel (subscribers) and
    where the user is the subscriber (channels subscribed to).
    """
    if viewer_id is not None:
        is_subscribed: Any = {
            "$cond": {
                "if": {"$in": [viewer_id, f"${SUBSCRIBERS}.{SubscriptionFields.SUBSCRIBER}"]},
                "then": True,
                "else": False,
            }
        }
    else:
        is_subscribed = {"$literal": False}

    return [
        {"$match": {UserFields.USERNAME: username}},
        {
            "$lookup": {
                "from": subscriptions_collection,
                "localField": UserFields.MONGO_ID,
                "foreignField": SubscriptionFields.CHANNEL,
                "as": SUBSCRIBERS,
            }
        },
        {
            "$lookup": {
                "from": subscriptions_collection,
                "localField": UserFields.MONGO_ID,
                "foreignField": SubscriptionFields.SUBSCRIBER,
                "as": SUBSCRIBED_TO,
            }
        },
        {
            "$addFields": {
                "subscribers_count": {"$size": f"${SUBSCRIBERS}"},
                "channels_subscribed_to_count": {"$size": f"${SUBSCRIBED_TO}"},
                "is_subscribed": is_subscribed,
            }
        },
        {
            "$project": {
                UserFields.FULL_NAME: 1,
                UserFields.USERNAME: 1,
                "subscribers_count": 1,
                "channels_subscribed_to_count": 1,
                "is_subscribed": 1,
                UserFields.AVATAR_URL: 1,
                UserFields.COVER_IMAGE_URL: 1,
                UserFields.CREATED_AT: 1,
            }
        },
    ]


def build_watch_history_pipeline(
    user_id: ObjectId,
    videos_collection: str,
    users_collection: str,
) -> List[Dict[str, Any]]:
    """Aggregation pipeline joining watch history to videos and their owners"""
    return [
        {"$match": {UserFields.MONGO_ID: user_id}},
        {
            "$lookup": {
                "from": videos_collection,
                "localField": UserFields.WATCH_HISTORY,
                "foreignField": VideoFields.MONGO_ID,
                "as": WATCHED_VIDEOS,
                "pipeline": [
                    {
                        "$lookup": {
                            "from": users_collection,
                            "localField": VideoFields.OWNER,
                            "foreignField": UserFields.MONGO_ID,
                            "as": VideoFields.OWNER,
                            "pipeline": [
                                {
                                    "$project": {
                                        UserFields.FULL_NAME: 1,
                                        UserFields.USERNAME: 1,
                                        UserFields.AVATAR_URL: 1,
                                    }
                                }
                            ],
                        }
                    },
                    {"$addFields": {VideoFields.OWNER: {"$first": f"${VideoFields.OWNER}"}}},
                ],
            }
        },
        {"$project": {UserFields.WATCH_HISTORY: 1, WATCHED_VIDEOS: 1}},
    ]


def order_watched_videos(watch_history: List[Any], videos: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Put joined video documents back into stored watch-history order

    $lookup returns matches in collection order and collapses repeats, so
    the stored id sequence drives the result. Ids with no video are dropped.
    """
    by_id = {str(video[VideoFields.MONGO_ID]): video for video in videos}
    return [by_id[str(video_id)] for video_id in watch_history if str(video_id) in by_id]


class MongoProfileRepository(ProfileRepository):
    """MongoDB aggregation-backed implementation of ProfileRepository"""

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        subscription_collection: Optional[AsyncIOMotorCollection] = None,
        video_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.subscription_collection = (
            subscription_collection if subscription_collection is not None else get_subscription_collection()
        )
        self.video_collection = video_collection if video_collection is not None else get_video_collection()

    async def get_channel_profile(
        self,
        username: str,
        viewer_id: Optional[str] = None,
    ) -> Optional[ChannelProfile]:
        """
        Get channel page for a username

        Args:
            username: Lower-cased username of the channel
            viewer_id: ID of the requesting user, if any

        Returns:
            ChannelProfile if the user exists, None otherwise
        """
        if not username:
            return None

        viewer_object_id: Optional[ObjectId] = None
        if viewer_id:
            try:
                viewer_object_id = ObjectId(viewer_id)
            except (InvalidId, ValueError, TypeError):
                viewer_object_id = None

        pipeline = build_channel_profile_pipeline(
            username,
            self.subscription_collection.name,
            viewer_object_id,
        )
        try:
            documents = await self.user_collection.aggregate(pipeline).to_list(length=1)
        except Exception as e:
            raise RuntimeError(f"Error aggregating channel profile: {str(e)}")

        if not documents:
            return None
        return self._document_to_channel(documents[0])

    async def get_watch_history(self, user_id: str) -> Optional[List[WatchedVideo]]:
        """
        Get watched videos with owner projections, in stored order

        Returns:
            List of WatchedVideo, or None if the user does not exist
        """
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        pipeline = build_watch_history_pipeline(
            object_id,
            self.video_collection.name,
            self.user_collection.name,
        )
        try:
            documents = await self.user_collection.aggregate(pipeline).to_list(length=1)
        except Exception as e:
            raise RuntimeError(f"Error aggregating watch history: {str(e)}")

        if not documents:
            return None

        document = documents[0]
        ordered = order_watched_videos(
            document.get(UserFields.WATCH_HISTORY, []),
            document.get(WATCHED_VIDEOS, []),
        )
        return [self._document_to_video(video) for video in ordered]

    def _document_to_channel(self, document: dict) -> ChannelProfile:
        return ChannelProfile(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            full_name=document.get(UserFields.FULL_NAME, ""),
            avatar_url=document.get(UserFields.AVATAR_URL, ""),
            cover_image_url=document.get(UserFields.COVER_IMAGE_URL) or "",
            subscribers_count=int(document.get("subscribers_count", 0)),
            channels_subscribed_to_count=int(document.get("channels_subscribed_to_count", 0)),
            is_subscribed=bool(document.get("is_subscribed", False)),
            created_at=document.get(UserFields.CREATED_AT),
        )

    def _document_to_video(self, document: dict) -> WatchedVideo:
        owner_document = document.get(VideoFields.OWNER)
        owner = None
        if isinstance(owner_document, dict):
            owner = VideoOwner(
                full_name=owner_document.get(UserFields.FULL_NAME, ""),
                username=owner_document.get(UserFields.USERNAME, ""),
                avatar_url=owner_document.get(UserFields.AVATAR_URL, ""),
            )

        return WatchedVideo(
            id=str(document[VideoFields.MONGO_ID]),
            title=document.get(VideoFields.TITLE, ""),
            description=document.get(VideoFields.DESCRIPTION, ""),
            video_file=document.get(VideoFields.VIDEO_FILE, ""),
            thumbnail=document.get(VideoFields.THUMBNAIL, ""),
            duration=float(document.get(VideoFields.DURATION) or 0),
            views=int(document.get(VideoFields.VIEWS) or 0),
            owner=owner,
            created_at=document.get(VideoFields.CREATED_AT),
        )
