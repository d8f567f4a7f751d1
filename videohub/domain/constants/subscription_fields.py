"""Constants for Subscription documents (read-only in this service)"""


class SubscriptionFields:
    """Field name constants for Subscription model"""
    SUBSCRIBER = "subscriber"  # ObjectId of the subscribing user
    CHANNEL = "channel"  # ObjectId of the user being subscribed to

    MONGO_ID = "_id"
