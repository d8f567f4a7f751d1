from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """
    Caller identity established by verifying an access token.

    Produced once per request by the API layer and passed explicitly to
    every operation that acts on behalf of the caller.
    """
    user_id: str
