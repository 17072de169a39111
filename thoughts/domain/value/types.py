"""Domain value types for the thought board."""

from enum import Enum


class VoteType(str, Enum):
    """Direction of a vote, as sent on the wire.

    Clients that show richer names ("upvote"/"downvote") translate them
    before calling the API.
    """

    UP = "up"
    DOWN = "down"
