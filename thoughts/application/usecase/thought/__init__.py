"""Thought use cases."""

from .add_reply import AddReplyRequest, AddReplyResponse, AddReplyUseCase
from .clear_thoughts import ClearThoughtsUseCase
from .common import ReplyView, ThoughtView
from .create_thought import (
    CreateThoughtRequest,
    CreateThoughtResponse,
    CreateThoughtUseCase,
)
from .get_thought import GetThoughtRequest, GetThoughtResponse, GetThoughtUseCase
from .list_thoughts import ListThoughtsResponse, ListThoughtsUseCase
from .vote import (
    VoteOnReplyRequest,
    VoteOnReplyResponse,
    VoteOnReplyUseCase,
    VoteOnThoughtRequest,
    VoteOnThoughtResponse,
    VoteOnThoughtUseCase,
)

__all__ = [
    "AddReplyRequest",
    "AddReplyResponse",
    "AddReplyUseCase",
    "ClearThoughtsUseCase",
    "CreateThoughtRequest",
    "CreateThoughtResponse",
    "CreateThoughtUseCase",
    "GetThoughtRequest",
    "GetThoughtResponse",
    "GetThoughtUseCase",
    "ListThoughtsResponse",
    "ListThoughtsUseCase",
    "ReplyView",
    "ThoughtView",
    "VoteOnReplyRequest",
    "VoteOnReplyResponse",
    "VoteOnReplyUseCase",
    "VoteOnThoughtRequest",
    "VoteOnThoughtResponse",
    "VoteOnThoughtUseCase",
]
