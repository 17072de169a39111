"""Thought routes.

Routes translate HTTP requests into use case requests and wrap results in
the success envelope. Domain errors (validation, not found) propagate to
the app's exception handlers.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field

from thoughts.application.usecase.thought import (
    AddReplyRequest,
    AddReplyResponse,
    AddReplyUseCase,
    CreateThoughtRequest,
    CreateThoughtResponse,
    CreateThoughtUseCase,
    GetThoughtRequest,
    GetThoughtResponse,
    GetThoughtUseCase,
    ListThoughtsResponse,
    ListThoughtsUseCase,
    VoteOnReplyRequest,
    VoteOnReplyResponse,
    VoteOnReplyUseCase,
    VoteOnThoughtRequest,
    VoteOnThoughtResponse,
    VoteOnThoughtUseCase,
)
from thoughts.domain.value import VoteType
from thoughts.interface.api.envelope import ListSuccessResponse, SuccessResponse
from thoughts.interface.error import ApiError

router = APIRouter(prefix="/thoughts", tags=["thoughts"], route_class=DishkaRoute)


class TextAPIRequest(BaseModel):
    """API request carrying thought or reply text.

    A missing text field is treated like empty text, so the domain
    service reports it with its usual message.
    """

    text: Optional[str] = None


class VoteAPIRequest(BaseModel):
    """API request for a vote."""

    model_config = ConfigDict(populate_by_name=True)

    vote_type: Optional[str] = Field(default=None, alias="voteType")


def _parse_vote_type(request: VoteAPIRequest) -> VoteType:
    try:
        return VoteType(request.vote_type)
    except ValueError:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Invalid voteType. Must be 'up' or 'down'.",
        )


@router.get("", response_model=ListSuccessResponse[ListThoughtsResponse])
async def list_thoughts(
    list_thoughts_use_case: FromDishka[ListThoughtsUseCase],
) -> ListSuccessResponse[ListThoughtsResponse]:
    """List all thoughts, ranked by net votes then recency."""
    result = await list_thoughts_use_case.execute()
    return ListSuccessResponse(results=len(result.thoughts), data=result)


@router.post(
    "",
    response_model=SuccessResponse[CreateThoughtResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_thought(
    request: TextAPIRequest,
    create_thought_use_case: FromDishka[CreateThoughtUseCase],
) -> SuccessResponse[CreateThoughtResponse]:
    """Post a new thought.

    Raises:
        ValidationError: If text is blank or longer than the limit (400)
    """
    result = await create_thought_use_case.execute(
        CreateThoughtRequest(text=request.text or "")
    )
    return SuccessResponse(data=result)


@router.get("/{thought_id}", response_model=SuccessResponse[GetThoughtResponse])
async def get_thought(
    thought_id: str,
    get_thought_use_case: FromDishka[GetThoughtUseCase],
) -> SuccessResponse[GetThoughtResponse]:
    """Get a thought with its replies.

    Raises:
        NotFoundError: If the thought does not exist (404)
    """
    result = await get_thought_use_case.execute(GetThoughtRequest(thought_id=thought_id))
    return SuccessResponse(data=result)


@router.post(
    "/{thought_id}/replies",
    response_model=SuccessResponse[AddReplyResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    thought_id: str,
    request: TextAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
) -> SuccessResponse[AddReplyResponse]:
    """Reply to a thought.

    Raises:
        ValidationError: If text is blank or longer than the limit (400)
        NotFoundError: If the thought does not exist (404)
    """
    result = await add_reply_use_case.execute(
        AddReplyRequest(thought_id=thought_id, text=request.text or "")
    )
    return SuccessResponse(data=result)


@router.post("/{thought_id}/vote", response_model=SuccessResponse[VoteOnThoughtResponse])
async def vote_on_thought(
    thought_id: str,
    request: VoteAPIRequest,
    vote_on_thought_use_case: FromDishka[VoteOnThoughtUseCase],
) -> SuccessResponse[VoteOnThoughtResponse]:
    """Vote on a thought.

    Responds with data.thought = null when the vote deleted the thought.

    Raises:
        ApiError: If voteType is missing or unknown (400)
        NotFoundError: If the thought does not exist (404)
    """
    vote_type = _parse_vote_type(request)
    result = await vote_on_thought_use_case.execute(
        VoteOnThoughtRequest(thought_id=thought_id, vote_type=vote_type)
    )
    return SuccessResponse(data=result)


@router.post(
    "/{thought_id}/replies/{reply_id}/vote",
    response_model=SuccessResponse[VoteOnReplyResponse],
)
async def vote_on_reply(
    thought_id: str,
    reply_id: str,
    request: VoteAPIRequest,
    vote_on_reply_use_case: FromDishka[VoteOnReplyUseCase],
) -> SuccessResponse[VoteOnReplyResponse]:
    """Vote on a reply.

    Responds with data.reply = null when the vote deleted the reply.

    Raises:
        ApiError: If voteType is missing or unknown (400)
        NotFoundError: If the thought or reply does not exist (404)
    """
    vote_type = _parse_vote_type(request)
    result = await vote_on_reply_use_case.execute(
        VoteOnReplyRequest(
            thought_id=thought_id, reply_id=reply_id, vote_type=vote_type
        )
    )
    return SuccessResponse(data=result)
