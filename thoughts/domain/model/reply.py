"""Reply entity.

Replies are flat comments attached to exactly one thought. They have no
lifecycle of their own: they are stored inside their parent thought and
removed with it.
"""

from datetime import datetime, timezone

from pydantic import Field

from thoughts.domain.model.common import DomainModel
from thoughts.domain.value import ReplyId, VoteType


class Reply(DomainModel):
    """Reply entity.

    Represents an anonymous reply to a thought, ranked among its siblings
    by net votes.
    """

    id: ReplyId
    # Upper bound is the configurable ThoughtService.max_text_length
    text: str = Field(min_length=1)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def net_votes(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvotes - self.downvotes

    def with_vote(self, vote_type: VoteType) -> "Reply":
        """Return a copy with one more vote of the given type."""
        if vote_type == VoteType.UP:
            return self.model_copy(update={"upvotes": self.upvotes + 1})
        return self.model_copy(update={"downvotes": self.downvotes + 1})
