"""Unit tests for ThoughtService."""

import asyncio
from uuid import uuid4

import pytest

from thoughts.domain.error import NotFoundError, ValidationError
from thoughts.domain.repository import ThoughtRepository
from thoughts.domain.service import ThoughtService
from thoughts.domain.value import ReplyId, ThoughtId, VoteType
from thoughts.persistence.repository.inmemory import InMemoryThoughtRepository
from tests.conftest import make_reply, make_thought
from tests.harness import create_env_fixture

# Unit test fixture - in-memory persistence, nothing external needed
unit_env = create_env_fixture()


class TestCreateThought:
    """Tests for create_thought method."""

    @pytest.mark.asyncio
    async def test_create_thought_stores_trimmed_text_with_zero_votes(self, unit_env):
        """New thought should be trimmed, vote-free and reply-free."""
        # Arrange
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)

        # Act
        thought = await service.create_thought("  Hello there \n")

        # Assert
        assert thought.text == "Hello there"
        assert thought.upvotes == 0
        assert thought.downvotes == 0
        assert thought.replies == []

        saved = await repo.find_by_id(thought.id)
        assert saved == thought

    @pytest.mark.asyncio
    async def test_create_thought_assigns_unique_ids(self, unit_env):
        """Every created thought should get its own ID."""
        service = await unit_env.get(ThoughtService)

        ids = {(await service.create_thought(f"thought {i}")).id for i in range(5)}

        assert len(ids) == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", " ", "\t\n  "])
    async def test_create_thought_with_blank_text_raises_error(self, unit_env, text):
        """Blank text should be rejected."""
        service = await unit_env.get(ThoughtService)

        with pytest.raises(ValidationError, match="cannot be empty"):
            await service.create_thought(text)

    @pytest.mark.asyncio
    async def test_create_thought_over_limit_raises_error(self, unit_env):
        """301 characters should be rejected."""
        service = await unit_env.get(ThoughtService)

        with pytest.raises(ValidationError, match="cannot exceed 300 characters"):
            await service.create_thought("x" * 301)

    @pytest.mark.asyncio
    async def test_create_thought_at_limit_is_accepted(self, unit_env):
        """Exactly 300 characters is allowed."""
        service = await unit_env.get(ThoughtService)

        thought = await service.create_thought("x" * 300)

        assert len(thought.text) == 300

    @pytest.mark.asyncio
    async def test_length_limit_applies_before_trimming(self, unit_env):
        """Padding counts toward the limit even though it is not stored."""
        service = await unit_env.get(ThoughtService)

        with pytest.raises(ValidationError):
            await service.create_thought(" " + "x" * 300)

    @pytest.mark.asyncio
    async def test_rejected_thought_is_not_stored(self, unit_env):
        """Validation failure should leave storage untouched."""
        service = await unit_env.get(ThoughtService)

        with pytest.raises(ValidationError):
            await service.create_thought("")

        assert await service.list_thoughts() == []


class TestListThoughts:
    """Tests for list_thoughts method."""

    @pytest.mark.asyncio
    async def test_equal_net_votes_orders_newest_first(self, unit_env):
        """Net votes [3, 3, 1] created t1<t2<t3 should list t2, t1, t3."""
        # Arrange
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)

        first = make_thought("first", upvotes=3, minutes=1)
        second = make_thought("second", upvotes=4, downvotes=1, minutes=2)
        third = make_thought("third", upvotes=1, minutes=3)
        for thought in (first, second, third):
            await repo.save(thought)

        # Act
        listed = await service.list_thoughts()

        # Assert
        assert [t.id for t in listed] == [second.id, first.id, third.id]

    @pytest.mark.asyncio
    async def test_replies_are_ranked_inside_each_thought(self, unit_env):
        """Replies should follow the same ranking as thoughts."""
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)

        low = make_reply("low", downvotes=2, minutes=1)
        old_top = make_reply("old top", upvotes=2, minutes=2)
        new_top = make_reply("new top", upvotes=2, minutes=3)
        await repo.save(make_thought(replies=[low, old_top, new_top]))

        listed = await service.list_thoughts()

        assert [r.id for r in listed[0].replies] == [new_top.id, old_top.id, low.id]

    @pytest.mark.asyncio
    async def test_repeated_reads_are_identical(self, unit_env):
        """Listing twice without writes returns equal results, ties included."""
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)

        # Same votes and same timestamp: only storage order separates them
        for i in range(4):
            await repo.save(make_thought(f"tie {i}", upvotes=1, minutes=0))

        assert await service.list_thoughts() == await service.list_thoughts()

    @pytest.mark.asyncio
    async def test_list_is_empty_without_thoughts(self, unit_env):
        service = await unit_env.get(ThoughtService)

        assert await service.list_thoughts() == []


class TestGetThought:
    """Tests for get_thought method."""

    @pytest.mark.asyncio
    async def test_get_thought_returns_ranked_replies(self, unit_env):
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)

        worse = make_reply("worse", minutes=5)
        better = make_reply("better", upvotes=1, minutes=1)
        thought = make_thought(replies=[worse, better])
        await repo.save(thought)

        result = await service.get_thought(thought.id)

        assert result.id == thought.id
        assert [r.id for r in result.replies] == [better.id, worse.id]

    @pytest.mark.asyncio
    async def test_get_unknown_thought_raises_not_found(self, unit_env):
        service = await unit_env.get(ThoughtService)

        with pytest.raises(NotFoundError, match="Thought not found"):
            await service.get_thought(ThoughtId(uuid4()))


class TestAddReply:
    """Tests for add_reply method."""

    @pytest.mark.asyncio
    async def test_add_reply_appends_to_parent(self, unit_env):
        service = await unit_env.get(ThoughtService)
        thought = await service.create_thought("Parent")

        reply = await service.add_reply(thought.id, "  Child  ")

        assert reply.text == "Child"
        assert reply.upvotes == 0
        assert reply.downvotes == 0

        parent = await service.get_thought(thought.id)
        assert [r.id for r in parent.replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_add_reply_to_unknown_thought_creates_nothing(self, unit_env):
        """No placeholder thought and no orphan reply should be created."""
        service = await unit_env.get(ThoughtService)

        with pytest.raises(NotFoundError):
            await service.add_reply(ThoughtId(uuid4()), "Orphan")

        assert await service.list_thoughts() == []

    @pytest.mark.asyncio
    async def test_add_reply_validates_text(self, unit_env):
        service = await unit_env.get(ThoughtService)
        thought = await service.create_thought("Parent")

        with pytest.raises(ValidationError):
            await service.add_reply(thought.id, "   ")
        with pytest.raises(ValidationError):
            await service.add_reply(thought.id, "y" * 301)

        parent = await service.get_thought(thought.id)
        assert parent.replies == []


class TestVoteOnThought:
    """Tests for vote_on_thought method."""

    @pytest.mark.asyncio
    async def test_upvote_increments_upvotes(self, unit_env):
        service = await unit_env.get(ThoughtService)
        thought = await service.create_thought("Vote me")

        result = await service.vote_on_thought(thought.id, VoteType.UP)

        assert result.deleted is False
        assert result.thought.upvotes == 1
        assert result.thought.downvotes == 0

    @pytest.mark.asyncio
    async def test_downvote_below_threshold_keeps_thought(self, unit_env):
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)
        thought = make_thought(downvotes=8)
        await repo.save(thought)

        result = await service.vote_on_thought(thought.id, VoteType.DOWN)

        assert result.deleted is False
        assert result.thought.downvotes == 9
        assert (await repo.find_by_id(thought.id)).downvotes == 9

    @pytest.mark.asyncio
    async def test_tenth_downvote_deletes_thought_and_replies(self, unit_env):
        """9 downvotes plus one more should remove the thought everywhere."""
        # Arrange
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)
        thought = make_thought(upvotes=50, downvotes=9, replies=[make_reply()])
        await repo.save(thought)

        # Act
        result = await service.vote_on_thought(thought.id, VoteType.DOWN)

        # Assert
        assert result.deleted is True
        assert result.thought is None
        assert await service.list_thoughts() == []
        with pytest.raises(NotFoundError):
            await service.get_thought(thought.id)

    @pytest.mark.asyncio
    async def test_threshold_counts_downvotes_not_net_votes(self, unit_env):
        """A popular thought is still deleted at ten downvotes."""
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)
        thought = make_thought(upvotes=100, downvotes=9)
        await repo.save(thought)

        result = await service.vote_on_thought(thought.id, VoteType.DOWN)

        assert result.deleted is True

    @pytest.mark.asyncio
    async def test_vote_on_unknown_thought_raises_not_found(self, unit_env):
        service = await unit_env.get(ThoughtService)

        with pytest.raises(NotFoundError):
            await service.vote_on_thought(ThoughtId(uuid4()), VoteType.UP)

    @pytest.mark.asyncio
    async def test_vote_after_deletion_raises_not_found(self, unit_env):
        """Deleted is reported once; afterwards the thought is simply gone."""
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)
        thought = make_thought(downvotes=9)
        await repo.save(thought)
        await service.vote_on_thought(thought.id, VoteType.DOWN)

        with pytest.raises(NotFoundError):
            await service.vote_on_thought(thought.id, VoteType.DOWN)

    @pytest.mark.asyncio
    async def test_custom_threshold_is_honored(self):
        """The threshold is configurable per service."""
        repo = InMemoryThoughtRepository()
        service = ThoughtService(thought_repository=repo, deletion_threshold=2)
        thought = await service.create_thought("fragile")

        first = await service.vote_on_thought(thought.id, VoteType.DOWN)
        second = await service.vote_on_thought(thought.id, VoteType.DOWN)

        assert first.deleted is False
        assert second.deleted is True


class TestVoteOnReply:
    """Tests for vote_on_reply method."""

    @pytest.mark.asyncio
    async def test_upvote_reply_leaves_parent_votes_alone(self, unit_env):
        service = await unit_env.get(ThoughtService)
        thought = await service.create_thought("Parent")
        reply = await service.add_reply(thought.id, "Child")

        result = await service.vote_on_reply(thought.id, reply.id, VoteType.UP)

        assert result.deleted is False
        assert result.reply.upvotes == 1
        parent = await service.get_thought(thought.id)
        assert parent.upvotes == 0
        assert parent.replies[0].upvotes == 1

    @pytest.mark.asyncio
    async def test_tenth_downvote_removes_only_that_reply(self, unit_env):
        """Parent and sibling replies should survive a reply deletion."""
        # Arrange
        service = await unit_env.get(ThoughtService)
        repo = await unit_env.get(ThoughtRepository)
        doomed = make_reply("doomed", downvotes=9)
        sibling = make_reply("sibling", upvotes=1)
        thought = make_thought(replies=[doomed, sibling])
        await repo.save(thought)

        # Act
        result = await service.vote_on_reply(thought.id, doomed.id, VoteType.DOWN)

        # Assert
        assert result.deleted is True
        assert result.reply is None
        assert result.thought_id == thought.id

        parent = await service.get_thought(thought.id)
        assert [r.id for r in parent.replies] == [sibling.id]

    @pytest.mark.asyncio
    async def test_vote_on_unknown_reply_raises_not_found(self, unit_env):
        service = await unit_env.get(ThoughtService)
        thought = await service.create_thought("Parent")

        with pytest.raises(NotFoundError, match="Reply not found"):
            await service.vote_on_reply(thought.id, ReplyId(uuid4()), VoteType.UP)

    @pytest.mark.asyncio
    async def test_vote_on_reply_of_unknown_thought_raises_not_found(self, unit_env):
        service = await unit_env.get(ThoughtService)

        with pytest.raises(NotFoundError, match="Thought not found"):
            await service.vote_on_reply(
                ThoughtId(uuid4()), ReplyId(uuid4()), VoteType.DOWN
            )

    @pytest.mark.asyncio
    async def test_reply_id_is_scoped_to_its_thought(self, unit_env):
        """A reply can't be reached through a different thought."""
        service = await unit_env.get(ThoughtService)
        owner = await service.create_thought("Owner")
        other = await service.create_thought("Other")
        reply = await service.add_reply(owner.id, "Child")

        with pytest.raises(NotFoundError):
            await service.vote_on_reply(other.id, reply.id, VoteType.UP)


class TestClearAll:
    """Tests for clear_all method."""

    @pytest.mark.asyncio
    async def test_clear_all_removes_everything(self, unit_env):
        service = await unit_env.get(ThoughtService)
        thought = await service.create_thought("One")
        await service.add_reply(thought.id, "Reply")
        await service.create_thought("Two")

        await service.clear_all()

        assert await service.list_thoughts() == []


class TestScenario:
    """End-to-end flow through the service."""

    @pytest.mark.asyncio
    async def test_hello_world_flow(self, unit_env):
        """Five upvotes on a thought, ten downvotes on its only reply."""
        service = await unit_env.get(ThoughtService)

        thought = await service.create_thought("Hello")
        reply = await service.add_reply(thought.id, "World")

        for _ in range(5):
            await service.vote_on_thought(thought.id, VoteType.UP)

        results = [
            await service.vote_on_reply(thought.id, reply.id, VoteType.DOWN)
            for _ in range(10)
        ]

        assert [r.deleted for r in results] == [False] * 9 + [True]

        final = await service.get_thought(thought.id)
        assert final.upvotes == 5
        assert final.downvotes == 0
        assert final.replies == []


class CommitRecordingRepository(InMemoryThoughtRepository):
    """Records whether the write lock was held at each commit."""

    def __init__(self, write_lock: asyncio.Lock) -> None:
        super().__init__()
        self.write_lock = write_lock
        self.commits_under_lock: list[bool] = []

    async def commit(self) -> None:
        self.commits_under_lock.append(self.write_lock.locked())


class TestCommitUnderLock:
    """Writes must be committed before the next writer can read."""

    @pytest.mark.asyncio
    async def test_every_write_commits_while_holding_the_lock(self):
        # Arrange
        lock = asyncio.Lock()
        repo = CommitRecordingRepository(lock)
        service = ThoughtService(
            thought_repository=repo, write_lock=lock, deletion_threshold=1
        )

        # Act
        thought = await service.create_thought("Parent")
        reply = await service.add_reply(thought.id, "Child")
        await service.vote_on_thought(thought.id, VoteType.UP)
        await service.vote_on_reply(thought.id, reply.id, VoteType.UP)
        await service.vote_on_reply(thought.id, reply.id, VoteType.DOWN)
        await service.vote_on_thought(thought.id, VoteType.DOWN)
        await service.clear_all()

        # Assert
        assert repo.commits_under_lock == [True] * 7

    @pytest.mark.asyncio
    async def test_concurrent_votes_are_not_lost(self):
        """Interleaved voters in one process all land."""
        lock = asyncio.Lock()
        repo = InMemoryThoughtRepository()
        service = ThoughtService(thought_repository=repo, write_lock=lock)
        thought = await service.create_thought("Popular")

        await asyncio.gather(
            *(service.vote_on_thought(thought.id, VoteType.UP) for _ in range(20))
        )

        assert (await repo.find_by_id(thought.id)).upvotes == 20


class TestConfigurableTextLimit:
    """The length limit comes from settings, not from the models."""

    @pytest.mark.asyncio
    async def test_raised_limit_accepts_longer_text(self):
        service = ThoughtService(
            thought_repository=InMemoryThoughtRepository(), max_text_length=400
        )

        thought = await service.create_thought("x" * 350)
        reply = await service.add_reply(thought.id, "y" * 350)

        assert len(thought.text) == 350
        assert len(reply.text) == 350

    @pytest.mark.asyncio
    async def test_lowered_limit_rejects_with_domain_error(self):
        service = ThoughtService(
            thought_repository=InMemoryThoughtRepository(), max_text_length=10
        )

        with pytest.raises(ValidationError, match="cannot exceed 10 characters"):
            await service.create_thought("x" * 11)
