"""SQL implementation of the Thought repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from thoughts.domain.model import Thought
from thoughts.domain.repository.thought import ThoughtRepository
from thoughts.domain.value import ThoughtId
from thoughts.persistence.mappers import row_to_thought, thought_to_dict
from thoughts.persistence.tables import thoughts_table


class SqlThoughtRepository(ThoughtRepository):
    """SQL implementation of ThoughtRepository.

    Rows in the thoughts table are the set of live thought IDs; each row's
    document is the full thought. Updates rewrite the whole document, so
    concurrent writers to the same thought can lose updates.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thought_id: ThoughtId) -> Optional[Thought]:
        """Find a thought by ID."""
        with logfire.span("thought_repository.find_by_id", thought_id=str(thought_id)):
            stmt = select(thoughts_table).where(thoughts_table.c.id == thought_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_thought(row._asdict())

    async def find_all(self) -> List[Thought]:
        """Find all thoughts in creation order."""
        with logfire.span("thought_repository.find_all"):
            stmt = select(thoughts_table).order_by(
                thoughts_table.c.created_at, thoughts_table.c.id
            )
            result = await self.session.execute(stmt)
            return [row_to_thought(row._asdict()) for row in result.fetchall()]

    async def save(self, thought: Thought) -> Thought:
        """Save a thought (create or update)."""
        thought_dict = thought_to_dict(thought)
        existing = await self.find_by_id(thought.id)

        if existing:
            # created_at is the storage order key and never changes
            stmt = (
                thoughts_table.update()
                .where(thoughts_table.c.id == thought.id)
                .values(document=thought_dict["document"])
            )
        else:
            stmt = thoughts_table.insert().values(**thought_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return thought

    async def delete(self, thought_id: ThoughtId) -> None:
        """Delete a thought (hard delete)."""
        stmt = thoughts_table.delete().where(thoughts_table.c.id == thought_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_all(self) -> None:
        """Delete every thought."""
        await self.session.execute(thoughts_table.delete())
        await self.session.flush()

    async def commit(self) -> None:
        """Commit the session's transaction.

        The request scope commits again when it closes; that second
        commit finds nothing pending.
        """
        await self.session.commit()
