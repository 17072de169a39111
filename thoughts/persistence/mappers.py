"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from thoughts.domain.model import Thought


def row_to_thought(row: Dict[str, Any]) -> Thought:
    """Convert database row to Thought domain model.

    Args:
        row: Database row as dict

    Returns:
        Thought domain model, replies included
    """
    return Thought.model_validate(row["document"])


def thought_to_dict(thought: Thought) -> Dict[str, Any]:
    """Convert Thought domain model to database dict.

    Args:
        thought: Thought domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": thought.id,
        "created_at": thought.created_at,
        "document": thought.model_dump(mode="json"),
    }
