"""Shared base for thought board models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic model.

    Changes go through model_copy(update=...), so a stored thought is never
    mutated behind the repository's back.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
