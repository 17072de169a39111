"""Strongly typed identifiers for thought board entities.

Using NewType for strong typing prevents mixing up thought and reply IDs.
"""

from typing import NewType
from uuid import UUID

ThoughtId = NewType("ThoughtId", UUID)
ReplyId = NewType("ReplyId", UUID)
