"""Domain layer errors.

The HTTP layer maps ValidationError to 400 and NotFoundError to 404.
A vote that deletes its target is not an error; see the vote results.
"""


class DomainError(Exception):
    """Base for errors raised by thought board rules."""


class ValidationError(DomainError):
    """Thought or reply text broke the text rules."""


class NotFoundError(DomainError):
    """A thought or reply ID names nothing that is stored."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
