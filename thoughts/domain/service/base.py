"""Domain service base."""


class Service:
    """Marker base for domain services.

    A service holds rules that span an aggregate and its repository, such
    as the downvote threshold that deletes a thought.
    """
