"""Article domain entity."""

from dataclasses import dataclass

# Ids are 64-bit signed integers assigned by the database.
MAX_ARTICLE_ID = 2**63 - 1


@dataclass
class Article:
    """A stored blog post. ``id == 0`` marks an instance that was never saved."""

    title: str
    body: str
    id: int = 0
