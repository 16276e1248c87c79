"""Abstract repository interfaces (ports)."""

from abc import ABC, abstractmethod

from blog.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence, implemented in the infrastructure layer.

    Implementations raise ``EntityNotFoundError`` for missing rows and
    ``PersistenceError`` for every other backend failure.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article ordered by ID."""
        ...

    @abstractmethod
    async def create(self, title: str, body: str) -> int:
        """Insert an article and return its new ID, or 0 if no row was inserted."""
        ...

    @abstractmethod
    async def update(self, article_id: int, title: str, body: str) -> int:
        """Update title/body and return the number of rows that changed."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> int:
        """Delete an article and return the number of rows removed."""
        ...
