"""Application service (use case) for Article operations."""

import logging

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article, WriteOutcome, WriteResult
from blog.domain.exceptions import ValidationError
from blog.domain.validation import validate_article_form

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        return await self._repository.get_by_id(article_id)

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, title: str, body: str) -> WriteResult:
        """Validate and insert. Raises ValidationError before touching the store."""
        errors = validate_article_form(title, body)
        if errors:
            raise ValidationError(errors)

        article_id = await self._repository.create(title, body)
        if article_id > 0:
            logger.info("Created article %d", article_id)
            return WriteResult(WriteOutcome.CREATED, article_id, rows_affected=1)

        logger.warning("Insert reported no new row for title=%r", title)
        return WriteResult(WriteOutcome.NOT_INSERTED, 0)

    async def update_article(self, article_id: int, title: str, body: str) -> WriteResult:
        """Confirm the article exists, validate, then update in place."""
        await self.get_article(article_id)

        errors = validate_article_form(title, body)
        if errors:
            raise ValidationError(errors)

        rows = await self._repository.update(article_id, title, body)
        if rows > 0:
            logger.info("Updated article %d", article_id)
            return WriteResult(WriteOutcome.UPDATED, article_id, rows_affected=rows)
        return WriteResult(WriteOutcome.UNCHANGED, article_id)

    async def delete_article(self, article_id: int) -> WriteResult:
        article = await self.get_article(article_id)

        rows = await self._repository.delete(article.id)
        if rows > 0:
            logger.info("Deleted article %d", article_id)
            return WriteResult(WriteOutcome.DELETED, article_id, rows_affected=rows)

        # Another request removed the row between the lookup and the delete.
        return WriteResult(WriteOutcome.ALREADY_DELETED, article_id)
