"""Concrete repository implementation backed by SQLAlchemy."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import MAX_ARTICLE_ID, Article
from blog.domain.exceptions import EntityNotFoundError, PersistenceError
from blog.infrastructure.database.models import ArticleModel

T = TypeVar("T")


def _storable_id(article_id: int) -> bool:
    """Ids outside the BIGINT key range can never match a row."""
    return 1 <= article_id <= MAX_ARTICLE_ID


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Every call runs as one short transaction on its own session, bounded by
    ``timeout`` seconds (``None`` disables the deadline).
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        timeout: float | None = None,
    ):
        self._session_factory = session_factory
        self._timeout = timeout

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(id=model.id, title=model.title, body=model.body)

    async def _run(self, operation: str, work: Callable[[AsyncSession], Awaitable[T]]) -> T:
        async def in_transaction() -> T:
            async with self._session_factory() as session:
                async with session.begin():
                    return await work(session)

        try:
            return await asyncio.wait_for(in_transaction(), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise PersistenceError(operation, f"timed out after {self._timeout}s") from exc
        except SQLAlchemyError as exc:
            raise PersistenceError(operation, str(exc)) from exc

    async def get_by_id(self, article_id: int) -> Article:
        if not _storable_id(article_id):
            raise EntityNotFoundError("Article", article_id)

        async def work(session: AsyncSession) -> Article:
            model = await session.get(ArticleModel, article_id)
            if model is None:
                raise EntityNotFoundError("Article", article_id)
            return self._to_entity(model)

        return await self._run("get_by_id", work)

    async def get_all(self) -> list[Article]:
        async def work(session: AsyncSession) -> list[Article]:
            result = await session.execute(select(ArticleModel).order_by(ArticleModel.id))
            return [self._to_entity(row) for row in result.scalars().all()]

        return await self._run("get_all", work)

    async def create(self, title: str, body: str) -> int:
        async def work(session: AsyncSession) -> int:
            model = ArticleModel(title=title, body=body)
            session.add(model)
            await session.flush()
            return model.id or 0

        return await self._run("create", work)

    async def update(self, article_id: int, title: str, body: str) -> int:
        if not _storable_id(article_id):
            return 0

        # Rows whose values already match are excluded so the count reports
        # changed rows on every backend, not just matched ones.
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .where(or_(ArticleModel.title != title, ArticleModel.body != body))
            .values(title=title, body=body)
            .execution_options(synchronize_session=False)
        )

        async def work(session: AsyncSession) -> int:
            result = await session.execute(stmt)
            return result.rowcount

        return await self._run("update", work)

    async def delete(self, article_id: int) -> int:
        if not _storable_id(article_id):
            return 0

        stmt = (
            delete(ArticleModel)
            .where(ArticleModel.id == article_id)
            .execution_options(synchronize_session=False)
        )

        async def work(session: AsyncSession) -> int:
            result = await session.execute(stmt)
            return result.rowcount

        return await self._run("delete", work)
