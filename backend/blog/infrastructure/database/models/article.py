"""SQLAlchemy ORM model for the Article entity."""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog.infrastructure.database.base import Base

# SQLite only auto-assigns ids to columns declared exactly INTEGER PRIMARY KEY.
_ArticleId = BigInteger().with_variant(Integer(), "sqlite")


class ArticleModel(Base):
    """ORM model mapped to the 'articles' table."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(_ArticleId, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}')>"
