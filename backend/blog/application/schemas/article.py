"""Pydantic view models for the article forms."""

from pydantic import BaseModel, Field


class ArticleFormData(BaseModel):
    """Values shown in the create/edit form plus any validation messages."""

    title: str = ""
    body: str = ""
    target_url: str
    errors: dict[str, str] = Field(default_factory=dict)
