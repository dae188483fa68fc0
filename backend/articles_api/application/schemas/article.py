"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, StringConstraints

from articles_api.application.validation import RuleSet, not_blank

# Length limits are checked on the raw string, then blank strings are rejected.
TitleText = Annotated[str, StringConstraints(min_length=1, max_length=255), AfterValidator(not_blank)]
BodyText = Annotated[str, StringConstraints(min_length=1), AfterValidator(not_blank)]


class ArticleForm(RuleSet):
    """Rule set for creating a new article."""

    title: TitleText = Field(..., examples=["Getting Started"])
    body: BodyText = Field(..., examples=["My first article"])


class ArticleView(BaseModel):
    """Schema returned to the client for list and show."""

    id: int
    title: str
    body: str
    published: str = Field(..., examples=["2 days ago"])
    updated: str = Field(..., examples=["2 days ago"])


class ArticleRecord(BaseModel):
    """The stored record as returned by create, timestamps untransformed."""

    id: int
    title: str
    body: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
