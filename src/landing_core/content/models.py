from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Section(StrEnum):
    """One independently stored document; the value doubles as its file stem."""

    HERO = "hero"
    INTRO = "intro"
    HIGHLIGHT_INFO = "highlight-info"
    ARTICLES = "articles"

    @property
    def filename(self) -> str:
        return f"{self.value}.json"


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Hero(_Document):
    warning_alert: str = Field(alias="warningAlert")
    title: str
    subtitle: str


class Testimonial(_Document):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    text: str = ""
    author: str = ""
    role: str = ""
    metric: str = ""

    @field_validator("text", "author", "role", "metric", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Intro(_Document):
    title: str
    highlight: str
    testimonials: list[Testimonial] = Field(default_factory=list)


class HighlightInfo(_Document):
    text: str


class Article(_Document):
    id: int
    title: str
    content: str
    created_at: str = Field(alias="createdAt")


class ArticleCreateRequest(BaseModel):
    title: str
    content: str


class ConfigAggregate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hero: dict[str, Any] = Field(default_factory=dict)
    intro: dict[str, Any] = Field(default_factory=dict)
    highlight_info: dict[str, Any] = Field(default_factory=dict, alias="highlightInfo")


class ConfigUpdateRequest(BaseModel):
    """Partial aggregate write: a member left out (or null) keeps its stored value."""

    model_config = ConfigDict(populate_by_name=True)

    hero: dict[str, Any] | None = None
    intro: dict[str, Any] | None = None
    highlight_info: dict[str, Any] | None = Field(default=None, alias="highlightInfo")
