"""
Stored Book Record Schemas

Pydantic models for the book documents handed over by the book store.
Field names follow the stored camelCase documents; snake_case names are
accepted as well.
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AuthorRef(_Record):
    name: Optional[str] = None


class ChapterRecord(_Record):
    title: Optional[str] = None
    content: Optional[str] = Field(None, description="Rich-text (HTML) chapter body")
    word_count: Optional[int] = Field(None, alias="wordCount")


class CoverDesignRecord(_Record):
    cover_color: Optional[str] = Field(None, alias="coverColor")
    text_color: Optional[str] = Field(None, alias="textColor")
    font_family: Optional[str] = Field(None, alias="fontFamily")
    image_url: Optional[str] = Field(None, alias="imageUrl")


class StatisticsRecord(_Record):
    word_count: Optional[int] = Field(None, alias="wordCount")
    chapter_count: Optional[int] = Field(None, alias="chapterCount")


class BookRecord(_Record):
    """A book as stored. Every field except the title may be missing."""
    title: str = ""
    author: Optional[AuthorRef] = None
    genre: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    chapters: List[ChapterRecord] = Field(default_factory=list)
    cover_design: Optional[CoverDesignRecord] = Field(None, alias="coverDesign")
    statistics: Optional[StatisticsRecord] = None

    @field_validator("title", mode="before")
    @classmethod
    def none_title_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("chapters", mode="before")
    @classmethod
    def none_chapters_to_empty(cls, v):
        return [] if v is None else v
