"""
Content Item Schemas

Pydantic models for the three kinds of user-authored content checked
before publishing: articles, books and the chapters of a book.

The models are permissive. Every field accepts any value, so a numeric
title or a quoted price reaches the rule engine, which reports it,
instead of failing model construction.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ItemKind(str, Enum):
    """Kinds of content items."""
    ARTICLE = "article"
    BOOK = "book"
    CHAPTER = "chapter"


class ArticleType(str, Enum):
    """Accepted values for an article's ``type`` field."""
    TECH = "tech"
    IDEA = "idea"


class Item(BaseModel):
    """Fields shared by every content item.

    Attributes:
        title: Display title
        tags: Deprecated predecessor of ``topics``; only its presence is checked
    """
    kind: ClassVar[ItemKind]

    title: Any = Field(
        default=None,
        description="Display title"
    )
    tags: Any = Field(
        default=None,
        description="Deprecated, use topics instead"
    )

    class Config:
        frozen = True
        extra = "allow"
        populate_by_name = True


class Article(Item):
    """A standalone article.

    Attributes:
        slug: URL-safe identifier, taken from the file name
        type: Either ``tech`` or ``idea``
        emoji: Single emoji used as the eye-catch
        topics: Related languages or technologies
    """
    kind: ClassVar[ItemKind] = ItemKind.ARTICLE

    slug: Any = None
    type: Any = Field(
        default=None,
        description="Article type (tech or idea)"
    )
    emoji: Any = None
    topics: Any = Field(
        default=None,
        description="List of topic identifiers"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "slug": "python-packaging-notes",
                "title": "Notes on Python packaging",
                "type": "tech",
                "emoji": "📦",
                "topics": ["python", "packaging"],
            }
        }


class Book(Item):
    """A book made of chapters.

    Attributes:
        slug: URL-safe identifier, taken from the book directory name
        summary: Short description of the book
        price: Price in yen; 0 for a free book
        cover_data_url: Data URL of the cover image, if one was found
        topics: Related languages or technologies
    """
    kind: ClassVar[ItemKind] = ItemKind.BOOK

    slug: Any = None
    summary: Any = None
    price: Any = Field(
        default=None,
        description="Price (expected to be a number)"
    )
    cover_data_url: Any = Field(
        default=None,
        alias="coverDataUrl",
        description="Data URL of cover.png or cover.jpg"
    )
    topics: Any = Field(
        default=None,
        description="List of topic identifiers"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "slug": "practical-asyncio-book",
                "title": "Practical asyncio",
                "summary": "Writing concurrent services with asyncio.",
                "price": 500,
                "topics": ["python", "asyncio"],
            }
        }


class Chapter(Item):
    """A single chapter of a book.

    Attributes:
        position: Number encoded in the chapter's file name (e.g. "3" for 3.md)
    """
    kind: ClassVar[ItemKind] = ItemKind.CHAPTER

    position: Any = Field(
        default=None,
        description="File-name derived chapter number"
    )
