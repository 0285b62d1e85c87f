"""WordPress REST API data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Rendered(BaseModel):
    """A ``{"rendered": "..."}`` field as returned by the REST API."""

    rendered: str = ""


class FeaturedMedia(BaseModel):
    model_config = ConfigDict(extra="ignore")

    source_url: str | None = None
    alt_text: str | None = None


class Term(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    slug: str | None = None


class Embedded(BaseModel):
    """Related resources inlined by ``_embed``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    featured_media: list[FeaturedMedia] | None = Field(
        default=None, alias="wp:featuredmedia"
    )
    terms: list[list[Term]] | None = Field(default=None, alias="wp:term")
    replies: list[Any] | None = None


class WPPost(BaseModel):
    """A post (or page) as returned by ``/posts`` and ``/pages``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    slug: str
    date: str = ""
    link: str | None = None
    title: Rendered = Rendered()
    excerpt: Rendered = Rendered()
    content: Rendered | None = None
    yoast_head_json: dict[str, Any] | None = None
    embedded: Embedded | None = Field(default=None, alias="_embedded")


class WPCategory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str | None = None
    slug: str
    description: str | None = None
    yoast_head_json: dict[str, Any] | None = None


class WPComment(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    parent: int = 0
    post: int = 0
    date: str = ""
    author_name: str = ""
    author_email: str | None = None
    content: Rendered = Rendered()


class PostPage(BaseModel):
    """One page of a post listing plus the total page count header."""

    posts: list[WPPost]
    total_pages: int = 1
