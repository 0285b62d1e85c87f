"""SEO metadata models: Yoast input, fallback input, resolved output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TwitterCard = Literal["summary", "summary_large_image", "player", "app"]
ContentType = Literal["website", "article"]


class YoastImage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    width: int | None = None
    height: int | None = None
    type: str | None = None
    alt: str | None = None


class YoastHead(BaseModel):
    """The ``yoast_head_json`` block attached to WordPress objects.

    Only the fields used for metadata are modelled; the rest is ignored.
    ``twitter_card`` stays a plain string because Yoast may emit values
    outside the set Twitter accepts.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    canonical: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_url: str | None = None
    og_site_name: str | None = None
    og_image: list[YoastImage] | None = None
    twitter_card: str | None = None
    author: str | None = None
    published_time: str | None = None
    modified_time: str | None = None


class FallbackMeta(BaseModel):
    """Locally derived values used wherever Yoast has nothing."""

    title: str
    description: str | None = None
    url: str | None = None
    image: str | None = None
    site_name: str | None = None
    author: str | None = None
    published_time: str | None = None
    modified_time: str | None = None
    type: ContentType = "website"


class OgImage(BaseModel):
    url: str = ""
    width: int | None = None
    height: int | None = None
    type: str | None = None
    alt: str | None = None


class OpenGraph(BaseModel):
    type: ContentType
    title: str
    description: str | None = None
    url: str | None = None
    site_name: str | None = None
    images: list[OgImage] | None = None
    published_time: str | None = None
    modified_time: str | None = None
    authors: list[str] | None = None


class TwitterMeta(BaseModel):
    card: TwitterCard
    title: str
    description: str | None = None
    images: list[str] | None = None
    creator: str | None = None


class GoogleBot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: bool = True
    follow: bool = True
    max_video_preview: int = Field(default=-1, alias="max-video-preview")
    max_image_preview: str = Field(default="large", alias="max-image-preview")
    max_snippet: int = Field(default=-1, alias="max-snippet")


class Robots(BaseModel):
    index: bool = True
    follow: bool = True
    google_bot: GoogleBot = GoogleBot()


class Author(BaseModel):
    name: str


class SeoMetadata(BaseModel):
    """Resolved metadata record for one page render."""

    title: str
    description: str | None = None
    canonical: str | None = None
    open_graph: OpenGraph
    twitter: TwitterMeta
    authors: list[Author] | None = None
    published_time: str | None = None
    modified_time: str | None = None
    robots: Robots = Robots()
    google_site_verification: str | None = None
