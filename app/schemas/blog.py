import datetime

from pydantic import BaseModel, ConfigDict, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class PostMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    slug: str = Field(pattern=SLUG_PATTERN)
    isPublished: bool = False
    datePublished: datetime.date


class RenderedPost(BaseModel):
    slug: str
    html: str


class PostPage(BaseModel):
    slug: str
    post: str  # rendered HTML

    @classmethod
    def from_rendered(cls, rendered: RenderedPost) -> "PostPage":
        return cls(slug=rendered.slug, post=rendered.html)
