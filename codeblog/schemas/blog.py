import datetime

from pydantic import BaseModel, ConfigDict, Field

_STRICT_STRINGS = ConfigDict(
    frozen=True,
    str_strip_whitespace=True,
    coerce_numbers_to_str=True,
)


class Author(BaseModel):
    model_config = _STRICT_STRINGS

    name: str = Field(..., min_length=1)
    picture: str = Field(..., min_length=1)


class OgImage(BaseModel):
    model_config = _STRICT_STRINGS

    url: str = Field(..., min_length=1)


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    excerpt: str
    coverImage: str
    publishedAt: datetime.datetime
    author: Author
    ogImage: OgImage
    readingTime: str


class PostRecord(PostSummary):
    content: str
    source: str = Field(
        ...,
        exclude=True,
        description="Name of the content file the record was parsed from.",
    )

    def to_summary(self) -> PostSummary:
        return PostSummary.model_validate(self.model_dump(exclude={"content"}))
