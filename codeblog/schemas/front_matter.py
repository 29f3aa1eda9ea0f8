"""Typed model of the YAML header block at the top of every post."""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from codeblog.schemas.blog import Author, OgImage


def parse_timestamp(value) -> datetime.datetime:
    """
    Coerce a header date into a timezone-aware datetime.

    Accepts ISO-8601 strings (a trailing ``Z`` means UTC), which is how the
    header loader hands dates over, as well as date or datetime objects from
    callers building headers in code. Naive results are
    taken as UTC so that every post timestamp is comparable.
    """
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime.combine(value, datetime.time())
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"not an ISO-8601 timestamp: {value!r}") from None
    else:
        raise ValueError(f"expected an ISO-8601 timestamp, got {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


class FrontMatter(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    title: str = Field(..., min_length=1)
    excerpt: str = Field(..., min_length=1)
    coverImage: str = Field(..., min_length=1)
    date: datetime.datetime
    author: Author
    ogImage: OgImage
    slug: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        return parse_timestamp(value)
