import logging
import math
import os
import re

from pydantic import ValidationError

from codeblog.errors import ContentParseError
from codeblog.schemas.blog import Author, OgImage, PostRecord
from codeblog.schemas.front_matter import FrontMatter
from codeblog.services.content_parser import split_front_matter

logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def parse_post_data(source: str, raw: str, *, base_path: str = "") -> PostRecord:
    """Parse one post file into a validated, immutable PostRecord.

    Raises ContentParseError naming ``source`` and the first offending field.
    """
    metadata, body = split_front_matter(raw, source)

    try:
        header = FrontMatter.model_validate(metadata)
    except ValidationError as e:
        field, reason = _first_validation_error(e)
        raise ContentParseError(source, field, reason) from e

    slug = _resolve_slug(header, source)

    post = PostRecord(
        slug=slug,
        title=header.title,
        excerpt=header.excerpt,
        coverImage=_apply_base_path(header.coverImage, base_path),
        publishedAt=header.date,
        author=Author(
            name=header.author.name,
            picture=_apply_base_path(header.author.picture, base_path),
        ),
        ogImage=OgImage(url=_apply_base_path(header.ogImage.url, base_path)),
        readingTime=calculate_reading_time(body),
        content=body,
        source=source,
    )
    logger.debug(f"Parsed {source} -> {slug} ({post.publishedAt.isoformat()})")
    return post


def _first_validation_error(error: ValidationError):
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "frontmatter"
    return field, first["msg"]


def _normalize_slug(filename: str) -> str:
    base, _ = os.path.splitext(filename)
    return base


def _resolve_slug(header: FrontMatter, source: str) -> str:
    slug = header.slug if header.slug is not None else _normalize_slug(source)
    if not SLUG_PATTERN.match(slug):
        raise ContentParseError(source, "slug", f"not a URL-safe slug: {slug!r}")
    return slug


def _apply_base_path(image_path: str, base_path: str) -> str:
    """
    Prefix a root-relative asset path with the site's base path.
    """
    prefix = (base_path or "").rstrip("/")
    if not prefix:
        return image_path
    if not prefix.startswith("/"):
        prefix = f"/{prefix}"

    # Leave absolute URLs, protocol-relative URLs and relative paths alone
    if not image_path.startswith("/") or image_path.startswith("//"):
        return image_path
    if image_path == prefix or image_path.startswith(f"{prefix}/"):
        return image_path

    return f"{prefix}{image_path}"


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
