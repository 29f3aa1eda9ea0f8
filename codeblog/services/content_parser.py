import logging
import re
from typing import Tuple

import yaml
from frontmatter.default_handlers import YAMLHandler

from codeblog.errors import ContentParseError

logger = logging.getLogger(__name__)

HEADER_FIELD = "frontmatter"


class RawYAMLHandler(YAMLHandler):
    """
    YAML front-matter handler that leaves scalars as written.

    Delimiter lines swallow only their own line break, so blank lines that
    open the body survive. Header values stay strings; typed coercion
    happens in the FrontMatter model.
    """

    FM_BOUNDARY = re.compile(r"^-{3,}[ \t]*\r?$", re.MULTILINE)

    def load(self, fm: str, **kwargs):
        kwargs.setdefault("Loader", yaml.BaseLoader)
        return super().load(fm, **kwargs)


handler = RawYAMLHandler()


def split_front_matter(raw: str, source: str) -> Tuple[dict, str]:
    """Split a post into its header mapping and its raw markdown body."""
    if not handler.detect(raw):
        raise ContentParseError(source, HEADER_FIELD, "missing '---' header block")

    try:
        fm, body = handler.split(raw)
    except ValueError as e:
        raise ContentParseError(
            source, HEADER_FIELD, "missing closing '---' line"
        ) from e

    try:
        metadata = handler.load(fm)
    except yaml.YAMLError as e:
        raise ContentParseError(
            source, HEADER_FIELD, f"unreadable header block: {e}"
        ) from e

    if not isinstance(metadata, dict) or not metadata:
        raise ContentParseError(source, HEADER_FIELD, "header block is empty")

    # The closing delimiter's own line break is not part of the body
    if body.startswith("\r\n"):
        body = body[2:]
    elif body.startswith("\n"):
        body = body[1:]

    logger.debug(f"Split {source}: {len(metadata)} header keys")
    return metadata, body
