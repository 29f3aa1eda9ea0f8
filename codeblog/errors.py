"""
Exception classes for the content pipeline.

Build-time problems (bad front-matter, duplicate slugs, a missing content
directory) are fatal to a build. Lookup misses are expected and handled by
the caller.
"""

from typing import Iterable, List


class ContentError(Exception):
    """Base exception for all content pipeline errors."""

    pass


# =============================================================================
# Build Errors
# =============================================================================


class ContentParseError(ContentError):
    """Raised when a content file has a missing, blank or malformed field."""

    def __init__(self, file: str, field: str, reason: str):
        self.file = file
        self.field = field
        self.reason = reason
        super().__init__(f"{file}: invalid field '{field}': {reason}")


class DuplicateSlugError(ContentError):
    """Raised when two or more content files resolve to the same slug."""

    def __init__(self, slug: str, files: Iterable[str]):
        self.slug = slug
        self.files = sorted(files)
        super().__init__(
            f"slug '{slug}' is claimed by multiple files: {', '.join(self.files)}"
        )


class ContentDirectoryError(ContentError):
    """Raised when the configured content directory does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"content directory not found: {path}")


class ContentBuildError(ContentError):
    """Raised with every collected error when loading in collect-all mode."""

    def __init__(self, errors: List[ContentError]):
        self.errors = list(errors)
        lines = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"{len(self.errors)} content error(s):\n{lines}")


# =============================================================================
# Lookup Errors
# =============================================================================


class PostNotFoundError(ContentError):
    """Raised when no post matches the requested slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"post not found: {slug}")


class IndexNotLoadedError(ContentError):
    """Raised when the index is queried before load_all() has run."""

    pass
