import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Union

from codeblog.errors import (
    ContentBuildError,
    ContentError,
    ContentParseError,
    DuplicateSlugError,
    IndexNotLoadedError,
    PostNotFoundError,
)
from codeblog.repos.posts_repo import FilePostsRepo
from codeblog.schemas.blog import PostRecord, PostSummary
from codeblog.services.posts_service import parse_post_data

logger = logging.getLogger(__name__)

ParseOutcome = Union[PostRecord, ContentError]


class ContentIndex:
    """
    Sorted, slug-addressable collection of every post in the content directory.

    Nothing is read until ``load_all()`` is called. Lookups work on the
    collection built by the last successful load and never touch disk.
    """

    def __init__(
        self,
        repo,
        *,
        base_path: str = "",
        max_workers: Optional[int] = None,
        collect_errors: bool = False,
    ):
        self.repo = repo
        self.base_path = base_path
        self.max_workers = max_workers
        self.collect_errors = collect_errors
        self._posts: Optional[List[PostRecord]] = None
        self._by_slug: Dict[str, PostRecord] = {}

    @classmethod
    def from_settings(cls, settings) -> "ContentIndex":
        repo = FilePostsRepo(settings.content_path, settings.CONTENT_EXTENSION)
        return cls(
            repo,
            base_path=settings.BASE_PATH,
            max_workers=settings.MAX_WORKERS,
            collect_errors=settings.COLLECT_ERRORS,
        )

    @property
    def loaded(self) -> bool:
        return self._posts is not None

    def load_all(self) -> List[PostRecord]:
        """Parse every post file and replace the collection.

        Posts are ordered newest first; equal timestamps fall back to the
        source file name. On any error nothing is stored: fail-fast mode
        raises the first ContentParseError or DuplicateSlugError in file
        order, collect mode raises a ContentBuildError holding all of them.
        """
        names = self.repo.list_post_files()
        outcomes = self._parse_all(names)

        errors: List[ContentError] = []
        records: List[PostRecord] = []
        for outcome in outcomes:
            if isinstance(outcome, ContentError):
                errors.append(outcome)
            else:
                records.append(outcome)

        if errors and not self.collect_errors:
            raise errors[0]

        errors.extend(_find_duplicate_slugs(records))
        if errors:
            if self.collect_errors:
                raise ContentBuildError(errors)
            raise errors[0]

        records.sort(key=lambda post: post.source)
        records.sort(key=lambda post: post.publishedAt, reverse=True)

        self._posts = records
        self._by_slug = {post.slug: post for post in records}
        logger.info(f"Loaded {len(records)} posts from {len(names)} files")
        return list(records)

    def get_by_slug(self, slug: str) -> PostRecord:
        post = self.find_by_slug(slug)
        if post is None:
            raise PostNotFoundError(slug)
        return post

    def find_by_slug(self, slug: str) -> Optional[PostRecord]:
        self._require_loaded()
        return self._by_slug.get(slug)

    def list_slugs(self) -> List[str]:
        return [post.slug for post in self._require_loaded()]

    def list_posts(self) -> List[PostSummary]:
        return [post.to_summary() for post in self._require_loaded()]

    def __len__(self) -> int:
        return len(self._require_loaded())

    def __contains__(self, slug) -> bool:
        return self.find_by_slug(slug) is not None

    def _require_loaded(self) -> List[PostRecord]:
        if self._posts is None:
            raise IndexNotLoadedError("content index has not been loaded")
        return self._posts

    def _parse_all(self, names: List[str]) -> List[ParseOutcome]:
        if not names:
            return []
        if self.max_workers == 1:
            return [self._parse_one(name) for name in names]

        # map() keeps input order so outcomes stay in file-name order
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return list(pool.map(self._parse_one, names))

    def _parse_one(self, name: str) -> ParseOutcome:
        try:
            raw = self.repo.read_post(name)
            return parse_post_data(name, raw, base_path=self.base_path)
        except ContentError as e:
            logger.debug(f"Rejected {name}: {e}")
            return e
        except OSError as e:
            return ContentParseError(name, "file", f"unreadable: {e}")


def _find_duplicate_slugs(records: List[PostRecord]) -> List[DuplicateSlugError]:
    files_by_slug: Dict[str, List[str]] = {}
    for post in records:
        files_by_slug.setdefault(post.slug, []).append(post.source)

    return [
        DuplicateSlugError(slug, files)
        for slug, files in sorted(files_by_slug.items())
        if len(files) > 1
    ]
