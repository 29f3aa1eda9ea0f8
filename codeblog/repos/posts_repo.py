import logging
from pathlib import Path
from typing import List

from codeblog.errors import ContentDirectoryError, ContentParseError

logger = logging.getLogger(__name__)


class FilePostsRepo:
    """Lists and reads post files that sit directly in one content directory."""

    def __init__(self, content_dir, extension: str = ".md"):
        self.content_dir = Path(content_dir)
        self.extension = extension if extension.startswith(".") else f".{extension}"

    def list_post_files(self) -> List[str]:
        if not self.content_dir.is_dir():
            raise ContentDirectoryError(str(self.content_dir))

        names = sorted(
            entry.name
            for entry in self.content_dir.iterdir()
            if entry.is_file()
            and not entry.name.startswith(".")
            and entry.suffix.lower() == self.extension.lower()
        )
        logger.debug(f"Found {len(names)} post files in {self.content_dir}")
        return names

    def read_post(self, name: str) -> str:
        path = self.content_dir / name
        try:
            # utf-8-sig drops a leading BOM that would hide the --- delimiter
            return path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise ContentParseError(name, "encoding", f"not valid UTF-8: {e}") from e
