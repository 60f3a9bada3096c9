import datetime
import logging
from pathlib import Path
from typing import List, Optional

from app.errors import CatalogUnavailable

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"


class FilesystemPostsRepo:
    def __init__(self, posts_dir: Path):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[Path]:
        try:
            entries = sorted(self.posts_dir.iterdir())
        except OSError as e:
            raise CatalogUnavailable(
                f"Cannot read posts directory {self.posts_dir}: {e}"
            ) from e

        return [
            path
            for path in entries
            if path.suffix == POST_SUFFIX
            and self.is_valid_slug(path.stem)
            and path.is_file()
            and self._is_contained(path)
        ]

    def get_post_file(self, slug: str) -> Optional[Path]:
        if not self.is_valid_slug(slug):
            logger.warning(f"Rejected unsafe slug {slug!r}")
            return None
        path = self.posts_dir / f"{slug}{POST_SUFFIX}"
        if not path.is_file():
            return None
        if not self._is_contained(path):
            logger.warning(f"Rejected slug {slug!r} resolving outside {self.posts_dir}")
            return None
        return path

    @staticmethod
    def read(path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @staticmethod
    def modified_at(path: Path) -> datetime.datetime:
        return datetime.datetime.fromtimestamp(
            path.stat().st_mtime, tz=datetime.timezone.utc
        )

    @staticmethod
    def is_valid_slug(slug: str) -> bool:
        if not slug or slug in (".", ".."):
            return False
        return not any(ch in slug for ch in ("/", "\\", "\x00"))

    def _is_contained(self, path: Path) -> bool:
        """False when the file (or a symlink it follows) lives outside posts_dir."""
        try:
            return path.resolve().is_relative_to(self.posts_dir.resolve())
        except (OSError, RuntimeError):  # symlink loops
            return False
