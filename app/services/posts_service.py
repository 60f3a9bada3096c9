import datetime
import logging
from typing import Callable, List, Optional, Tuple

import frontmatter

from app.errors import CatalogUnavailable, PostNotFound
from app.schemas.blog import PostDetail, PostSummary
from app.services.markdown_renderer import render

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 150
DEFAULT_TITLE = "Untitled"
DEFAULT_AUTHOR = "Anonymous"


class PostsService:
    def __init__(self, repo, renderer: Optional[Callable[[str], str]] = None):
        self.repo = repo
        self.renderer = renderer or render

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for path in self.repo.list_post_files():
            try:
                post_data = parse_post_data(
                    self.repo.read(path),
                    path.stem,
                    modified_at=self.repo.modified_at(path),
                )
            except Exception as e:
                logger.error(f"Failed to read post {path.name}: {e}")
                raise CatalogUnavailable(f"Failed to read post {path.name}") from e
            posts.append(post_data)

        # Slug order first so posts sharing a date come out alphabetically.
        posts.sort(key=lambda p: p["slug"])
        posts.sort(key=lambda p: _date_sort_key(p["date"]), reverse=True)
        return [PostSummary(**p) for p in posts]

    def get_post(self, slug: str) -> PostDetail:
        path = self.repo.get_post_file(slug)
        if path is None:
            raise PostNotFound(slug)

        try:
            post_data = parse_post_data(
                self.repo.read(path),
                slug,
                modified_at=self.repo.modified_at(path),
                include_content=True,
                renderer=self.renderer,
            )
        except Exception as e:
            logger.warning(f"Failed to read post {slug}: {e}")
            raise PostNotFound(slug) from e
        return PostDetail(**post_data)


def parse_post_data(
    raw: str,
    slug: str,
    *,
    modified_at: datetime.datetime,
    include_content: bool = False,
    renderer: Optional[Callable[[str], str]] = None,
) -> dict:
    """Parse front matter and return standardized post data.

    Missing fields fall back to their defaults; a missing date falls back to
    the file's modification time so repeated reads agree.
    """
    # parse() rather than loads(): front matter may itself define "content".
    metadata, body = frontmatter.parse(raw)
    metadata = metadata or {}

    post_data = {
        "slug": slug,
        "title": _as_text(metadata.get("title"), DEFAULT_TITLE),
        "date": str(_convert_date(metadata.get("date") or modified_at)),
        "author": _as_text(metadata.get("author"), DEFAULT_AUTHOR),
        "excerpt": _derive_excerpt(metadata, body),
        "tags": _normalize_tags(metadata.get("tags")),
    }

    if include_content:
        extras = {
            key: _convert_date(value)
            for key, value in metadata.items()
            if isinstance(key, str)
        }
        post_data = {**extras, **post_data}
        post_data["content"] = (renderer or render)(body)

    return post_data


def _as_text(value, default: str) -> str:
    if not value:
        return default
    return str(value)


def _derive_excerpt(metadata: dict, body: str) -> str:
    if metadata.get("excerpt"):
        return str(metadata["excerpt"])
    return f"{body[:EXCERPT_LENGTH]}..."


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value


def _date_sort_key(value: str) -> Tuple[int, float]:
    """Sort key for ISO dates; unparseable values rank below every real date."""
    try:
        parsed = datetime.datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return (0, 0.0)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return (1, parsed.timestamp())
