import os
import textwrap
from pathlib import Path

import pytest

from app.errors import PostNotFound


def write_post(posts_dir: Path, name: str, text: str, mtime: float | None = None):
    """
    Write a markdown document into posts_dir.
    Pass mtime to pin the modification time used as the date fallback.
    """
    path = posts_dir / name
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def posts_dir(tmp_path) -> Path:
    path = tmp_path / "posts"
    path.mkdir()
    return path


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested.append(slug)
        if self._get_post_return is None:
            raise PostNotFound(slug)
        return self._get_post_return
