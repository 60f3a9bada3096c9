class CatalogUnavailable(Exception):
    """The posts directory, or a document in it, could not be read."""


class PostNotFound(Exception):
    """No readable document resolves from the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"Post not found: {slug}")
        self.slug = slug
