from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PostSummary(BaseModel):
    slug: str
    title: str = "Untitled"
    date: str
    author: str = "Anonymous"
    excerpt: str
    tags: List[str] = Field(default_factory=list)


class PostDetail(PostSummary):
    # Unknown front matter keys are passed through to the client.
    model_config = ConfigDict(extra="allow")

    content: str
