"""Post and comment domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from clubdesk.domain.models.enums import PostState
from clubdesk.domain.models.user import User


@dataclass
class Post:
    """News post edited in the admin rich-text editor."""

    post_id: str
    title: str
    url_name: str
    author_id: str
    raw_body: Optional[str] = None
    state: PostState = PostState.DRAFT
    featured_post: bool = False
    published_on: Optional[datetime] = None
    deleted_on: Optional[datetime] = None
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.state, str):
            self.state = PostState(self.state)


@dataclass
class Comment:
    comment_id: str
    post_id: str
    author_id: str
    text: str
    created_at: datetime
    author: Optional[User] = None
    post: Optional[Post] = None
