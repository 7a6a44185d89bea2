"""Post repository protocol."""

from typing import Protocol, Optional

from clubdesk.domain.models import Comment, Post


class PostRepository(Protocol):
    """Interface for post and comment data access."""

    def create(self, post: Post) -> Post:
        """Persist a new post."""
        ...

    def get_by_id(self, post_id: str) -> Optional[Post]:
        """Retrieve post by ID."""
        ...

    def get_by_url_name(self, url_name: str) -> Optional[Post]:
        """Retrieve post by its URL slug."""
        ...

    def update(self, post: Post) -> Post:
        """Update an existing post."""
        ...

    def add_comment(self, comment: Comment) -> Comment:
        """Persist a comment."""
        ...

    def latest_comments(self, limit: int = 5) -> list[Comment]:
        """Newest comments on published posts, with author and post loaded."""
        ...
