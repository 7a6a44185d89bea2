"""SQLAlchemy implementation of PostRepository."""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from clubdesk.domain.models import Comment, Post, PostState
from clubdesk.repositories.sqlalchemy.orm_models import (
    CommentORM,
    PostORM,
    from_db_time,
    to_db_time,
    utcnow_naive,
)
from clubdesk.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository


class SqlAlchemyPostRepository:
    """SQLAlchemy-backed post repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, post: Post) -> Post:
        """Persist a new post."""
        orm_post = PostORM(
            post_id=post.post_id,
            title=post.title,
            url_name=post.url_name,
            raw_body=post.raw_body,
            state=post.state,
            featured_post=post.featured_post,
            published_on=to_db_time(post.published_on),
            deleted_on=to_db_time(post.deleted_on),
            author_id=post.author_id,
            created_at=to_db_time(post.created_at) or utcnow_naive(),
        )
        self._db.add(orm_post)
        self._db.commit()
        self._db.refresh(orm_post)
        return self._to_domain(orm_post)

    def get_by_id(self, post_id: str) -> Optional[Post]:
        """Retrieve post by ID."""
        orm_post = self._db.query(PostORM).filter(PostORM.post_id == post_id).first()
        return self._to_domain(orm_post) if orm_post else None

    def get_by_url_name(self, url_name: str) -> Optional[Post]:
        """Retrieve post by its URL slug."""
        orm_post = self._db.query(PostORM).filter(PostORM.url_name == url_name).first()
        return self._to_domain(orm_post) if orm_post else None

    def update(self, post: Post) -> Post:
        """Update an existing post."""
        orm_post = self._db.query(PostORM).filter(PostORM.post_id == post.post_id).first()
        if not orm_post:
            raise ValueError(f"Post not found: {post.post_id}")

        orm_post.title = post.title
        orm_post.url_name = post.url_name
        orm_post.raw_body = post.raw_body
        orm_post.state = post.state
        orm_post.featured_post = post.featured_post
        orm_post.published_on = to_db_time(post.published_on)
        orm_post.deleted_on = to_db_time(post.deleted_on)
        orm_post.updated_at = to_db_time(post.updated_at)

        self._db.commit()
        self._db.refresh(orm_post)
        return self._to_domain(orm_post)

    def add_comment(self, comment: Comment) -> Comment:
        """Persist a comment."""
        orm_comment = CommentORM(
            comment_id=comment.comment_id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            text=comment.text,
            created_at=to_db_time(comment.created_at) or utcnow_naive(),
        )
        self._db.add(orm_comment)
        self._db.commit()
        self._db.refresh(orm_comment)
        return self._comment_to_domain(orm_comment)

    def latest_comments(self, limit: int = 5) -> list[Comment]:
        """Newest comments on published posts, with author and post loaded."""
        orm_comments = (
            self._db.query(CommentORM)
            .join(CommentORM.post)
            .options(joinedload(CommentORM.author), joinedload(CommentORM.post))
            .filter(PostORM.state == PostState.PUBLISHED)
            .order_by(CommentORM.created_at.desc())
            .limit(limit)
            .all()
        )
        return [self._comment_to_domain(c) for c in orm_comments]

    @staticmethod
    def _to_domain(orm: PostORM) -> Post:
        """Convert ORM model to domain model."""
        return Post(
            post_id=orm.post_id,
            title=orm.title,
            url_name=orm.url_name,
            author_id=orm.author_id,
            raw_body=orm.raw_body,
            state=orm.state,
            featured_post=orm.featured_post,
            published_on=from_db_time(orm.published_on),
            deleted_on=from_db_time(orm.deleted_on),
            created_at=from_db_time(orm.created_at),
            updated_at=from_db_time(orm.updated_at),
        )

    def _comment_to_domain(self, orm: CommentORM) -> Comment:
        return Comment(
            comment_id=orm.comment_id,
            post_id=orm.post_id,
            author_id=orm.author_id,
            text=orm.text,
            created_at=from_db_time(orm.created_at),
            author=SqlAlchemyUserRepository._to_domain(orm.author) if orm.author else None,
            post=self._to_domain(orm.post) if orm.post else None,
        )
