"""Post editing: validated updates, state transitions and autosave."""

import logging
import re
import uuid
from contextlib import AbstractContextManager
from typing import Any, Callable, Optional

from clubdesk.core.events import BusEvent, EventBus
from clubdesk.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from clubdesk.core.timezone import now_utc
from clubdesk.domain.models import Post, PostState, User
from clubdesk.repositories.protocols import PostRepository
from clubdesk.services.autosave import (
    SAVE_FAILED_EVENT,
    SAVED_EVENT,
    AutosaveCoordinator,
    saved_topic,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "url_name", "raw_body", "featured_post"})
URL_NAME_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
MAX_TITLE_LENGTH = 255


def slugify(title: str) -> str:
    """Derive a url_name from a title."""
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "post"


class PostService:
    """
    Admin-side post operations.

    Every mutation requires an admin actor. Invalid input raises
    ValidationError before anything is written.
    """

    def __init__(self, post_repo: PostRepository):
        self._posts = post_repo

    def get_post(self, post_id: str) -> Post:
        post = self._posts.get_by_id(post_id)
        if not post:
            raise NotFoundError("Post", post_id)
        return post

    def create_post(self, title: str, actor: User, raw_body: Optional[str] = None) -> Post:
        """Create a draft post with a unique slug derived from the title."""
        self._authorize(actor, "create post")
        title = self._clean_title(title)
        post = Post(
            post_id=str(uuid.uuid4()),
            title=title,
            url_name=self._unique_url_name(slugify(title)),
            author_id=actor.user_id,
            raw_body=raw_body,
            state=PostState.DRAFT,
            created_at=now_utc(),
        )
        return self._posts.create(post)

    def update_post(self, post_id: str, fields: dict[str, Any], actor: User) -> Post:
        """Apply an editor form update."""
        self._authorize(actor, "update post")
        post = self.get_post(post_id)
        cleaned = self.validate_fields(post.post_id, fields)

        if "title" in cleaned:
            post.title = cleaned["title"]
        if "url_name" in cleaned:
            post.url_name = cleaned["url_name"]
        if "raw_body" in cleaned:
            post.raw_body = cleaned["raw_body"]
        if "featured_post" in cleaned:
            post.featured_post = cleaned["featured_post"]

        post.updated_at = now_utc()
        return self._posts.update(post)

    def validate_fields(self, post_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Check an editor form without writing it.

        Returns the cleaned values; raises ValidationError on the first
        field that fails.
        """
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown post fields: {', '.join(sorted(unknown))}")

        cleaned = dict(fields)
        if "title" in fields:
            cleaned["title"] = self._clean_title(fields["title"])
        if "url_name" in fields:
            cleaned["url_name"] = self._validate_url_name(fields["url_name"], post_id)
        if "featured_post" in fields:
            cleaned["featured_post"] = bool(fields["featured_post"])
        return cleaned

    def publish_post(self, post_id: str, actor: User) -> Post:
        self._authorize(actor, "publish post")
        post = self.get_post(post_id)
        post.state = PostState.PUBLISHED
        post.published_on = now_utc()
        post.updated_at = post.published_on
        return self._posts.update(post)

    def restore_post(self, post_id: str, actor: User) -> Post:
        """Bring a deleted post back as a draft."""
        self._authorize(actor, "restore post")
        post = self.get_post(post_id)
        post.state = PostState.DRAFT
        post.published_on = None
        post.deleted_on = None
        post.featured_post = False
        post.updated_at = now_utc()
        return self._posts.update(post)

    def delete_post(self, post_id: str, actor: User) -> Post:
        """Soft delete: the post is kept with state DELETED."""
        self._authorize(actor, "delete post")
        post = self.get_post(post_id)
        post.state = PostState.DELETED
        post.deleted_on = now_utc()
        post.published_on = None
        post.featured_post = False
        post.updated_at = post.deleted_on
        return self._posts.update(post)

    @staticmethod
    def _authorize(actor: Optional[User], action: str) -> None:
        if actor is None or not actor.is_admin:
            raise AuthorizationError(action)

    @staticmethod
    def _clean_title(title: Any) -> str:
        title = (title or "").strip() if isinstance(title, str) else ""
        if not title:
            raise ValidationError("Title can't be blank")
        if len(title) > MAX_TITLE_LENGTH:
            raise ValidationError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
        return title

    def _validate_url_name(self, url_name: Any, post_id: str) -> str:
        if not isinstance(url_name, str) or not URL_NAME_PATTERN.match(url_name):
            raise ValidationError(
                "URL name may only contain lowercase letters, numbers and dashes"
            )
        existing = self._posts.get_by_url_name(url_name)
        if existing and existing.post_id != post_id:
            raise ValidationError(f"URL name '{url_name}' is already taken")
        return url_name

    def _unique_url_name(self, base: str) -> str:
        candidate = base
        suffix = 1
        while self._posts.get_by_url_name(candidate):
            suffix += 1
            candidate = f"{base}-{suffix}"
        return candidate


PostServiceScope = Callable[[], AbstractContextManager[PostService]]


class PostAutosaver:
    """
    Debounced editor saves for posts.

    Writes run on the coordinator's timer, after the request that scheduled
    them has finished, so each write opens its own PostService scope.
    """

    def __init__(self, coordinator: AutosaveCoordinator, service_scope: PostServiceScope):
        self._coordinator = coordinator
        self._scope = service_scope

    def schedule(self, post: Post, fields: dict[str, Any], actor: User) -> dict[str, Any]:
        """
        Queue a save of the editor form for post.

        Title and url_name default to the stored values when the form omits
        them. The form is validated now, so a bad edit raises
        ValidationError and nothing is queued. Returns the values that will
        be written.
        """
        values = dict(fields)
        values.setdefault("title", post.title)
        values.setdefault("url_name", post.url_name)

        post_id = post.post_id
        with self._scope() as service:
            values = service.validate_fields(post_id, values)

        def write() -> None:
            with self._scope() as service:
                service.update_post(post_id, values, actor)

        self._coordinator.schedule(post_id, write, topic=saved_topic(post_id))
        return values

    def is_pending(self, post_id: str) -> bool:
        return self._coordinator.is_pending(post_id)


class EditorSession:
    """
    One open editor on a post.

    saving goes up on every edit and comes down when the debounced write
    lands, at which point the post is reloaded. A failed write leaves
    saving up and records last_error.
    """

    def __init__(self, bus: EventBus, post_id: str, loader: Callable[[str], Post]):
        self._bus = bus
        self._loader = loader
        self.post_id = post_id
        self.post: Optional[Post] = None
        self.saving = False
        self.last_error: Optional[str] = None
        self._topic = saved_topic(post_id)

    def open(self) -> "EditorSession":
        self.post = self._loader(self.post_id)
        self._bus.subscribe(self._topic, self._on_event)
        return self

    def close(self) -> None:
        self._bus.unsubscribe(self._topic, self._on_event)

    def __enter__(self) -> "EditorSession":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    def note_edit(self) -> None:
        self.saving = True

    def _on_event(self, message: BusEvent) -> None:
        if message.event == SAVED_EVENT:
            self.saving = False
            self.last_error = None
            self.post = self._loader(self.post_id)
        elif message.event == SAVE_FAILED_EVENT:
            self.last_error = "Autosave failed; your latest changes are not saved yet"
        else:
            logger.debug("Ignoring %s on %s", message.event, message.topic)
