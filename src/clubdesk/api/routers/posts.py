"""Post editor endpoints."""

from fastapi import APIRouter, Depends

from clubdesk.api.deps import (
    get_autosave_coordinator,
    get_post_autosaver,
    get_post_service,
    require_admin,
)
from clubdesk.api.schemas import AutosaveResponse, PostResponse, PostUpdateRequest
from clubdesk.domain.models import Post, User, badge_for_post_state
from clubdesk.services import AutosaveCoordinator, PostAutosaver, PostService

router = APIRouter(prefix="/posts", tags=["posts"])


def post_response(post: Post) -> PostResponse:
    return PostResponse(
        post_id=post.post_id,
        title=post.title,
        url_name=post.url_name,
        author_id=post.author_id,
        raw_body=post.raw_body,
        state=post.state,
        badge=badge_for_post_state(post.state),
        featured_post=post.featured_post,
        published_on=post.published_on,
        deleted_on=post.deleted_on,
        updated_at=post.updated_at,
    )


def _autosave_status(post_id: str, coordinator: AutosaveCoordinator) -> AutosaveResponse:
    return AutosaveResponse(
        post_id=post_id,
        pending=coordinator.is_pending(post_id),
        delay_ms=int(coordinator.delay_seconds * 1000),
    )


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: str,
    user: User = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return post_response(service.get_post(post_id))


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: str,
    data: PostUpdateRequest,
    user: User = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Save the editor form immediately."""
    post = service.update_post(post_id, data.changed_fields(), user)
    return post_response(post)


@router.post("/{post_id}/autosave", response_model=AutosaveResponse, status_code=202)
def autosave_post(
    post_id: str,
    data: PostUpdateRequest,
    user: User = Depends(require_admin),
    service: PostService = Depends(get_post_service),
    autosaver: PostAutosaver = Depends(get_post_autosaver),
    coordinator: AutosaveCoordinator = Depends(get_autosave_coordinator),
) -> AutosaveResponse:
    """
    Queue a debounced save of the editor form.

    Repeated calls within the quiet period replace each other; only the
    last form is written.
    """
    post = service.get_post(post_id)
    autosaver.schedule(post, data.changed_fields(), user)
    return _autosave_status(post_id, coordinator)


@router.get("/{post_id}/autosave", response_model=AutosaveResponse)
def autosave_status(
    post_id: str,
    user: User = Depends(require_admin),
    coordinator: AutosaveCoordinator = Depends(get_autosave_coordinator),
) -> AutosaveResponse:
    return _autosave_status(post_id, coordinator)


@router.post("/{post_id}/publish", response_model=PostResponse)
def publish_post(
    post_id: str,
    user: User = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return post_response(service.publish_post(post_id, user))


@router.post("/{post_id}/restore", response_model=PostResponse)
def restore_post(
    post_id: str,
    user: User = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    return post_response(service.restore_post(post_id, user))


@router.post("/{post_id}/delete", response_model=PostResponse)
def delete_post(
    post_id: str,
    user: User = Depends(require_admin),
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Soft delete; the post can be restored."""
    return post_response(service.delete_post(post_id, user))
