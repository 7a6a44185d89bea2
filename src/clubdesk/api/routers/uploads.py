"""Image upload endpoints."""

from fastapi import APIRouter, Depends

from clubdesk.api.deps import get_upload_service, require_admin
from clubdesk.api.schemas import ImageUploadRequest, ImageUploadResponse
from clubdesk.services import ImageUploadService

router = APIRouter(
    prefix="/uploads",
    tags=["uploads"],
    dependencies=[Depends(require_admin)],
)


@router.post("/images", response_model=ImageUploadResponse, status_code=201)
def request_image_upload(
    data: ImageUploadRequest,
    uploads: ImageUploadService = Depends(get_upload_service),
) -> ImageUploadResponse:
    """Issue a pre-signed POST for an editor image."""
    ticket = uploads.request_upload(data.filename, data.content_type, size=data.size)
    return ImageUploadResponse(
        url=ticket.url,
        fields=ticket.fields,
        key=ticket.key,
        expires_at=ticket.expires_at,
    )
