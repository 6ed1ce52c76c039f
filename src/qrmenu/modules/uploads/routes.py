"""Image upload route."""

from fastapi import APIRouter, File, UploadFile

from qrmenu.core.auth.dependencies import CurrentIdentity
from qrmenu.modules.uploads.schemas import UploadResponse
from qrmenu.modules.uploads.services import UploadSvc


router = APIRouter(prefix="/upload", tags=["uploads"])


@router.post(
    "",
    response_model=UploadResponse,
    summary="Upload an image",
    description=(
        "Uploads an image (multipart field ``image``) to the image host and "
        "returns its URL, for item images and shop logos."
    ),
)
async def upload_image(
    _identity: CurrentIdentity,
    service: UploadSvc,
    image: UploadFile | None = File(None),
) -> UploadResponse:
    """Upload an image."""
    url = await service.upload_image(image)
    return UploadResponse(url=url)
