"""Image Routes — stream stored item images.

Invariants:
    - Only .jpg names are served (400 otherwise, via BadRequestError)
    - Unknown names silently fall back to the default placeholder image
    - Path resolution (filesystem stats) never runs on the event loop

Design Decisions:
    - FileResponse streams from disk; the service only resolves the path
    - Plain def handler: FastAPI runs it in its threadpool, same reason the
      JSON item store pushes file IO to asyncio.to_thread
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from catalog.api.dependencies import get_catalog_service
from catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/image", tags=["images"])


@router.get("/{image_filename}")
def get_image(
    image_filename: str, service: CatalogService = Depends(get_catalog_service),
):
    """Return the image bytes, or the placeholder when the image is missing."""
    return FileResponse(service.fetch_image(image_filename), media_type="image/jpeg")
