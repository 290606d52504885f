from fastapi import APIRouter, Depends, File, UploadFile, status

from storefront.config import settings
from storefront.deps import require_admin
from storefront.schemas import UploadOut
from storefront.services import storage

router = APIRouter(prefix="/api/upload", tags=["upload"])


@router.post("", response_model=UploadOut, status_code=status.HTTP_201_CREATED)
async def upload_image(file: UploadFile = File(...), _admin=Depends(require_admin)):
    # one byte past the limit is enough to know it is too large
    data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    name = storage.save_image(file.filename, file.content_type, data)
    return {
        "message": "File uploaded successfully",
        "filename": name,
        "url": storage.public_url(name),
    }
