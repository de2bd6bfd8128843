"""
Upload Router - Cloudinary signing and image link storage.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_db
from ..dependencies import get_settings
from .schemas import SignedUploadParams, ImageLinksCreate, ImageLinksSaved
from .service import issue_upload_signature, save_image_links

router = APIRouter()

@router.post("/signature", response_model=SignedUploadParams)
def upload_signature_route(app_settings: Settings = Depends(get_settings)):
    """
    Issue signed parameters for a direct upload to Cloudinary
    """
    return issue_upload_signature(app_settings)

@router.post("/save", response_model=ImageLinksSaved)
def save_images_route(
    links: ImageLinksCreate,
    db: Session = Depends(get_db)
):
    """
    Store headshot, gallery and reviews image URLs
    """
    record = save_image_links(db, links)
    return ImageLinksSaved(message="Images saved successfully", id=record.id)
