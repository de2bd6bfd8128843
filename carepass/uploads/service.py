"""
Upload Service - Cloudinary upload signatures and image link storage.
"""
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging
import math

from ..config import Settings
from ..core.cloudinary import sign_params
from ..exceptions import StorageError
from .models import ImageLinks
from .schemas import SignedUploadParams, ImageLinksCreate

# Set up logging
logger = logging.getLogger(__name__)

def issue_upload_signature(app_settings: Settings, now: Optional[datetime] = None) -> SignedUploadParams:
    """
    Sign a timestamp for a direct client upload.

    Args:
        app_settings: Settings holding the Cloudinary credentials
        now: Issuing instant (defaults to the current time)

    Returns:
        SignedUploadParams
    """
    now = now or datetime.now(timezone.utc)
    timestamp = math.floor(now.timestamp())
    signature = sign_params({"timestamp": timestamp}, app_settings.cloudinary_api_secret)
    return SignedUploadParams(
        timestamp=timestamp,
        signature=signature,
        api_key=app_settings.cloudinary_api_key,
        cloud_name=app_settings.cloudinary_cloud_name,
    )

def save_image_links(db: Session, links: ImageLinksCreate) -> ImageLinks:
    """
    Store a set of image URLs.

    Args:
        db: Database session
        links: Validated image URLs

    Returns:
        ImageLinks: The stored record

    Raises:
        StorageError: If the record cannot be saved
    """
    record = ImageLinks(
        headshot_url=links.headshot_url,
        gallery_url=links.gallery_url,
        reviews_url=links.reviews_url,
    )
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save image links")
        raise StorageError(e, "Failed to save images")
    logger.info(f"Image links saved: {record.id}")
    return record
