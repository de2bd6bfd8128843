"""
Upload Schemas - Signed upload parameters and image link payloads.
"""
from pydantic import BaseModel, Field

class SignedUploadParams(BaseModel):
    """
    Parameters a client needs to upload straight to Cloudinary.

    The signature binds the timestamp, so the set is only valid for the
    instant it was issued at.
    """
    timestamp: int
    signature: str
    api_key: str = Field(..., alias="apiKey")
    cloud_name: str = Field(..., alias="cloudName")

    class Config:
        populate_by_name = True

class ImageLinksCreate(BaseModel):
    """
    Image Links Schema

    Fields:
    - headshot_url: Provider headshot URL
    - gallery_url: Practice gallery URL
    - reviews_url: Reviews screenshot URL
    """
    headshot_url: str = Field(..., min_length=1, alias="headshotUrl")
    gallery_url: str = Field(..., min_length=1, alias="galleryUrl")
    reviews_url: str = Field(..., min_length=1, alias="reviewsUrl")

    class Config:
        populate_by_name = True

class ImageLinksSaved(BaseModel):
    """Confirmation returned once image links are stored."""
    message: str
    id: int
