"""
Image Links Model - URLs of provider images hosted on Cloudinary.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from ..database import Base

class ImageLinks(Base):
    """
    Image Links Model

    Fields:
    - id: Primary key
    - headshot_url: Provider headshot
    - gallery_url: Practice gallery
    - reviews_url: Reviews screenshot
    - created_at: When the links were saved
    """
    __tablename__ = "image_links"

    id = Column(Integer, primary_key=True, index=True)
    headshot_url = Column(String, nullable=False)
    gallery_url = Column(String, nullable=False)
    reviews_url = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        """String representation of the ImageLinks model"""
        return f"<ImageLinks(id={self.id})>"
