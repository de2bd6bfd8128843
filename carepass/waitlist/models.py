"""
Waitlist Model - People waiting for membership to open in their area.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from ..database import Base

class WaitlistEntry(Base):
    """
    Waitlist Entry Model

    Fields:
    - id: Primary key
    - email: Contact address, unique
    - name: Optional display name
    - created_at: When the entry was added
    """
    __tablename__ = "waitlist"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        """String representation of the WaitlistEntry model"""
        return f"<WaitlistEntry(id={self.id}, email='{self.email}')>"
