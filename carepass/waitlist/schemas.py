"""
Waitlist Schemas
"""
from typing import Optional
from pydantic import BaseModel, EmailStr

class WaitlistSignup(BaseModel):
    """Waitlist signup request."""
    email: EmailStr
    name: Optional[str] = None

class WaitlistEntryResponse(BaseModel):
    """Waitlist entry as returned by the API."""
    id: int
    email: str
    name: Optional[str] = None

    class Config:
        from_attributes = True
