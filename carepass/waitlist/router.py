"""
Waitlist Router
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from .schemas import WaitlistSignup, WaitlistEntryResponse
from .service import join_waitlist

router = APIRouter()

@router.post("", response_model=WaitlistEntryResponse, status_code=status.HTTP_201_CREATED)
def join_waitlist_route(
    signup: WaitlistSignup,
    db: Session = Depends(get_db)
):
    """
    Join the membership waitlist
    """
    return join_waitlist(db, signup)
