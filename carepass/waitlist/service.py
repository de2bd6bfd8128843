"""
Waitlist Service
"""
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from ..core.security import mask_email
from ..exceptions import ConflictException, StorageError
from .models import WaitlistEntry
from .schemas import WaitlistSignup

# Set up logging
logger = logging.getLogger(__name__)

def join_waitlist(db: Session, signup: WaitlistSignup) -> WaitlistEntry:
    """
    Add an email address to the waitlist.

    Addresses are compared lowercased.

    Raises:
        ConflictException: If the address is already on the list
        StorageError: If the entry cannot be saved
    """
    email = signup.email.lower()
    if db.query(WaitlistEntry).filter(WaitlistEntry.email == email).first():
        logger.info(f"Waitlist signup ignored, already listed: {mask_email(email)}")
        raise ConflictException("Email already on the waitlist")

    entry = WaitlistEntry(email=email, name=signup.name)
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictException("Email already on the waitlist")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to save waitlist entry")
        raise StorageError(e, "Failed to join waitlist")
    db.refresh(entry)
    logger.info(f"Waitlist signup: {mask_email(email)}")
    return entry
