"""
User Model - Stores member, doctor and admin accounts.
"""
from sqlalchemy import Column, String, DateTime, Enum, func
import enum
import uuid
from ..database import Base

class UserRole(str, enum.Enum):
    """Account roles on the platform."""
    MEMBER = "member"
    DOCTOR = "doctor"
    ADMIN = "admin"

class User(Base):
    """
    User Model - Identity record for an account

    Fields:
    - id: String primary key
    - email: Account email address, used as the notification recipient
    - name: Display name
    - role: Account role
    - created_at: When the account was created
    """
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, index=True, nullable=True)
    name = Column(String, nullable=False, default="")
    role = Column(Enum(UserRole), nullable=False, default=UserRole.MEMBER)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        """String representation of the User model"""
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
