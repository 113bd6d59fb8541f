"""User model definitions."""

import enum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from backend.database import Base


class Role(str, enum.Enum):
    """Roles a user can hold. Authorization compares them by exact match."""

    ADMIN = "ADMIN"
    SPEAKER = "SPEAKER"
    ATTENDEE = "ATTENDEE"


class User(Base):
    """Represents an application user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=Role.ATTENDEE.value)

    registrations = relationship("Registration", back_populates="user")
