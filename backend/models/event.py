"""Event model definitions."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from backend.database import Base


class Event(Base):
    """Represents a conference event."""
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    date = Column(DateTime, nullable=False)
    location = Column(String, nullable=True)

    sessions = relationship(
        "EventSession",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="EventSession.start_time",
    )
    registrations = relationship(
        "Registration",
        back_populates="event",
        cascade="all, delete-orphan",
    )
