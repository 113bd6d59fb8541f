"""Session model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from backend.database import Base


class EventSession(Base):
    """Represents a talk scheduled within an event."""
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    speaker_id = Column(Integer, ForeignKey("speakers.id"), nullable=False)

    event = relationship("Event", back_populates="sessions")
    speaker = relationship("Speaker", back_populates="sessions")
