"""Request and response bodies shared across routers.

JSON keys are camelCase on the wire; snake_case is accepted on input too.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator, model_validator
from pydantic.alias_generators import to_camel

from backend.models.user import Role


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC. Naive values are taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class UserSummaryResponse(CamelModel):
    id: int
    name: str | None = None
    email: str


class UserResponse(UserSummaryResponse):
    role: Role


class SpeakerRequest(CamelModel):
    name: str
    bio: str | None = None
    user_id: int | None = None


class SpeakerResponse(CamelModel):
    id: int
    name: str
    bio: str | None = None
    user_id: int | None = None


class SessionRequest(CamelModel):
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    event_id: int
    speaker_id: int

    @field_validator('start_time', 'end_time', mode='after')
    @classmethod
    def normalize_times(cls, value: datetime) -> datetime:
        return to_naive_utc(value)

    @model_validator(mode='after')
    def validate_time_range(self) -> 'SessionRequest':
        if self.end_time <= self.start_time:
            raise ValueError('endTime must be after startTime.')
        return self


class SessionResponse(CamelModel):
    id: int
    title: str
    description: str | None = None
    start_time: datetime
    end_time: datetime
    event_id: int
    speaker_id: int


class SessionWithSpeakerResponse(SessionResponse):
    speaker: SpeakerResponse


class EventRequest(CamelModel):
    name: str
    description: str | None = None
    date: datetime
    location: str | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Event name is required.')
        return normalized

    @field_validator('date', mode='after')
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class EventResponse(CamelModel):
    id: int
    name: str
    description: str | None = None
    date: datetime
    location: str | None = None


class EventWithSessionsResponse(EventResponse):
    sessions: list[SessionResponse] = []


class EventDetailResponse(EventResponse):
    sessions: list[SessionWithSpeakerResponse] = []


class RegistrationResponse(CamelModel):
    id: int
    user_id: int
    event_id: int
    created_at: datetime


class RegistrationWithUserResponse(RegistrationResponse):
    user: UserSummaryResponse


class RegistrationCreatedResponse(CamelModel):
    message: str
    registration: RegistrationResponse
