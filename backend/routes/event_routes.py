import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session, selectinload

from backend.auth.dependencies import require_admin
from backend.database import get_db
from backend.models.event import Event
from backend.models.session import EventSession
from backend.routes.utils import STORE_FAULTS, WRITE_FAULTS, RecordNotFound, parse_id
from backend.schemas import (
    EventDetailResponse,
    EventRequest,
    EventResponse,
    EventWithSessionsResponse,
    SessionWithSpeakerResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/events', tags=['events'])


def apply_event_fields(event: Event, payload: EventRequest) -> Event:
    event.name = payload.name
    event.description = payload.description
    event.date = payload.date
    event.location = payload.location
    return event


@router.post(
    '',
    status_code=status.HTTP_201_CREATED,
    response_model=EventResponse,
    dependencies=[Depends(require_admin)],
)
def create_event(payload: EventRequest, db: Session = Depends(get_db)):
    event = apply_event_fields(Event(), payload)
    try:
        db.add(event)
        db.commit()
        db.refresh(event)
    except STORE_FAULTS as exc:
        db.rollback()
        logger.warning('Could not create event: %s', type(exc).__name__)
        raise HTTPException(status_code=400, detail='Could not create event') from exc

    logger.info('Created event %s', event.id)
    return event


@router.get('', response_model=list[EventWithSessionsResponse])
def list_events(db: Session = Depends(get_db)):
    try:
        return (
            db.query(Event)
            .options(selectinload(Event.sessions))
            .order_by(Event.date, Event.id)
            .all()
        )
    except STORE_FAULTS as exc:
        logger.exception('Could not list events')
        raise HTTPException(status_code=500, detail='Could not fetch events') from exc


@router.get('/{event_id}', response_model=EventDetailResponse)
def get_event(event_id: str, db: Session = Depends(get_db)):
    try:
        event = (
            db.query(Event)
            .options(selectinload(Event.sessions).selectinload(EventSession.speaker))
            .filter(Event.id == parse_id(event_id))
            .first()
        )
    except STORE_FAULTS as exc:
        logger.exception('Could not fetch event %s', event_id)
        raise HTTPException(status_code=500, detail='Could not fetch event') from exc

    if event is None:
        raise HTTPException(status_code=404, detail='Event not found')
    return event


@router.put('/{event_id}', response_model=EventResponse, dependencies=[Depends(require_admin)])
def update_event(event_id: str, payload: EventRequest, db: Session = Depends(get_db)):
    try:
        event = db.get(Event, parse_id(event_id))
        if event is None:
            raise RecordNotFound(f'Event {event_id} does not exist')
        apply_event_fields(event, payload)
        db.commit()
        db.refresh(event)
    except WRITE_FAULTS as exc:
        db.rollback()
        logger.warning('Could not update event %s: %s', event_id, exc)
        raise HTTPException(status_code=400, detail='Could not update event') from exc

    return event


@router.delete(
    '/{event_id}',
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_event(event_id: str, db: Session = Depends(get_db)):
    try:
        event = db.get(Event, parse_id(event_id))
        if event is None:
            raise RecordNotFound(f'Event {event_id} does not exist')
        db.delete(event)
        db.commit()
    except WRITE_FAULTS as exc:
        db.rollback()
        logger.warning('Could not delete event %s: %s', event_id, exc)
        raise HTTPException(status_code=400, detail='Could not delete event') from exc

    logger.info('Deleted event %s', event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get('/{event_id}/sessions', response_model=list[SessionWithSpeakerResponse])
def list_event_sessions(event_id: str, db: Session = Depends(get_db)):
    try:
        return (
            db.query(EventSession)
            .options(selectinload(EventSession.speaker))
            .filter(EventSession.event_id == parse_id(event_id))
            .order_by(EventSession.start_time, EventSession.id)
            .all()
        )
    except STORE_FAULTS as exc:
        logger.exception('Could not list sessions for event %s', event_id)
        raise HTTPException(status_code=500, detail='Could not fetch sessions') from exc
