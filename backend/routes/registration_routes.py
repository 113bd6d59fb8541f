import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload

from backend.auth.dependencies import get_current_identity, require_admin
from backend.auth.jwt_handler import TokenIdentity
from backend.database import get_db
from backend.models.registration import Registration
from backend.routes.utils import STORE_FAULTS, parse_id
from backend.schemas import (
    RegistrationCreatedResponse,
    RegistrationResponse,
    RegistrationWithUserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/events', tags=['registrations'])

DUPLICATE_REGISTRATION = 'Could not register for the event. You may already be registered.'


@router.post(
    '/{event_id}/register',
    status_code=status.HTTP_201_CREATED,
    response_model=RegistrationCreatedResponse,
)
def register_for_event(
    event_id: str,
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    try:
        registration = Registration(user_id=identity.user_id, event_id=parse_id(event_id))
        db.add(registration)
        db.commit()
        db.refresh(registration)
    except STORE_FAULTS as exc:
        db.rollback()
        logger.info('Registration rejected for user %s on event %s: %s', identity.user_id, event_id, type(exc).__name__)
        raise HTTPException(status_code=400, detail=DUPLICATE_REGISTRATION) from exc

    return RegistrationCreatedResponse(
        message='Registration successful',
        registration=RegistrationResponse.model_validate(registration),
    )


@router.get(
    '/{event_id}/registrations',
    response_model=list[RegistrationWithUserResponse],
    dependencies=[Depends(require_admin)],
)
def list_event_registrations(event_id: str, db: Session = Depends(get_db)):
    try:
        return (
            db.query(Registration)
            .options(selectinload(Registration.user))
            .filter(Registration.event_id == parse_id(event_id))
            .order_by(Registration.id)
            .all()
        )
    except STORE_FAULTS as exc:
        logger.exception('Could not list registrations for event %s', event_id)
        raise HTTPException(status_code=500, detail='Could not fetch registrations') from exc
