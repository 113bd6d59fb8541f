import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_admin
from backend.database import get_db
from backend.models.session import EventSession
from backend.routes.utils import STORE_FAULTS
from backend.schemas import SessionRequest, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/sessions', tags=['sessions'])


@router.post(
    '',
    status_code=status.HTTP_201_CREATED,
    response_model=SessionResponse,
    dependencies=[Depends(require_admin)],
)
def create_session(payload: SessionRequest, db: Session = Depends(get_db)):
    # event_id and speaker_id are checked by the store's foreign keys.
    session = EventSession(
        title=payload.title,
        description=payload.description,
        start_time=payload.start_time,
        end_time=payload.end_time,
        event_id=payload.event_id,
        speaker_id=payload.speaker_id,
    )
    try:
        db.add(session)
        db.commit()
        db.refresh(session)
    except STORE_FAULTS as exc:
        db.rollback()
        logger.warning('Could not create session: %s', type(exc).__name__)
        raise HTTPException(status_code=400, detail='Could not create session') from exc

    logger.info('Created session %s for event %s', session.id, session.event_id)
    return session
