import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_admin
from backend.database import get_db
from backend.models.speaker import Speaker
from backend.routes.utils import STORE_FAULTS
from backend.schemas import SpeakerRequest, SpeakerResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/speakers', tags=['speakers'])


@router.post(
    '',
    status_code=status.HTTP_201_CREATED,
    response_model=SpeakerResponse,
    dependencies=[Depends(require_admin)],
)
def create_speaker(payload: SpeakerRequest, db: Session = Depends(get_db)):
    speaker = Speaker(name=payload.name, bio=payload.bio, user_id=payload.user_id or None)
    try:
        db.add(speaker)
        db.commit()
        db.refresh(speaker)
    except STORE_FAULTS as exc:
        db.rollback()
        logger.warning('Could not create speaker: %s', type(exc).__name__)
        raise HTTPException(status_code=400, detail='Could not create speaker') from exc

    return speaker


@router.get('', response_model=list[SpeakerResponse])
def list_speakers(db: Session = Depends(get_db)):
    try:
        return db.query(Speaker).order_by(Speaker.id).all()
    except STORE_FAULTS as exc:
        logger.exception('Could not list speakers')
        raise HTTPException(status_code=500, detail='Could not fetch speakers') from exc
