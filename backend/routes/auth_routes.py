import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth import jwt_handler
from backend.auth.dependencies import get_current_identity
from backend.auth.jwt_handler import TokenIdentity
from backend.auth.passwords import hash_password, verify_password
from backend.core import config
from backend.database import get_db
from backend.models.user import Role, User
from backend.schemas import CamelModel, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=['auth'])

INVALID_CREDENTIALS = 'Invalid credentials'


class RegisterRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class RegisterResponse(CamelModel):
    message: str
    user_id: int


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class LoginResponse(CamelModel):
    token: str
    token_type: str = 'bearer'


class ProfileResponse(BaseModel):
    message: str
    user: UserResponse


def normalize_email(value: str | None) -> str:
    return (value or '').strip().lower()


def resolve_requested_role(requested: str | None) -> Role:
    if requested is None or not requested.strip():
        return Role.ATTENDEE

    try:
        role = Role(requested.strip().upper())
    except ValueError as exc:
        allowed = ', '.join(member.value for member in Role)
        raise HTTPException(status_code=400, detail=f'Role must be one of: {allowed}.') from exc

    if role != Role.ATTENDEE and not config.ALLOW_ROLE_SELF_ASSIGNMENT:
        raise HTTPException(status_code=403, detail='Only attendees can self-register.')
    return role


@router.post('/register', status_code=status.HTTP_201_CREATED, response_model=RegisterResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    email = normalize_email(payload.email)
    if not email or not payload.password:
        raise HTTPException(status_code=400, detail='Email and password are required')

    role = resolve_requested_role(payload.role)
    user = User(
        name=payload.name,
        email=email,
        hashed_password=hash_password(payload.password),
        role=role.value,
    )

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning('Registration failed for %s: %s', email, type(exc).__name__)
        raise HTTPException(status_code=400, detail='Email is already in use') from exc

    logger.info('Registered user %s with role %s', user.id, role.value)
    return RegisterResponse(message='User registered successfully', user_id=user.id)


@router.post('/login', response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    email = normalize_email(payload.email)
    if not email or not payload.password:
        raise HTTPException(status_code=400, detail='Email and password are required')

    try:
        user = db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as exc:
        logger.exception('Login lookup failed')
        raise HTTPException(status_code=500, detail='Could not log in') from exc

    if user is None or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)

    token = jwt_handler.create_access_token(user_id=user.id, role=user.role)
    return LoginResponse(token=token)


@router.get('/profile', response_model=ProfileResponse)
def profile(
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    try:
        user = db.get(User, identity.user_id)
    except SQLAlchemyError as exc:
        logger.exception('Profile lookup failed for user %s', identity.user_id)
        raise HTTPException(status_code=500, detail='Could not load profile') from exc

    if user is None:
        raise HTTPException(status_code=404, detail='User not found')

    return ProfileResponse(
        message=f'Welcome, {user.name or user.email}!',
        user=UserResponse.model_validate(user),
    )
