import os

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret-key-for-the-conference-suite')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from backend.auth import jwt_handler  # noqa: E402
from backend.auth.passwords import hash_password  # noqa: E402
from backend.database import Base, get_db  # noqa: E402
from backend.main import app  # noqa: E402
from backend.models.user import Role, User  # noqa: E402


@pytest.fixture
def session_factory():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield testing_session_local
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def create_user(db):
    def _create_user(email: str, role: Role = Role.ATTENDEE, password: str = 'secret-pass', name: str | None = None) -> User:
        user = User(name=name, email=email, hashed_password=hash_password(password), role=role.value)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _create_user


@pytest.fixture
def auth_headers(create_user):
    def _auth_headers(email: str, role: Role = Role.ATTENDEE) -> dict[str, str]:
        user = create_user(email, role=role)
        token = jwt_handler.create_access_token(user_id=user.id, role=user.role)
        return {'Authorization': f'Bearer {token}'}

    return _auth_headers


@pytest.fixture
def admin_headers(auth_headers):
    return auth_headers('admin@example.com', Role.ADMIN)


@pytest.fixture
def attendee_headers(auth_headers):
    return auth_headers('attendee@example.com', Role.ATTENDEE)
