import os

# The application engine must point at SQLite before app modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_database.db")

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from app.main import app
from app.database import Base
from app.dependencies import get_db
from app.models import User, UserRole, Trainer, Trainee, ClassSchedule
from app.auth.jwt_handler import create_user_token
from app.auth.password import hash_password

# URL for the test database (file-backed SQLite)
DATABASE_URL = "sqlite:///./test_database.db"

ADMIN_PASSWORD = "admin123"
UNUSED_PASSWORD_HASH = "not-a-real-hash"

engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    One database session shared by the test body and the application.
    Tables are recreated for every test.
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with `get_db` overridden to use the test session.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def test_admin(db_session: Session) -> User:
    admin = User(
        email="admin@gym.com",
        password_hash=hash_password(ADMIN_PASSWORD),
        name="Admin User",
        role=UserRole.ADMIN,
        phone="+1234567890",
    )
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture
def test_trainer(db_session: Session) -> Trainer:
    """
    Trainer user together with the trainer profile.
    """
    user = User(
        email="trainer@gym.com",
        password_hash=UNUSED_PASSWORD_HASH,
        name="Test Trainer",
        role=UserRole.TRAINER,
    )
    user.trainer = Trainer(specialization="Yoga", experience=5)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user.trainer


@pytest.fixture
def test_second_trainer(db_session: Session) -> Trainer:
    user = User(
        email="second.trainer@gym.com",
        password_hash=UNUSED_PASSWORD_HASH,
        name="Second Trainer",
        role=UserRole.TRAINER,
    )
    user.trainer = Trainer(specialization="Boxing")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user.trainer


@pytest.fixture
def create_trainee(db_session: Session):
    """
    Factory creating trainee users with their profiles.
    """
    def _create(email: str, name: str = "Test Trainee") -> Trainee:
        user = User(
            email=email,
            password_hash=UNUSED_PASSWORD_HASH,
            name=name,
            role=UserRole.TRAINEE,
        )
        user.trainee = Trainee(age=25)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user.trainee

    return _create


@pytest.fixture
def test_trainee(create_trainee) -> Trainee:
    return create_trainee("trainee@gym.com", "First Trainee")


@pytest.fixture
def test_second_trainee(create_trainee) -> Trainee:
    return create_trainee("second.trainee@gym.com", "Second Trainee")


@pytest.fixture
def class_date() -> date:
    return date.today() + timedelta(days=1)


@pytest.fixture
def create_schedule(db_session: Session, test_admin: User, test_trainer: Trainer, class_date: date):
    """
    Factory inserting schedules directly, bypassing the schedule rules.
    """
    def _create(
        start_time: str = "09:00",
        end_time: str = "11:00",
        schedule_date: date = None,
        trainer: Trainer = None,
        class_name: str = "Morning Yoga",
    ) -> ClassSchedule:
        schedule = ClassSchedule(
            class_name=class_name,
            date=schedule_date or class_date,
            start_time=start_time,
            end_time=end_time,
            trainer_id=(trainer or test_trainer).id,
            admin_id=test_admin.id,
            max_trainees=10,
            active_bookings_count=0,
        )
        db_session.add(schedule)
        db_session.commit()
        db_session.refresh(schedule)
        return schedule

    return _create


@pytest.fixture
def test_schedule(create_schedule) -> ClassSchedule:
    return create_schedule()


def _headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def admin_headers(test_admin):
    return _headers(test_admin)


@pytest.fixture
def trainer_headers(test_trainer):
    return _headers(test_trainer.user)


@pytest.fixture
def trainee_headers(test_trainee):
    return _headers(test_trainee.user)


@pytest.fixture
def second_trainee_headers(test_second_trainee):
    return _headers(test_second_trainee.user)


@pytest.fixture
def session_factory(db_session):
    """
    Opens further sessions on the test database, one per simulated request.
    """
    return TestingSessionLocal


@pytest.fixture
def admin_password():
    return ADMIN_PASSWORD
