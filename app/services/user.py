import logging
from typing import List

from sqlalchemy.orm import Session

from app.auth.jwt_handler import create_user_token
from app.auth.password import hash_password, verify_password
from app.crud import user as crud
from app.database import transactional
from app.errors.user_errors import InvalidCredentials, UserEmailAlreadyExists
from app.models import User, UserRole
from app.schemas.user import LoginRequest, RegisterRequest, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def login(self, credentials: LoginRequest) -> dict:
        """
        Checks email/password and issues an access token.
        """
        user = crud.get_user_by_email(self.db, credentials.email)
        if not user or not verify_password(credentials.password, user.password_hash):
            logger.info(f"Failed login attempt for {credentials.email}")
            raise InvalidCredentials()

        return {"user": user, "token": create_user_token(user)}

    def register_trainee(self, registration: RegisterRequest) -> dict:
        """
        Self-registration: always creates a TRAINEE with an empty trainee profile.
        """
        user = self._create_user(
            email=registration.email,
            password=registration.password,
            name=registration.name,
            role=UserRole.TRAINEE,
            phone=registration.phone,
        )
        return {"user": user, "token": create_user_token(user)}

    def create_user(self, user_data: UserCreate) -> User:
        """
        Admin creates a TRAINER or TRAINEE together with the matching profile.
        """
        return self._create_user(
            email=user_data.email,
            password=user_data.password,
            name=user_data.name,
            role=user_data.role,
            phone=user_data.phone,
        )

    def get_all_users(self) -> List[User]:
        return crud.get_all_users(self.db)

    def _create_user(self, *, email: str, password: str, name: str, role: UserRole, phone: str | None) -> User:
        with transactional(self.db) as session:
            if crud.get_user_by_email(session, email):
                raise UserEmailAlreadyExists()

            user = crud.create_user(
                session,
                email=email,
                password_hash=hash_password(password),
                name=name,
                role=role,
                phone=phone,
            )

        self.db.refresh(user)
        logger.info(f"User {user.id} ({user.role.value}) created: {user.email}")
        return user
