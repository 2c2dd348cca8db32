from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import User, UserRole, Trainer, Trainee


def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """
    Get a user by email
    """
    return db.query(User).filter(User.email == email).first()


def get_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at, User.id).all()


def create_user(
    db: Session,
    *,
    email: str,
    password_hash: str,
    name: str,
    role: UserRole,
    phone: Optional[str] = None,
) -> User:
    """
    Create a user together with the profile row its role requires, without committing.
    """
    db_user = User(
        email=email,
        password_hash=password_hash,
        name=name,
        role=role,
        phone=phone,
    )
    if role == UserRole.TRAINER:
        db_user.trainer = Trainer()
    elif role == UserRole.TRAINEE:
        db_user.trainee = Trainee()

    db.add(db_user)
    db.flush()
    return db_user


def update_user_contact(db: Session, user: User, *, name: Optional[str] = None, phone: Optional[str] = None) -> User:
    if name:
        user.name = name
    if phone:
        user.phone = phone
    db.add(user)
    return user
