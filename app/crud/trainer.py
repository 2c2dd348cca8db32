from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.models import Trainer


def get_trainer(db: Session, trainer_id: int) -> Optional[Trainer]:
    return db.query(Trainer).filter(Trainer.id == trainer_id).first()


def get_trainer_by_user_id(db: Session, user_id: int) -> Optional[Trainer]:
    return (
        db.query(Trainer)
        .options(joinedload(Trainer.user))
        .filter(Trainer.user_id == user_id)
        .first()
    )


def update_trainer_profile(db: Session, trainer: Trainer, update_data: dict) -> Trainer:
    """
    Update trainer-specific fields; empty strings and missing keys are ignored.
    """
    for field in ("specialization", "bio"):
        if update_data.get(field):
            setattr(trainer, field, update_data[field])
    if update_data.get("experience") is not None:
        trainer.experience = update_data["experience"]
    db.add(trainer)
    return trainer
