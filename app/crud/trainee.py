from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.models import Trainee


def get_trainee_by_user_id(db: Session, user_id: int) -> Optional[Trainee]:
    return (
        db.query(Trainee)
        .options(joinedload(Trainee.user))
        .filter(Trainee.user_id == user_id)
        .first()
    )


def update_trainee_profile(db: Session, trainee: Trainee, update_data: dict) -> Trainee:
    if update_data.get("age"):
        trainee.age = update_data["age"]
    db.add(trainee)
    return trainee


def claim_booking_version(db: Session, trainee_id: int, expected_version: int) -> bool:
    """
    Compare-and-increment of the trainee's booking version.

    False means another booking of the trainee committed after `expected_version`
    was read, so checks made against that read are stale.
    """
    updated = (
        db.query(Trainee)
        .filter(Trainee.id == trainee_id, Trainee.booking_version == expected_version)
        .update({Trainee.booking_version: Trainee.booking_version + 1}, synchronize_session=False)
    )
    return updated == 1
