import logging
from typing import List

from sqlalchemy.orm import Session

from app.crud import class_schedule as schedule_crud
from app.crud import trainee as trainee_crud
from app.crud import trainer as trainer_crud
from app.crud import user as user_crud
from app.database import transactional
from app.errors.user_errors import TraineeNotFound, TrainerNotFound
from app.models import ClassSchedule, Trainee, Trainer
from app.schemas.trainee import TraineeProfileUpdate
from app.schemas.trainer import TrainerProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """Own-profile operations for trainers and trainees."""

    def __init__(self, db: Session):
        self.db = db

    def get_trainer_profile(self, user_id: int) -> Trainer:
        trainer = trainer_crud.get_trainer_by_user_id(self.db, user_id)
        if not trainer:
            raise TrainerNotFound("Trainer profile not found.")
        return trainer

    def update_trainer_profile(self, user_id: int, update_data: TrainerProfileUpdate) -> Trainer:
        with transactional(self.db) as session:
            trainer = trainer_crud.get_trainer_by_user_id(session, user_id)
            if not trainer:
                raise TrainerNotFound("Trainer profile not found.")

            data = update_data.model_dump(exclude_unset=True)
            trainer_crud.update_trainer_profile(session, trainer, data)
            user_crud.update_user_contact(session, trainer.user, name=data.get("name"), phone=data.get("phone"))

        logger.info(f"Trainer profile of user {user_id} updated")
        return self.get_trainer_profile(user_id)

    def get_trainer_schedules(self, user_id: int) -> List[ClassSchedule]:
        trainer = self.get_trainer_profile(user_id)
        return schedule_crud.get_schedules(self.db, trainer_id=trainer.id)

    def get_trainee_profile(self, user_id: int) -> Trainee:
        trainee = trainee_crud.get_trainee_by_user_id(self.db, user_id)
        if not trainee:
            raise TraineeNotFound()
        return trainee

    def update_trainee_profile(self, user_id: int, update_data: TraineeProfileUpdate) -> Trainee:
        with transactional(self.db) as session:
            trainee = trainee_crud.get_trainee_by_user_id(session, user_id)
            if not trainee:
                raise TraineeNotFound()

            data = update_data.model_dump(exclude_unset=True)
            trainee_crud.update_trainee_profile(session, trainee, data)
            user_crud.update_user_contact(session, trainee.user, name=data.get("name"), phone=data.get("phone"))

        logger.info(f"Trainee profile of user {user_id} updated")
        return self.get_trainee_profile(user_id)
