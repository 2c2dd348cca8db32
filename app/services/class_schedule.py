import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.config import config
from app.crud import class_schedule as crud
from app.crud import trainer as trainer_crud
from app.database import transactional
from app.errors.schedule_errors import (
    ScheduleNotFound,
    ScheduleQuotaExceeded,
    InvalidClassDuration,
    TrainerScheduleConflict,
    ScheduleHasActiveBookings,
)
from app.errors.user_errors import TrainerNotFound
from app.models import ClassSchedule
from app.schemas.class_schedule import ScheduleCreate
from app.utils.time_range import duration_minutes

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, db: Session):
        self.db = db

    # --- Public Methods ---

    def create_schedule(self, admin_id: int, schedule_data: ScheduleCreate) -> ClassSchedule:
        """
        Creates a class schedule.

        Rules, checked in this order (first failure wins):
        1. At most MAX_SCHEDULES_PER_DAY classes on one calendar day.
        2. The trainer must exist.
        3. A class lasts exactly CLASS_DURATION_MINUTES.
        4. The trainer has no other class overlapping the slot that day.
        """
        with transactional(self.db) as session:
            db_schedule = self._create_schedule_logic(session, admin_id, schedule_data)
            schedule_id = db_schedule.id

        logger.info(
            f"Schedule {schedule_id} created by admin {admin_id}: '{schedule_data.class_name}' "
            f"on {schedule_data.date} {schedule_data.start_time}-{schedule_data.end_time}"
        )
        return crud.get_schedule(self.db, schedule_id)

    def get_all_schedules(
        self,
        schedule_date: Optional[date] = None,
        trainer_id: Optional[int] = None,
    ) -> List[ClassSchedule]:
        return crud.get_schedules(self.db, schedule_date=schedule_date, trainer_id=trainer_id)

    def get_schedule_by_id(self, schedule_id: int) -> ClassSchedule:
        schedule = crud.get_schedule(self.db, schedule_id)
        if not schedule:
            raise ScheduleNotFound()
        return schedule

    def delete_schedule(self, schedule_id: int) -> None:
        """
        Deletes a schedule permanently. Only allowed while nobody holds a seat.
        """
        with transactional(self.db) as session:
            schedule = crud.get_schedule(session, schedule_id)
            if not schedule:
                raise ScheduleNotFound()

            active_bookings = crud.count_active_bookings(session, schedule_id)
            if active_bookings > 0:
                logger.info(f"Refusing to delete schedule {schedule_id}: {active_bookings} active bookings")
                raise ScheduleHasActiveBookings()

            crud.delete_schedule(session, schedule)

        logger.info(f"Schedule {schedule_id} deleted")

    # --- Private Logic Methods (Non-Transactional) ---

    def _create_schedule_logic(
        self,
        session: Session,
        admin_id: int,
        schedule_data: ScheduleCreate,
    ) -> ClassSchedule:
        schedules_on_date = crud.count_schedules_on_date(session, schedule_data.date)
        if schedules_on_date >= config.MAX_SCHEDULES_PER_DAY:
            logger.info(f"Schedule quota reached for {schedule_data.date}: {schedules_on_date} classes")
            raise ScheduleQuotaExceeded(
                f"Schedule limit reached. Maximum {config.MAX_SCHEDULES_PER_DAY} schedules allowed per day."
            )

        trainer = trainer_crud.get_trainer(session, schedule_data.trainer_id)
        if not trainer:
            raise TrainerNotFound()

        if duration_minutes(schedule_data.start_time, schedule_data.end_time) != config.CLASS_DURATION_MINUTES:
            raise InvalidClassDuration()

        overlapping = crud.get_overlapping_trainer_schedule(
            session,
            trainer_id=trainer.id,
            schedule_date=schedule_data.date,
            start_time=schedule_data.start_time,
            end_time=schedule_data.end_time,
        )
        if overlapping:
            logger.info(
                f"Trainer {trainer.id} already teaches schedule {overlapping.id} "
                f"({overlapping.start_time}-{overlapping.end_time}) on {schedule_data.date}"
            )
            raise TrainerScheduleConflict()

        return crud.create_schedule(
            session,
            admin_id=admin_id,
            class_name=schedule_data.class_name,
            schedule_date=schedule_data.date,
            start_time=schedule_data.start_time,
            end_time=schedule_data.end_time,
            trainer_id=trainer.id,
            max_trainees=config.MAX_TRAINEES_PER_CLASS,
        )
