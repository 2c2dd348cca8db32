import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, joinedload, selectinload

from app.models import ClassSchedule, Booking, BookingStatus, Trainer, Trainee

logger = logging.getLogger(__name__)


def _with_summaries(query):
    return query.options(
        joinedload(ClassSchedule.trainer).joinedload(Trainer.user),
        selectinload(ClassSchedule.bookings).joinedload(Booking.trainee).joinedload(Trainee.user),
    )


def get_schedule(db: Session, schedule_id: int) -> Optional[ClassSchedule]:
    """
    Get a schedule by ID with trainer and bookings loaded
    """
    return _with_summaries(db.query(ClassSchedule)).filter(ClassSchedule.id == schedule_id).first()


def get_schedules(
    db: Session,
    *,
    schedule_date: Optional[date] = None,
    trainer_id: Optional[int] = None,
) -> List[ClassSchedule]:
    """
    Get schedules with optional filters, ordered by day and start time
    """
    query = _with_summaries(db.query(ClassSchedule))

    if schedule_date is not None:
        query = query.filter(ClassSchedule.date == schedule_date)
    if trainer_id is not None:
        query = query.filter(ClassSchedule.trainer_id == trainer_id)

    return query.order_by(ClassSchedule.date, ClassSchedule.start_time).all()


def count_schedules_on_date(db: Session, schedule_date: date) -> int:
    return db.query(ClassSchedule).filter(ClassSchedule.date == schedule_date).count()


def get_overlapping_trainer_schedule(
    db: Session,
    *,
    trainer_id: int,
    schedule_date: date,
    start_time: str,
    end_time: str,
) -> Optional[ClassSchedule]:
    """
    Find a class of the trainer on the same day intersecting [start_time, end_time).

    "HH:MM" strings are zero padded, so string order is time order.
    """
    return db.query(ClassSchedule).filter(
        ClassSchedule.trainer_id == trainer_id,
        ClassSchedule.date == schedule_date,
        or_(
            # New class starts inside an existing one
            and_(ClassSchedule.start_time <= start_time, ClassSchedule.end_time > start_time),
            # New class ends inside an existing one
            and_(ClassSchedule.start_time < end_time, ClassSchedule.end_time >= end_time),
            # Existing class lies inside the new one
            and_(ClassSchedule.start_time >= start_time, ClassSchedule.end_time <= end_time),
        ),
    ).first()


def create_schedule(
    db: Session,
    *,
    admin_id: int,
    class_name: str,
    schedule_date: date,
    start_time: str,
    end_time: str,
    trainer_id: int,
    max_trainees: int,
) -> ClassSchedule:
    db_schedule = ClassSchedule(
        class_name=class_name,
        date=schedule_date,
        start_time=start_time,
        end_time=end_time,
        trainer_id=trainer_id,
        admin_id=admin_id,
        max_trainees=max_trainees,
        active_bookings_count=0,
    )
    db.add(db_schedule)
    db.flush()
    return db_schedule


def count_active_bookings(db: Session, schedule_id: int) -> int:
    return db.query(Booking).filter(
        Booking.schedule_id == schedule_id,
        Booking.status == BookingStatus.ACTIVE,
    ).count()


def delete_schedule(db: Session, schedule: ClassSchedule) -> None:
    db.delete(schedule)
    db.flush()
