import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.models import Booking, BookingStatus, ClassSchedule, Trainer, Trainee

logger = logging.getLogger(__name__)


def _with_summaries(query):
    return query.options(
        joinedload(Booking.trainee).joinedload(Trainee.user),
        joinedload(Booking.schedule).joinedload(ClassSchedule.trainer).joinedload(Trainer.user),
    )


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    return _with_summaries(db.query(Booking)).filter(Booking.id == booking_id).first()


def get_active_booking(db: Session, trainee_id: int, schedule_id: int) -> Optional[Booking]:
    return db.query(Booking).filter(
        Booking.trainee_id == trainee_id,
        Booking.schedule_id == schedule_id,
        Booking.status == BookingStatus.ACTIVE,
    ).first()


def get_active_bookings_on_date(db: Session, trainee_id: int, schedule_date: date) -> List[Booking]:
    """
    Active bookings of the trainee whose class takes place on the given day
    """
    return (
        db.query(Booking)
        .join(Booking.schedule)
        .options(joinedload(Booking.schedule))
        .filter(
            Booking.trainee_id == trainee_id,
            Booking.status == BookingStatus.ACTIVE,
            ClassSchedule.date == schedule_date,
        )
        .all()
    )


def get_trainee_bookings(db: Session, trainee_id: int) -> List[Booking]:
    return (
        _with_summaries(db.query(Booking))
        .filter(Booking.trainee_id == trainee_id)
        .order_by(Booking.booked_at.desc(), Booking.id.desc())
        .all()
    )


def get_all_bookings(db: Session) -> List[Booking]:
    return (
        _with_summaries(db.query(Booking))
        .order_by(Booking.booked_at.desc(), Booking.id.desc())
        .all()
    )


def create_booking(db: Session, trainee_id: int, schedule_id: int) -> Booking:
    """
    Insert an active booking. Capacity must already be reserved by the caller.
    """
    db_booking = Booking(
        trainee_id=trainee_id,
        schedule_id=schedule_id,
        status=BookingStatus.ACTIVE,
        booked_at=datetime.now(timezone.utc),
    )
    db.add(db_booking)
    db.flush()
    return db_booking


def mark_booking_cancelled(db: Session, booking_id: int, cancelled_at: datetime) -> bool:
    """
    ACTIVE -> CANCELLED as a conditional update; False if the booking was not active.
    """
    updated = (
        db.query(Booking)
        .filter(Booking.id == booking_id, Booking.status == BookingStatus.ACTIVE)
        .update(
            {Booking.status: BookingStatus.CANCELLED, Booking.cancelled_at: cancelled_at},
            synchronize_session=False,
        )
    )
    return updated == 1


# --- Seat counter ---
# The only statements that write ClassSchedule.active_bookings_count.

def reserve_seat(db: Session, schedule_id: int) -> bool:
    """
    Atomically take one seat: increments the counter only while it is below capacity.
    """
    updated = (
        db.query(ClassSchedule)
        .filter(
            ClassSchedule.id == schedule_id,
            ClassSchedule.active_bookings_count < ClassSchedule.max_trainees,
        )
        .update(
            {ClassSchedule.active_bookings_count: ClassSchedule.active_bookings_count + 1},
            synchronize_session=False,
        )
    )
    return updated == 1


def release_seat(db: Session, schedule_id: int) -> bool:
    """
    Atomically give one seat back, never going below zero.
    """
    updated = (
        db.query(ClassSchedule)
        .filter(
            ClassSchedule.id == schedule_id,
            ClassSchedule.active_bookings_count > 0,
        )
        .update(
            {ClassSchedule.active_bookings_count: ClassSchedule.active_bookings_count - 1},
            synchronize_session=False,
        )
    )
    if updated != 1:
        logger.error(f"Seat counter of schedule {schedule_id} was already zero on release")
    return updated == 1
