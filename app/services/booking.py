import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.crud import booking as crud
from app.crud import class_schedule as schedule_crud
from app.crud import trainee as trainee_crud
from app.database import transactional
from app.errors.booking_errors import (
    BookingNotFound,
    DuplicateBooking,
    BookingTimeConflict,
    ScheduleFull,
    BookingAccessForbidden,
    BookingAlreadyCancelled,
    TraineeBookingsChanged,
)
from app.errors.schedule_errors import ScheduleNotFound
from app.errors.user_errors import TraineeNotFound
from app.models import Booking, ClassSchedule, Trainee
from app.utils.time_range import overlaps

logger = logging.getLogger(__name__)

# Attempts before giving up when the trainee's bookings keep changing underneath
BOOKING_ATTEMPTS = 3


class BookingService:
    """
    Booking rules for trainees.

    The seat counter ClassSchedule.active_bookings_count is only ever changed
    here, through the conditional updates crud.reserve_seat / crud.release_seat.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- Public Methods (Transactional) ---

    def create_booking(self, trainee_user_id: int, schedule_id: int) -> Booking:
        """
        Books a seat on a class for the trainee.

        Seat reservation and the booking insert share one transaction: if the
        insert fails, the rollback gives the seat back before the error is re-raised.
        If another booking of the same trainee commits in between the checks and
        the insert, the whole attempt is rolled back and re-run against fresh data.
        """
        for attempt in range(1, BOOKING_ATTEMPTS + 1):
            try:
                with transactional(self.db) as session:
                    booking = self._create_booking_logic(session, trainee_user_id, schedule_id)
                    booking_id = booking.id
                break
            except TraineeBookingsChanged:
                logger.info(
                    f"Bookings of user {trainee_user_id} changed during attempt {attempt} "
                    f"to book schedule {schedule_id}"
                )
                if attempt == BOOKING_ATTEMPTS:
                    raise

        logger.info(f"Booking {booking_id} created: user {trainee_user_id} on schedule {schedule_id}")
        return crud.get_booking(self.db, booking_id)

    def cancel_booking(self, trainee_user_id: int, booking_id: int) -> Booking:
        """
        Soft-cancels the trainee's booking and releases its seat exactly once.
        """
        with transactional(self.db) as session:
            self._cancel_booking_logic(session, trainee_user_id, booking_id)

        logger.info(f"Booking {booking_id} cancelled by user {trainee_user_id}")
        return crud.get_booking(self.db, booking_id)

    def get_my_bookings(self, trainee_user_id: int) -> List[Booking]:
        """All bookings of the trainee, active and cancelled, newest first."""
        trainee = self._get_trainee(self.db, trainee_user_id)
        return crud.get_trainee_bookings(self.db, trainee.id)

    def get_all_bookings(self) -> List[Booking]:
        return crud.get_all_bookings(self.db)

    # --- Private Logic Methods (Non-Transactional) ---

    def _get_trainee(self, session: Session, trainee_user_id: int) -> Trainee:
        trainee = trainee_crud.get_trainee_by_user_id(session, trainee_user_id)
        if not trainee:
            raise TraineeNotFound()
        return trainee

    def _check_time_conflict(self, session: Session, trainee: Trainee, schedule: ClassSchedule) -> None:
        same_day_bookings = crud.get_active_bookings_on_date(session, trainee.id, schedule.date)
        for booking in same_day_bookings:
            if overlaps(
                booking.schedule.start_time,
                booking.schedule.end_time,
                schedule.start_time,
                schedule.end_time,
            ):
                logger.info(
                    f"Trainee {trainee.id} conflict: schedule {schedule.id} overlaps "
                    f"booked schedule {booking.schedule_id}"
                )
                raise BookingTimeConflict()

    def _create_booking_logic(self, session: Session, trainee_user_id: int, schedule_id: int) -> Booking:
        trainee = self._get_trainee(session, trainee_user_id)

        schedule = schedule_crud.get_schedule(session, schedule_id)
        if not schedule:
            raise ScheduleNotFound()

        if crud.get_active_booking(session, trainee.id, schedule.id):
            raise DuplicateBooking()

        self._check_time_conflict(session, trainee, schedule)

        # The checks above only hold if no other booking of the trainee landed since they read
        if not trainee_crud.claim_booking_version(session, trainee.id, trainee.booking_version):
            raise TraineeBookingsChanged()

        # Capacity gate: compare-and-increment against the stored counter
        if not crud.reserve_seat(session, schedule.id):
            logger.info(f"Schedule {schedule.id} is full, trainee {trainee.id} rejected")
            raise ScheduleFull(
                f"Class schedule is full. Maximum {schedule.max_trainees} trainees allowed per schedule."
            )

        try:
            return crud.create_booking(session, trainee.id, schedule.id)
        except IntegrityError as e:
            # A concurrent request inserted the same active booking first
            logger.warning(f"Booking insert for trainee {trainee.id} on schedule {schedule.id} failed: {e.orig}")
            raise DuplicateBooking() from e

    def _cancel_booking_logic(self, session: Session, trainee_user_id: int, booking_id: int) -> None:
        trainee = self._get_trainee(session, trainee_user_id)

        booking = crud.get_booking(session, booking_id)
        if not booking:
            raise BookingNotFound()

        if booking.trainee_id != trainee.id:
            logger.warning(f"Trainee {trainee.id} tried to cancel booking {booking_id} of trainee {booking.trainee_id}")
            raise BookingAccessForbidden()

        if not booking.is_active:
            raise BookingAlreadyCancelled()

        # Only the request that flips ACTIVE -> CANCELLED releases the seat
        if not crud.mark_booking_cancelled(session, booking.id, datetime.now(timezone.utc)):
            raise BookingAlreadyCancelled()

        crud.release_seat(session, booking.schedule_id)
