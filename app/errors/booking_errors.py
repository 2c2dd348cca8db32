# app/errors/booking_errors.py

from app.errors.base import GymError, NotFoundError, ForbiddenError


class BookingNotFound(NotFoundError):
    """Raised when a booking is not found."""
    default_message = "Booking not found."


class DuplicateBooking(GymError):
    """Raised when the trainee already holds an active booking for the schedule."""
    default_message = "You have already booked this class."


class BookingTimeConflict(GymError):
    """Raised when the trainee has another class booked in an overlapping slot."""
    default_message = "You already have a class booked during this time slot."


class ScheduleFull(GymError):
    """Raised when every seat of the schedule is taken."""
    default_message = "Class schedule is full. Maximum 10 trainees allowed per schedule."


class BookingAccessForbidden(ForbiddenError):
    """Raised when a trainee acts on someone else's booking."""
    default_message = "You can only cancel your own bookings."


class BookingAlreadyCancelled(GymError):
    """Raised when cancelling a booking that is already cancelled."""
    default_message = "Booking is already cancelled."


class TraineeBookingsChanged(GymError):
    """Raised when the trainee's bookings kept changing while a booking was being made."""
    status_code = 409
    default_message = "Your bookings changed while this booking was being made. Please try again."
