# app/errors/schedule_errors.py

from app.errors.base import GymError, NotFoundError


class ScheduleNotFound(NotFoundError):
    """Raised when a class schedule is not found."""
    default_message = "Schedule not found."


class ScheduleQuotaExceeded(GymError):
    """Raised when the day already holds the maximum number of classes."""
    default_message = "Schedule limit reached. Maximum 5 schedules allowed per day."


class InvalidClassDuration(GymError):
    """Raised when a class does not last exactly two hours."""
    default_message = "Invalid class duration. Each class must be exactly 2 hours."


class TrainerScheduleConflict(GymError):
    """Raised when the trainer already teaches a class in the time slot."""
    default_message = "Trainer already has a class scheduled during this time slot."


class ScheduleHasActiveBookings(GymError):
    """Raised when deleting a schedule that still has active bookings."""
    default_message = "Cannot delete schedule with active bookings. Please cancel all bookings first."
