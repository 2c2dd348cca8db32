# app/errors/user_errors.py

from app.errors.base import GymError, NotFoundError, UnauthorizedError


class UserNotFound(NotFoundError):
    """Raised when a user is not found."""
    default_message = "User not found."


class TraineeNotFound(NotFoundError):
    """Raised when the caller has no trainee profile."""
    default_message = "Trainee profile not found."


class TrainerNotFound(NotFoundError):
    """Raised when a trainer profile is not found."""
    default_message = "Trainer not found."


class UserEmailAlreadyExists(GymError):
    """Raised when a user with the same email is already registered."""
    default_message = "User with this email already exists."


class InvalidCredentials(UnauthorizedError):
    """Raised when email or password does not match."""
    default_message = "Invalid email or password."
