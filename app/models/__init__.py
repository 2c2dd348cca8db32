from .user import UserRole, User
from .trainer import Trainer
from .trainee import Trainee
from .class_schedule import ClassSchedule
from .booking import BookingStatus, Booking
