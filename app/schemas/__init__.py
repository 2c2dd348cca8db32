from .response import ApiResponse, ErrorResponse
from .user import UserSummary, UserContact, UserResponse, AuthUser, AuthResponse, LoginRequest, RegisterRequest, UserCreate
from .trainer import TrainerSummary, TrainerProfileResponse, TrainerProfileUpdate
from .trainee import TraineeSummary, TraineeProfileResponse, TraineeProfileUpdate
from .class_schedule import ScheduleCreate, ScheduleBooking, ScheduleResponse, ScheduleDetailResponse, TrainerScheduleResponse
from .booking import BookingCreate, BookingSchedule, BookingResponse
