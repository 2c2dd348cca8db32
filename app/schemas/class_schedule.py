from datetime import date, datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.trainee import TraineeSummary
from app.schemas.trainer import TrainerSummary
from app.utils.time_range import TIME_PATTERN


class ScheduleCreate(CamelModel):
    class_name: str = Field(..., min_length=3, max_length=100)
    date: date
    start_time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM")
    end_time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM")
    trainer_id: int

    @field_validator("class_name", mode="before")
    @classmethod
    def strip_class_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class ScheduleBooking(CamelModel):
    id: int
    booked_at: datetime
    trainee: TraineeSummary


class ScheduleResponse(CamelModel):
    id: int
    class_name: str
    date: date
    start_time: str
    end_time: str
    trainer_id: int
    admin_id: int
    max_trainees: int
    current_bookings: int
    trainer: TrainerSummary
    created_at: datetime


class ScheduleDetailResponse(ScheduleResponse):
    active_bookings: list[ScheduleBooking] = []


class TrainerScheduleResponse(CamelModel):
    """A trainer's own class with the trainees booked on it."""
    id: int
    class_name: str
    date: date
    start_time: str
    end_time: str
    max_trainees: int
    current_bookings: int
    active_bookings: list[ScheduleBooking] = []
