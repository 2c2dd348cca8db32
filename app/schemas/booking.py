from datetime import date, datetime

from app.models.booking import BookingStatus
from app.schemas.base import CamelModel
from app.schemas.trainee import TraineeSummary
from app.schemas.trainer import TrainerSummary


class BookingCreate(CamelModel):
    schedule_id: int


class BookingSchedule(CamelModel):
    id: int
    class_name: str
    date: date
    start_time: str
    end_time: str
    trainer: TrainerSummary


class BookingResponse(CamelModel):
    id: int
    trainee_id: int
    schedule_id: int
    status: BookingStatus
    booked_at: datetime
    cancelled_at: datetime | None = None
    trainee: TraineeSummary
    schedule: BookingSchedule
