from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from app.database import Base


class BookingStatus(str, Enum):
    ACTIVE = "ACTIVE"        # Seat is held
    CANCELLED = "CANCELLED"  # Terminal, cancelled_at is set


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    trainee_id = Column(Integer, ForeignKey("trainees.id"), nullable=False, index=True)
    schedule_id = Column(Integer, ForeignKey("class_schedules.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(SQLEnum(BookingStatus), nullable=False, default=BookingStatus.ACTIVE)
    booked_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    trainee = relationship("Trainee", back_populates="bookings")
    schedule = relationship("ClassSchedule", back_populates="bookings")

    __table_args__ = (
        # One active booking per trainee per schedule
        Index(
            "uq_bookings_active_trainee_schedule",
            "trainee_id",
            "schedule_id",
            unique=True,
            postgresql_where=text("status = 'ACTIVE'"),
            sqlite_where=text("status = 'ACTIVE'"),
        ),
    )

    @property
    def is_active(self) -> bool:
        return self.status == BookingStatus.ACTIVE
