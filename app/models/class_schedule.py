from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.config import config
from app.database import Base


class ClassSchedule(Base):
    __tablename__ = "class_schedules"

    id = Column(Integer, primary_key=True, index=True)
    class_name = Column(String, nullable=False)
    date = Column(Date, nullable=False, index=True)  # Calendar day, time of day is not stored
    start_time = Column(String(5), nullable=False)  # "HH:MM"
    end_time = Column(String(5), nullable=False)  # "HH:MM", always start_time + 120 minutes
    trainer_id = Column(Integer, ForeignKey("trainers.id"), nullable=False, index=True)
    admin_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    max_trainees = Column(Integer, nullable=False, default=config.MAX_TRAINEES_PER_CLASS)
    # Denormalised number of ACTIVE bookings, written only by the booking service
    active_bookings_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), nullable=False)

    # Relationships
    trainer = relationship("Trainer", back_populates="schedules")
    admin = relationship("User", back_populates="created_schedules")
    bookings = relationship("Booking", back_populates="schedule", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("active_bookings_count >= 0", name="check_schedule_bookings_non_negative"),
        CheckConstraint("active_bookings_count <= max_trainees", name="check_schedule_bookings_capacity"),
    )

    @property
    def active_bookings(self):
        return [booking for booking in self.bookings if booking.is_active]

    @property
    def current_bookings(self) -> int:
        return len(self.active_bookings)
