from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.auth.permissions import get_current_user
from app.dependencies import get_db
from app.models import UserRole
from app.schemas.class_schedule import ScheduleCreate, ScheduleDetailResponse, ScheduleResponse
from app.schemas.response import ApiResponse
from app.services.class_schedule import ScheduleService

router = APIRouter(prefix="/schedules", tags=["Schedules"])


# Create a class schedule
@router.post("/create", response_model=ApiResponse[ScheduleResponse], status_code=201)
def create_schedule_endpoint(
    schedule_data: ScheduleCreate,
    current_user=Depends(get_current_user([UserRole.ADMIN])),
    db: Session = Depends(get_db),
):
    schedule = ScheduleService(db).create_schedule(current_user["id"], schedule_data)
    return ApiResponse(message="Class schedule created successfully", data=ScheduleResponse.model_validate(schedule))


# List schedules with filters
@router.get("", response_model=ApiResponse[list[ScheduleResponse]])
def get_schedules_endpoint(
    schedule_date: Optional[date] = Query(None, alias="date"),
    trainer_id: Optional[int] = Query(None, alias="trainerId"),
    current_user=Depends(get_current_user()),
    db: Session = Depends(get_db),
):
    """
    Lists class schedules, optionally for one calendar day and/or one trainer.
    """
    schedules = ScheduleService(db).get_all_schedules(schedule_date=schedule_date, trainer_id=trainer_id)
    return ApiResponse(
        message="Schedules retrieved successfully",
        data=[ScheduleResponse.model_validate(schedule) for schedule in schedules],
    )


@router.get("/{schedule_id}", response_model=ApiResponse[ScheduleDetailResponse])
def get_schedule_endpoint(
    schedule_id: int,
    current_user=Depends(get_current_user()),
    db: Session = Depends(get_db),
):
    schedule = ScheduleService(db).get_schedule_by_id(schedule_id)
    return ApiResponse(message="Schedule retrieved successfully", data=ScheduleDetailResponse.model_validate(schedule))


@router.delete("/{schedule_id}", response_model=ApiResponse[None])
def delete_schedule_endpoint(
    schedule_id: int,
    current_user=Depends(get_current_user([UserRole.ADMIN])),
    db: Session = Depends(get_db),
):
    ScheduleService(db).delete_schedule(schedule_id)
    return ApiResponse(message="Schedule deleted successfully")
