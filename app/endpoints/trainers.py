from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.permissions import get_current_user
from app.dependencies import get_db
from app.models import UserRole
from app.schemas.class_schedule import TrainerScheduleResponse
from app.schemas.response import ApiResponse
from app.schemas.trainer import TrainerProfileResponse, TrainerProfileUpdate
from app.services.profile import ProfileService

router = APIRouter(prefix="/trainers", tags=["Trainers"])


@router.get("/profile", response_model=ApiResponse[TrainerProfileResponse])
def get_profile_endpoint(
    current_user=Depends(get_current_user([UserRole.TRAINER])),
    db: Session = Depends(get_db),
):
    trainer = ProfileService(db).get_trainer_profile(current_user["id"])
    return ApiResponse(message="Profile retrieved successfully", data=TrainerProfileResponse.model_validate(trainer))


@router.put("/profile", response_model=ApiResponse[TrainerProfileResponse])
def update_profile_endpoint(
    update_data: TrainerProfileUpdate,
    current_user=Depends(get_current_user([UserRole.TRAINER])),
    db: Session = Depends(get_db),
):
    trainer = ProfileService(db).update_trainer_profile(current_user["id"], update_data)
    return ApiResponse(message="Profile updated successfully", data=TrainerProfileResponse.model_validate(trainer))


# Classes assigned to the current trainer
@router.get("/schedules", response_model=ApiResponse[list[TrainerScheduleResponse]])
def get_my_schedules_endpoint(
    current_user=Depends(get_current_user([UserRole.TRAINER])),
    db: Session = Depends(get_db),
):
    schedules = ProfileService(db).get_trainer_schedules(current_user["id"])
    return ApiResponse(
        message="Schedules retrieved successfully",
        data=[TrainerScheduleResponse.model_validate(schedule) for schedule in schedules],
    )
