from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.permissions import get_current_user
from app.dependencies import get_db
from app.models import UserRole
from app.schemas.response import ApiResponse
from app.schemas.trainee import TraineeProfileResponse, TraineeProfileUpdate
from app.services.profile import ProfileService

router = APIRouter(prefix="/trainees", tags=["Trainees"])


@router.get("/profile", response_model=ApiResponse[TraineeProfileResponse])
def get_profile_endpoint(
    current_user=Depends(get_current_user([UserRole.TRAINEE])),
    db: Session = Depends(get_db),
):
    trainee = ProfileService(db).get_trainee_profile(current_user["id"])
    return ApiResponse(message="Profile retrieved successfully", data=TraineeProfileResponse.model_validate(trainee))


@router.put("/profile", response_model=ApiResponse[TraineeProfileResponse])
def update_profile_endpoint(
    update_data: TraineeProfileUpdate,
    current_user=Depends(get_current_user([UserRole.TRAINEE])),
    db: Session = Depends(get_db),
):
    trainee = ProfileService(db).update_trainee_profile(current_user["id"], update_data)
    return ApiResponse(message="Profile updated successfully", data=TraineeProfileResponse.model_validate(trainee))
