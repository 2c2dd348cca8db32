from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.permissions import get_current_user
from app.dependencies import get_db
from app.models import UserRole
from app.schemas.response import ApiResponse
from app.schemas.user import UserCreate, UserResponse
from app.services.user import UserService

router = APIRouter(prefix="/users", tags=["Users"])


# Admin creates a trainer or trainee
@router.post("/create", response_model=ApiResponse[UserResponse], status_code=201)
def create_user_endpoint(
    user_data: UserCreate,
    current_user=Depends(get_current_user([UserRole.ADMIN])),
    db: Session = Depends(get_db),
):
    user = UserService(db).create_user(user_data)
    return ApiResponse(message="User created successfully", data=UserResponse.model_validate(user))


@router.get("", response_model=ApiResponse[list[UserResponse]])
def get_users_endpoint(
    current_user=Depends(get_current_user([UserRole.ADMIN])),
    db: Session = Depends(get_db),
):
    users = UserService(db).get_all_users()
    return ApiResponse(
        message="Users retrieved successfully",
        data=[UserResponse.model_validate(user) for user in users],
    )
