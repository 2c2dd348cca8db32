import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.response import ApiResponse
from app.schemas.user import AuthResponse, AuthUser, LoginRequest, RegisterRequest
from app.services.user import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=ApiResponse[AuthResponse])
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Authenticates with email and password and issues a bearer token.
    """
    result = UserService(db).login(credentials)
    return ApiResponse(message="Login successful", data=_auth_response(result))


@router.post("/register", response_model=ApiResponse[AuthResponse], status_code=201)
def register(registration: RegisterRequest, db: Session = Depends(get_db)):
    """
    Registers a new trainee account.
    """
    result = UserService(db).register_trainee(registration)
    return ApiResponse(message="Registration successful", data=_auth_response(result))


def _auth_response(result: dict) -> AuthResponse:
    return AuthResponse(user=AuthUser.model_validate(result["user"]), token=result["token"])
