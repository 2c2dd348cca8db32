from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.permissions import get_current_user
from app.dependencies import get_db
from app.models import UserRole
from app.schemas.booking import BookingCreate, BookingResponse
from app.schemas.response import ApiResponse
from app.services.booking import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])


# Trainee books a class
@router.post("/book", response_model=ApiResponse[BookingResponse], status_code=201)
def create_booking_endpoint(
    booking_data: BookingCreate,
    current_user=Depends(get_current_user([UserRole.TRAINEE])),
    db: Session = Depends(get_db),
):
    booking = BookingService(db).create_booking(current_user["id"], booking_data.schedule_id)
    return ApiResponse(message="Class booked successfully", data=BookingResponse.model_validate(booking))


@router.get("/my-bookings", response_model=ApiResponse[list[BookingResponse]])
def get_my_bookings_endpoint(
    current_user=Depends(get_current_user([UserRole.TRAINEE])),
    db: Session = Depends(get_db),
):
    bookings = BookingService(db).get_my_bookings(current_user["id"])
    return ApiResponse(
        message="Bookings retrieved successfully",
        data=[BookingResponse.model_validate(booking) for booking in bookings],
    )


# Trainee cancels own booking
@router.delete("/{booking_id}", response_model=ApiResponse[BookingResponse])
def cancel_booking_endpoint(
    booking_id: int,
    current_user=Depends(get_current_user([UserRole.TRAINEE])),
    db: Session = Depends(get_db),
):
    booking = BookingService(db).cancel_booking(current_user["id"], booking_id)
    return ApiResponse(message="Booking cancelled successfully", data=BookingResponse.model_validate(booking))


# Admin sees every booking
@router.get("", response_model=ApiResponse[list[BookingResponse]])
def get_all_bookings_endpoint(
    current_user=Depends(get_current_user([UserRole.ADMIN])),
    db: Session = Depends(get_db),
):
    bookings = BookingService(db).get_all_bookings()
    return ApiResponse(
        message="Bookings retrieved successfully",
        data=[BookingResponse.model_validate(booking) for booking in bookings],
    )
