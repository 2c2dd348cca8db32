import logging

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth.auth import router as auth_router
from app.config import config
from app.dependencies import get_db
from app.endpoints import bookings, schedules, trainees, trainers, users
from app.errors.base import GymError
from app.schemas.response import ErrorResponse

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

# Create a logger for the application
logger = logging.getLogger(__name__)

logger.info("Application started and logger configured.")


app = FastAPI(
    title="Gym Class Booking API",
    description="API for gym class schedules and trainee bookings",
    version="1.0.0"
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods (GET, POST, etc.)
    allow_headers=["*"],  # Allow all headers
)


# Route registration
API_PREFIX = "/api"
app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(users.router, prefix=API_PREFIX)
app.include_router(trainees.router, prefix=API_PREFIX)
app.include_router(trainers.router, prefix=API_PREFIX)
app.include_router(schedules.router, prefix=API_PREFIX)
app.include_router(bookings.router, prefix=API_PREFIX)


@app.get("/")
def read_root():
    return {"success": True, "message": "Gym Class Management API is running!"}


def _error_response(status_code: int, message: str, details=None, headers=None) -> JSONResponse:
    body = ErrorResponse(message=message, error_details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True), headers=headers)


# Business-rule errors
@app.exception_handler(GymError)
async def gym_error_handler(request: Request, exc: GymError):
    return _error_response(exc.status_code, exc.message, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail), exc.detail, headers=getattr(exc, "headers", None))


# Validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        if 'ctx' in error and 'error' in error['ctx']:
            # Surface the ValueError text of custom validators
            if isinstance(error['ctx']['error'], ValueError):
                error['msg'] = str(error['ctx']['error'])
                del error['ctx']  # ctx holds non-serialisable objects
        error.pop('input', None)
        errors.append(error)

    return _error_response(400, "Validation error occurred.", errors)


# Unique / foreign key violations that slipped past the service checks
@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return _error_response(400, "Duplicate entry. This record already exists.", "Constraint violation")


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(500, "Something went wrong", "Internal server error")


# Database connectivity check
@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return {"status": "unhealthy", "database": "disconnected"}
