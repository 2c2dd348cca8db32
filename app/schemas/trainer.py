from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.user import UserSummary, UserContact


class TrainerSummary(CamelModel):
    id: int
    specialization: str | None = None
    user: UserSummary


class TrainerProfileResponse(CamelModel):
    id: int
    user_id: int
    specialization: str | None = None
    experience: int | None = None
    bio: str | None = None
    user: UserContact


class TrainerProfileUpdate(CamelModel):
    specialization: str | None = Field(None, min_length=2)
    experience: int | None = Field(None, ge=0, le=50)
    bio: str | None = Field(None, max_length=500)
    phone: str | None = Field(None, min_length=10, max_length=15)
    name: str | None = Field(None, min_length=2)

    @field_validator("specialization", "bio", "phone", "name")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v
