from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.user import UserSummary, UserContact


class TraineeSummary(CamelModel):
    id: int
    user: UserSummary


class TraineeProfileResponse(CamelModel):
    id: int
    user_id: int
    age: int | None = None
    user: UserContact


class TraineeProfileUpdate(CamelModel):
    age: int | None = Field(None, ge=1, le=120)
    phone: str | None = Field(None, min_length=10, max_length=15)
    name: str | None = Field(None, min_length=2)

    @field_validator("phone", "name")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v
