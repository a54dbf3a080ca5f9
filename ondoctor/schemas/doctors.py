"""Doctor schemas."""

from pydantic import BaseModel, ConfigDict, Field


class DoctorResponse(BaseModel):
    """Doctor directory entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    specialty: str


class DoctorSnapshot(BaseModel):
    """Doctor details copied onto an appointment at booking time."""

    model_config = ConfigDict(frozen=True)

    name: str
    specialty: str


class DoctorListResponse(BaseModel):
    """Doctor directory listing."""

    total: int
    items: list[DoctorResponse]
