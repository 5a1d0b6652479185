from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    phone: str
    email: str
    dob: str
    gender: str
    age: int | None
    city: str
    ssn: str
    past_due_rent: float | None
    applied_before: str
    receiving_ss: str
    verified_idme: str
    mothers_maiden_name: str | None
    mothers_full_name: str | None
    fathers_full_name: str | None
    place_of_birth: str | None
    city_of_birth: str | None
    dl_front: str | None
    dl_back: str | None
    submitted_at: datetime


class SubmitResponse(BaseModel):
    success: bool = True
    message: str = "Application submitted successfully"
    applicationId: int
    redirect: str = "/confirmation.html"


class SubmitErrorResponse(BaseModel):
    success: bool = False
    error: str
    missing_fields: list[str] = Field(default_factory=list)


class DeleteResponse(BaseModel):
    success: bool = True
    message: str = "Application deleted"


class StatsResponse(BaseModel):
    total_applications: int
    total_rent_owed: float | None
    avg_rent_owed: float | None
    receiving_social_security: int
