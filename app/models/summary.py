"""Wire models for the health summary endpoint.

Text fields are strict strings: a number where a string is expected (a numeric
``visitDate``, ``language: 1``) fails validation and the request is answered
with the generic failure rather than rendered as-is.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class _WireModel(BaseModel):
    """Accepts the camelCase keys sent by the mobile client."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MedicalRecord(_WireModel):
    record_type: str = Field(alias="recordType")
    title: str
    diagnosis: str | None = None
    medications: str | None = None
    visit_date: str | None = Field(default=None, alias="visitDate")
    is_critical: bool | None = Field(default=None, alias="isCritical")


class Allergy(_WireModel):
    allergen: str
    severity: str


class PatientProfile(_WireModel):
    full_name: str | None = Field(default=None, alias="fullName")
    blood_type: str | None = Field(default=None, alias="bloodType")
    date_of_birth: str | None = Field(default=None, alias="dateOfBirth")


class SummaryRequest(_WireModel):
    """Body of a health summary request. Only ``records`` is required."""

    records: list[MedicalRecord]
    allergies: list[Allergy] | None = None
    profile: PatientProfile | None = None
    language: str | None = None


class SummaryResponse(BaseModel):
    summary: str


class ErrorResponse(BaseModel):
    error: str


class GenerationResult(BaseModel):
    """Text returned by the generation backend."""

    text: str


class TokenVerification(BaseModel):
    """Verdict returned by the token verification service."""

    valid: StrictBool
