from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


def _require(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value


class CVModel(BaseModel):
    # Accepts the builder's camelCase keys as well as field names.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContactInfo(CVModel):
    full_name: str
    email: EmailStr
    phone: str
    address: str
    linkedin: str | None = None
    website: str | None = None

    @field_validator("full_name")
    @classmethod
    def _validate_full_name(cls, value: str) -> str:
        return _require(value, "Full name is required")

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        # Top-level domain must be at least two ASCII letters.
        tld = value.rsplit(".", 1)[-1]
        if len(tld) < 2 or not (tld.isascii() and tld.isalpha()):
            raise ValueError("Please enter a valid email address")
        return value

    @field_validator("phone")
    @classmethod
    def _validate_phone(cls, value: str) -> str:
        return _require(value, "Phone number is required")

    @field_validator("address")
    @classmethod
    def _validate_address(cls, value: str) -> str:
        return _require(value, "Address is required")


class WorkExperience(CVModel):
    id: str
    company: str
    position: str
    start_date: str
    end_date: str | None = ""
    current: bool = False
    description: str
    location: str | None = ""

    @field_validator("company")
    @classmethod
    def _validate_company(cls, value: str) -> str:
        return _require(value, "Company name is required")

    @field_validator("position")
    @classmethod
    def _validate_position(cls, value: str) -> str:
        return _require(value, "Position is required")

    @field_validator("start_date")
    @classmethod
    def _validate_start_date(cls, value: str) -> str:
        return _require(value, "Start date is required")

    @field_validator("description")
    @classmethod
    def _validate_description(cls, value: str) -> str:
        return _require(value, "Description is required")


class Education(CVModel):
    id: str
    institution: str
    degree: str
    field: str
    start_date: str
    end_date: str
    gpa: str | None = ""
    description: str | None = ""

    @field_validator("institution")
    @classmethod
    def _validate_institution(cls, value: str) -> str:
        return _require(value, "Institution is required")

    @field_validator("degree")
    @classmethod
    def _validate_degree(cls, value: str) -> str:
        return _require(value, "Degree is required")

    @field_validator("field")
    @classmethod
    def _validate_field(cls, value: str) -> str:
        return _require(value, "Field of study is required")

    @field_validator("start_date")
    @classmethod
    def _validate_start_date(cls, value: str) -> str:
        return _require(value, "Start date is required")

    @field_validator("end_date")
    @classmethod
    def _validate_end_date(cls, value: str) -> str:
        return _require(value, "End date is required")


class Project(CVModel):
    id: str
    title: str
    description: str
    technologies: list[str]
    url: str | None = ""
    start_date: str | None = ""
    end_date: str | None = ""

    @field_validator("title")
    @classmethod
    def _validate_title(cls, value: str) -> str:
        return _require(value, "Project title is required")

    @field_validator("description")
    @classmethod
    def _validate_description(cls, value: str) -> str:
        return _require(value, "Project description is required")

    @field_validator("technologies")
    @classmethod
    def _validate_technologies(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("At least one technology is required")
        return value


class Certification(CVModel):
    id: str
    name: str
    issuer: str
    date: str
    url: str | None = ""
    expiry_date: str | None = ""

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _require(value, "Certification name is required")

    @field_validator("issuer")
    @classmethod
    def _validate_issuer(cls, value: str) -> str:
        return _require(value, "Issuer is required")

    @field_validator("date")
    @classmethod
    def _validate_date(cls, value: str) -> str:
        return _require(value, "Date is required")


class CVData(CVModel):
    contact_info: ContactInfo
    summary: str
    work_experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)

    @field_validator("summary")
    @classmethod
    def _validate_summary(cls, value: str) -> str:
        if len(value) < 10:
            raise ValueError("Summary must be at least 10 characters")
        if len(value) > 1000:
            raise ValueError("Summary must not exceed 1000 characters")
        return value
