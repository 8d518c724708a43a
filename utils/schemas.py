# utils/schemas.py
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl, field_validator
from pydantic import ValidationError as PydanticValidationError

from utils.errors import ValidationError


class Payload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


def _lower(value):
    return value.lower() if isinstance(value, str) else value


def _not_null(value, info):
    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value


class RegisterIn(Payload):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: Literal["alumni", "student"]

    normalize_email = field_validator("email")(_lower)


class LoginIn(Payload):
    email: EmailStr
    password: str = Field(..., min_length=1)

    normalize_email = field_validator("email")(_lower)


class AccountUpdateIn(Payload):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None

    normalize_email = field_validator("email")(_lower)


class ProfileIn(Payload):
    batch: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    designation: Optional[str] = None
    location: Optional[str] = None
    skills: Optional[str] = None
    linkedin: Optional[HttpUrl] = None
    bio: Optional[str] = None
    is_mentor: Optional[bool] = None

    reject_null = field_validator("is_mentor")(_not_null)


class AnnouncementIn(Payload):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    target_audience: Optional[Literal["all", "alumni", "students"]] = None


class JobIn(Payload):
    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1)
    location: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[str] = None
    job_type: Optional[Literal["full-time", "part-time", "internship", "contract"]] = None
    application_link: Optional[str] = None


class JobUpdateIn(JobIn):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    company: Optional[str] = Field(None, min_length=1)

    reject_null = field_validator("title", "company")(_not_null)


class MentorshipIn(Payload):
    alumni_id: int
    message: Optional[str] = None


class StatusIn(Payload):
    status: str

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        if value not in ("accepted", "rejected"):
            raise ValueError("Invalid status. Must be accepted or rejected.")
        return value


def parse(schema, data):
    """
    Validate a JSON body against ``schema`` and return only the fields the
    caller actually sent, ready to hand to a model.
    """
    try:
        model = schema.model_validate(data if isinstance(data, dict) else {})
    except PydanticValidationError as exc:
        errors = [
            {
                "field": ".".join(str(p) for p in err["loc"]),
                "message": err["msg"].removeprefix("Value error, "),
            }
            for err in exc.errors()
        ]
        raise ValidationError(errors[0]["message"] if len(errors) == 1 else "Validation failed", errors)
    return model.model_dump(mode="json", exclude_unset=True)
