"""Intake form models: employee applications and employer inquiries."""

from typing import List, Optional

from pydantic import Field, field_validator

from .base import CamelModel, UtcDatetime
from .job_models import EmploymentType


class NewEmployeeApplication(CamelModel):
    """An employee application as submitted through the public form."""

    full_name: str
    email: str
    phone: str = ""
    address: str = ""
    availability: List[EmploymentType] = Field(default_factory=list)
    desired_industries: str = ""
    skills: str = ""
    work_history: str = ""
    cover_letter: str = ""
    # Data URL of the uploaded file
    resume: str = ""
    resume_filename: Optional[str] = None
    job_title: str = ""
    data_consent: bool = False

    @field_validator("availability")
    @classmethod
    def dedupe_availability(cls, value: List[EmploymentType]) -> List[EmploymentType]:
        return list(dict.fromkeys(value))


class EmployeeApplication(NewEmployeeApplication):
    id: str
    submitted_at: UtcDatetime


class NewEmployerInquiry(CamelModel):
    """A staffing inquiry as submitted by a prospective employer."""

    company_name: str
    contact_person: str
    email: str
    phone: str = ""
    staffing_need: str = ""


class EmployerInquiry(NewEmployerInquiry):
    id: str
    submitted_at: UtcDatetime
