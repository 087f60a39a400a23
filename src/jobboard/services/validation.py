"""Required-field checks for submitted forms.

Each ``validate_*`` function returns a mapping of field name to message;
an empty mapping means the submission is acceptable.
"""

import re
from typing import Dict

from ..errors import ValidationFailure
from ..models import NewEmployeeApplication, NewEmployerInquiry, NewJob

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def _check_email(email: str, errors: Dict[str, str]) -> None:
    if not email.strip():
        errors["email"] = "Email is required."
    elif not EMAIL_PATTERN.search(email):
        errors["email"] = "Email is invalid."


def validate_application(application: NewEmployeeApplication) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not application.full_name.strip():
        errors["fullName"] = "Full name is required."
    _check_email(application.email, errors)
    if not application.job_title.strip():
        errors["jobTitle"] = "Desired job title is required."
    if not application.resume:
        errors["resume"] = "A resume file is required."
    if not application.availability:
        errors["availability"] = "Please select at least one availability option."
    if not application.data_consent:
        errors["dataConsent"] = "You must consent to data processing to apply."
    return errors


def validate_inquiry(inquiry: NewEmployerInquiry) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not inquiry.company_name.strip():
        errors["companyName"] = "Company name is required."
    if not inquiry.contact_person.strip():
        errors["contactPerson"] = "Contact person is required."
    _check_email(inquiry.email, errors)
    return errors


def validate_job(job: NewJob) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for field, label in (
        ("title", "Title"),
        ("company", "Company"),
        ("location", "Location"),
        ("description", "Description"),
    ):
        if not getattr(job, field).strip():
            errors[field] = f"{label} is required."
    if job.salary is not None and job.salary.min > job.salary.max:
        errors["salary"] = "Salary minimum must not exceed the maximum."
    return errors


def ensure_valid(errors: Dict[str, str]) -> None:
    """Raise ``ValidationFailure`` if any field produced an error."""
    if errors:
        raise ValidationFailure(errors)
