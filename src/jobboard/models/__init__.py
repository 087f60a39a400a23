"""
Data models for the job board.
"""

from .form_models import (
    EmployeeApplication,
    EmployerInquiry,
    NewEmployeeApplication,
    NewEmployerInquiry,
)
from .job_models import (
    EmploymentType,
    Job,
    JobCategory,
    JobFilters,
    NewJob,
    PaginatedJobs,
    SalaryRange,
)

__all__ = [
    "EmployeeApplication",
    "EmployerInquiry",
    "EmploymentType",
    "Job",
    "JobCategory",
    "JobFilters",
    "NewEmployeeApplication",
    "NewEmployerInquiry",
    "NewJob",
    "PaginatedJobs",
    "SalaryRange",
]
