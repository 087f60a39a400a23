"""Job posting models."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field

from .base import CamelModel, UtcDatetime


class EmploymentType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    TEMPORARY = "Temporary"


class JobCategory(str, Enum):
    TECHNOLOGY = "Technology"
    DESIGN = "Design"
    ADMINISTRATIVE = "Administrative"
    MANAGEMENT = "Management"
    MARKETING = "Marketing"
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"


class SalaryRange(CamelModel):
    """Advertised pay band. ``visible`` controls whether listings show it."""

    min: Union[int, float]
    max: Union[int, float]
    currency: str
    visible: bool = True


class NewJob(CamelModel):
    """A job posting as submitted by an admin, before id and postedDate are assigned."""

    title: str
    company: str
    location: str
    employment_type: EmploymentType
    category: JobCategory
    description: str
    responsibilities: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    salary: Optional[SalaryRange] = None
    featured: bool = False
    application_deadline: UtcDatetime


class Job(NewJob):
    """A stored job posting."""

    id: str
    posted_date: UtcDatetime


class JobFilters(CamelModel):
    """Listing filters. ``None`` on any criterion means no constraint.

    ``remote_only`` takes precedence over ``location``.
    """

    search_term: Optional[str] = None
    employment_type: Optional[str] = None
    location: Optional[str] = None
    remote_only: bool = False


class PaginatedJobs(CamelModel):
    items: List[Job]
    total_count: int
