"""In-memory filtering, sorting and pagination of job postings."""

from enum import Enum
from typing import Iterable, List, Sequence

from ..errors import ValidationFailure
from ..models import Job, JobFilters, PaginatedJobs

REMOTE_MARKER = "remote"

# Fields that can feed a filter dropdown, by alias and attribute name
UNIQUE_VALUE_FIELDS = {
    "employmentType": "employment_type",
    "employment_type": "employment_type",
    "location": "location",
}


def matches_search(job: Job, term: str) -> bool:
    term = term.lower()
    return term in job.title.lower() or term in job.company.lower()


def filter_jobs(jobs: Iterable[Job], filters: JobFilters) -> List[Job]:
    """Apply search, employment type and remote/location filters as AND predicates."""
    result = list(jobs)

    if filters.search_term:
        result = [job for job in result if matches_search(job, filters.search_term)]

    if filters.employment_type:
        result = [job for job in result if job.employment_type.value == filters.employment_type]

    if filters.remote_only:
        result = [job for job in result if REMOTE_MARKER in job.location.lower()]
    elif filters.location:
        result = [job for job in result if job.location == filters.location]

    return result


def sort_by_posted_date(jobs: Iterable[Job]) -> List[Job]:
    """Newest first; ties keep their stored order."""
    return sorted(jobs, key=lambda job: job.posted_date, reverse=True)


def paginate(jobs: Sequence[Job], page: int, limit: int) -> List[Job]:
    """Return the 1-based ``page`` of ``limit`` items; past the end yields ``[]``."""
    errors = {}
    if page < 1:
        errors["page"] = "Page must be 1 or greater."
    if limit < 1:
        errors["limit"] = "Limit must be 1 or greater."
    if errors:
        raise ValidationFailure(errors)

    start = (page - 1) * limit
    return list(jobs[start:start + limit])


def query_jobs(jobs: Iterable[Job], filters: JobFilters, page: int, limit: int) -> PaginatedJobs:
    """Filter, sort newest first, count, then slice out one page."""
    matched = sort_by_posted_date(filter_jobs(jobs, filters))
    return PaginatedJobs(items=paginate(matched, page, limit), total_count=len(matched))


def unique_values(jobs: Iterable[Job], field: str) -> List[str]:
    """Sorted distinct non-empty values of ``field`` across ``jobs``.

    Raises:
        ValidationFailure: If ``field`` is not a dropdown field
    """
    attribute = UNIQUE_VALUE_FIELDS.get(field)
    if attribute is None:
        raise ValidationFailure({"field": f"Unsupported field for unique values: {field}"})

    values = set()
    for job in jobs:
        value = getattr(job, attribute)
        if isinstance(value, Enum):
            value = value.value
        if value:
            values.add(value)
    return sorted(values)
