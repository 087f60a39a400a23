"""Data-access operations for jobs, applications and inquiries.

Every public coroutine performs one full read-modify-write against the
key-value store and then waits ``api_delay`` seconds before returning or
raising, simulating the round trip to a remote backend.
"""

import asyncio
import functools
from typing import Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..config import settings
from ..errors import NotFoundError, ValidationFailure
from ..logging_config import log_structured, setup_logging
from ..models import (
    EmployeeApplication,
    EmployerInquiry,
    Job,
    JobFilters,
    NewEmployeeApplication,
    NewEmployerInquiry,
    NewJob,
    PaginatedJobs,
)
from ..services.query import query_jobs, unique_values
from ..utils import generate_id, utc_now
from .store import (
    APPLICATIONS_KEY,
    COLLECTION_KEYS,
    INQUIRIES_KEY,
    JOBS_KEY,
    CorruptStoreDataError,
    KeyValueStore,
)

# Set up logging
logger = setup_logging(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def simulated_request(func):
    """Delay resolution (or rejection) of a repository call by ``self.api_delay``."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        finally:
            if self.api_delay:
                await asyncio.sleep(self.api_delay)

    return wrapper


class JobBoardRepository:
    """Handles reads and writes of the three job board collections."""

    def __init__(
        self,
        store: KeyValueStore,
        api_delay: Optional[float] = None,
        default_page_size: Optional[int] = None,
    ):
        """Initialize the repository.

        Args:
            store: An opened key-value store
            api_delay: Simulated latency in seconds, defaults to settings
            default_page_size: Page size used when a caller gives none
        """
        self.store = store
        self.api_delay = settings.api_delay_seconds if api_delay is None else api_delay
        self.default_page_size = default_page_size or settings.default_page_size
        # One writer at a time per collection
        self._locks: Dict[str, asyncio.Lock] = {key: asyncio.Lock() for key in COLLECTION_KEYS}

    async def _load(self, key: str, model: Type[ModelT]) -> List[ModelT]:
        records = await self.store.load(key)
        try:
            return [model.model_validate(record) for record in records]
        except ValidationError as e:
            logger.error(
                "Stored records failed validation",
                extra={"key": key, "error_count": e.error_count()},
            )
            raise CorruptStoreDataError(key, f"record failed validation: {e.errors()[0]['msg']}") from e

    async def _save(self, key: str, items: List[BaseModel]) -> None:
        await self.store.save(key, [item.to_record() for item in items])

    async def _delete(self, key: str, model: Type[ModelT], record_id: str) -> None:
        async with self._locks[key]:
            items = await self._load(key, model)
            remaining = [item for item in items if item.id != record_id]
            if len(remaining) == len(items):
                logger.info("Delete of unknown id ignored", extra={"key": key, "record_id": record_id})
                return
            await self._save(key, remaining)
        logger.info("Record deleted", extra={"key": key, "record_id": record_id})

    # --- Jobs ---

    @simulated_request
    async def get_jobs(
        self,
        filters: Optional[JobFilters] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> PaginatedJobs:
        """Return one page of jobs matching ``filters``, newest first.

        Args:
            filters: Listing filters; ``None`` lists everything
            page: 1-based page number
            limit: Page size, defaults to ``default_page_size``

        Returns:
            PaginatedJobs: The page and the total number of matches
        """
        jobs = await self._load(JOBS_KEY, Job)
        if limit is None:
            limit = self.default_page_size
        return query_jobs(jobs, filters or JobFilters(), page, limit)

    @simulated_request
    async def get_job(self, job_id: str) -> Job:
        for job in await self._load(JOBS_KEY, Job):
            if job.id == job_id:
                return job
        logger.warning("Job not found", extra={"record_id": job_id})
        raise NotFoundError("job", job_id, "404 - Job not found")

    @simulated_request
    async def get_unique_values(self, field: str) -> List[str]:
        """Sorted distinct values of ``employmentType`` or ``location``."""
        return unique_values(await self._load(JOBS_KEY, Job), field)

    @simulated_request
    async def create_job(self, new_job: NewJob) -> Job:
        job = Job(**new_job.model_dump(), id=generate_id(), posted_date=utc_now())
        async with self._locks[JOBS_KEY]:
            jobs = await self._load(JOBS_KEY, Job)
            jobs.insert(0, job)
            await self._save(JOBS_KEY, jobs)
        logger.info("Job created", extra={"record_id": job.id, "title": job.title})
        return job

    @simulated_request
    async def update_job(self, job: Job) -> Job:
        """Replace the stored job with the same id. ``posted_date`` is never changed.

        Raises:
            NotFoundError: If no job has ``job.id``
        """
        async with self._locks[JOBS_KEY]:
            jobs = await self._load(JOBS_KEY, Job)
            for index, existing in enumerate(jobs):
                if existing.id == job.id:
                    break
            else:
                logger.warning("Job not found for update", extra={"record_id": job.id})
                raise NotFoundError("job", job.id, "Job not found for update")

            updated = job.model_copy(update={"posted_date": existing.posted_date})
            jobs[index] = updated
            await self._save(JOBS_KEY, jobs)
        logger.info("Job updated", extra={"record_id": job.id})
        return updated

    @simulated_request
    async def delete_job(self, job_id: str) -> None:
        await self._delete(JOBS_KEY, Job, job_id)

    # --- Employee applications ---

    @simulated_request
    async def get_applications(self) -> List[EmployeeApplication]:
        applications = await self._load(APPLICATIONS_KEY, EmployeeApplication)
        return sorted(applications, key=lambda app: app.submitted_at, reverse=True)

    @simulated_request
    async def create_application(self, data: NewEmployeeApplication) -> EmployeeApplication:
        """Append a new application.

        Raises:
            ValidationFailure: If the applicant did not consent to data processing
        """
        if not data.data_consent:
            raise ValidationFailure({"dataConsent": "You must consent to data processing to apply."})

        application = EmployeeApplication(
            **data.model_dump(), id=generate_id(), submitted_at=utc_now()
        )
        async with self._locks[APPLICATIONS_KEY]:
            applications = await self._load(APPLICATIONS_KEY, EmployeeApplication)
            applications.append(application)
            await self._save(APPLICATIONS_KEY, applications)
        log_structured(
            logger,
            "info",
            "Application created",
            {"record_id": application.id, "job_title": application.job_title},
            availability=[value.value for value in application.availability],
        )
        return application

    @simulated_request
    async def delete_application(self, application_id: str) -> None:
        await self._delete(APPLICATIONS_KEY, EmployeeApplication, application_id)

    # --- Employer inquiries ---

    @simulated_request
    async def get_inquiries(self) -> List[EmployerInquiry]:
        inquiries = await self._load(INQUIRIES_KEY, EmployerInquiry)
        return sorted(inquiries, key=lambda inquiry: inquiry.submitted_at, reverse=True)

    @simulated_request
    async def create_inquiry(self, data: NewEmployerInquiry) -> EmployerInquiry:
        inquiry = EmployerInquiry(**data.model_dump(), id=generate_id(), submitted_at=utc_now())
        async with self._locks[INQUIRIES_KEY]:
            inquiries = await self._load(INQUIRIES_KEY, EmployerInquiry)
            inquiries.append(inquiry)
            await self._save(INQUIRIES_KEY, inquiries)
        log_structured(
            logger,
            "info",
            "Inquiry created",
            {"record_id": inquiry.id, "company_name": inquiry.company_name},
        )
        return inquiry

    @simulated_request
    async def delete_inquiry(self, inquiry_id: str) -> None:
        await self._delete(INQUIRIES_KEY, EmployerInquiry, inquiry_id)

