#!/usr/bin/env python3
"""
Job Board API

This FastAPI service exposes job listings, employee applications and employer
inquiries, plus a read-only export of the whole dataset.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import Settings, settings as default_settings
from ..db.repository import JobBoardRepository
from ..db.store import JOBS_KEY, CorruptStoreDataError, KeyValueStore, StoreError
from ..errors import NotFoundError, SimulatedTransportFailure, ValidationFailure
from ..logging_config import setup_logging
from ..models import (
    Job,
    JobFilters,
    NewEmployeeApplication,
    NewEmployerInquiry,
    NewJob,
)
from ..utils import utc_now
from .validation import ensure_valid, validate_application, validate_inquiry, validate_job

# Load environment variables
load_dotenv()

# Create module-specific logger
logger = setup_logging(__name__)

# Legacy filter value meaning "no constraint"
ALL_SENTINEL = "all"


def _optional_filter(value: Optional[str]) -> Optional[str]:
    """Map a dropdown value to a filter; blank or "all" means no constraint."""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == ALL_SENTINEL:
        return None
    return value


def get_repository(request: Request) -> JobBoardRepository:
    return request.app.state.repository


def get_store(request: Request) -> KeyValueStore:
    return request.app.state.store


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application around a key-value store at ``settings.store_path``."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the store, seed it and attach the repository."""
        logger.info("Starting service", extra={"store_path": settings.store_path})
        store = await KeyValueStore(settings.store_path).ainit()
        if settings.seed_on_startup:
            await store.seed()

        app.state.store = store
        app.state.repository = JobBoardRepository(
            store,
            api_delay=settings.api_delay_seconds,
            default_page_size=settings.default_page_size,
        )
        try:
            yield
        finally:
            await store.close()
            logger.info("Service shutdown complete")

    app = FastAPI(
        title="Job Board Service",
        description="Job listings, applications and employer inquiries",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValidationFailure)
    async def validation_failure_handler(request: Request, exc: ValidationFailure):
        return JSONResponse(status_code=422, content={"detail": str(exc), "errors": exc.errors})

    @app.exception_handler(CorruptStoreDataError)
    async def corrupt_store_handler(request: Request, exc: CorruptStoreDataError):
        logger.error("Corrupt store data", extra={"key": exc.key, "reason": exc.reason})
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(SimulatedTransportFailure)
    async def transport_failure_handler(request: Request, exc: SimulatedTransportFailure):
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.get("/health")
    async def health_check(store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
        """Health check endpoint."""
        try:
            seeded = await store.has_key(JOBS_KEY)
        except StoreError as e:
            logger.error("Health check failed", extra={"error": str(e)})
            raise HTTPException(status_code=503, detail=str(e))
        return {
            "status": "healthy",
            "store": "connected",
            "seeded": seeded,
            "timestamp": datetime.now().isoformat(),
        }

    # --- Jobs ---

    @app.get("/jobs")
    async def list_jobs(
        search_term: Optional[str] = Query(None, alias="searchTerm"),
        employment_type: Optional[str] = Query(None, alias="employmentType"),
        location: Optional[str] = Query(None),
        remote_only: bool = Query(False, alias="remoteOnly"),
        page: int = Query(1, ge=1),
        limit: Optional[int] = Query(None, ge=1),
        repository: JobBoardRepository = Depends(get_repository),
    ) -> Dict[str, Any]:
        filters = JobFilters(
            search_term=search_term or None,
            employment_type=_optional_filter(employment_type),
            location=_optional_filter(location),
            remote_only=remote_only,
        )
        result = await repository.get_jobs(filters, page=page, limit=limit)
        return {
            "jobs": [job.to_record() for job in result.items],
            "totalCount": result.total_count,
        }

    @app.get("/jobs/unique/{field}")
    async def list_unique_values(
        field: str, repository: JobBoardRepository = Depends(get_repository)
    ) -> List[str]:
        return await repository.get_unique_values(field)

    @app.get("/jobs/{job_id}")
    async def get_job(job_id: str, repository: JobBoardRepository = Depends(get_repository)):
        job = await repository.get_job(job_id)
        return job.to_record()

    @app.post("/jobs", status_code=201)
    async def create_job(new_job: NewJob, repository: JobBoardRepository = Depends(get_repository)):
        ensure_valid(validate_job(new_job))
        job = await repository.create_job(new_job)
        return job.to_record()

    @app.put("/jobs/{job_id}")
    async def update_job(
        job_id: str, changes: NewJob, repository: JobBoardRepository = Depends(get_repository)
    ):
        """Replace a job. Any postedDate in the body is ignored; the stored one is kept."""
        ensure_valid(validate_job(changes))
        job = Job(**changes.model_dump(), id=job_id, posted_date=utc_now())
        updated = await repository.update_job(job)
        return updated.to_record()

    @app.delete("/jobs/{job_id}")
    async def delete_job(job_id: str, repository: JobBoardRepository = Depends(get_repository)):
        await repository.delete_job(job_id)
        return {}

    # --- Employee applications ---

    @app.get("/applications")
    async def list_applications(repository: JobBoardRepository = Depends(get_repository)):
        return [application.to_record() for application in await repository.get_applications()]

    @app.post("/applications", status_code=201)
    async def create_application(
        data: NewEmployeeApplication, repository: JobBoardRepository = Depends(get_repository)
    ):
        ensure_valid(validate_application(data))
        application = await repository.create_application(data)
        return application.to_record()

    @app.delete("/applications/{application_id}")
    async def delete_application(
        application_id: str, repository: JobBoardRepository = Depends(get_repository)
    ):
        await repository.delete_application(application_id)
        return {}

    # --- Employer inquiries ---

    @app.get("/inquiries")
    async def list_inquiries(repository: JobBoardRepository = Depends(get_repository)):
        return [inquiry.to_record() for inquiry in await repository.get_inquiries()]

    @app.post("/inquiries", status_code=201)
    async def create_inquiry(
        data: NewEmployerInquiry, repository: JobBoardRepository = Depends(get_repository)
    ):
        ensure_valid(validate_inquiry(data))
        inquiry = await repository.create_inquiry(data)
        return inquiry.to_record()

    @app.delete("/inquiries/{inquiry_id}")
    async def delete_inquiry(
        inquiry_id: str, repository: JobBoardRepository = Depends(get_repository)
    ):
        await repository.delete_inquiry(inquiry_id)
        return {}

    # --- Export ---

    @app.get("/data")
    async def export_data(store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
        """The entire persisted dataset as one read-only JSON document."""
        return await store.dump()

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(
        "jobboard.services.api:app",
        host=default_settings.host,
        port=default_settings.port,
    )


if __name__ == "__main__":
    main()
