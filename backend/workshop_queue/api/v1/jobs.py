from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from workshop_queue.api.deps import get_current_user, get_job_service
from workshop_queue.core.enums import JobStatus, UserRole
from workshop_queue.core.errors import InvalidStatusTransitionError, JobNotFoundError
from workshop_queue.models.job import Job, JobCreate, JobUpdate
from workshop_queue.models.user import User
from workshop_queue.services.job_service import JobService
from workshop_queue.services.queue_aggregator import filter_jobs

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=List[Job], summary="List jobs, optionally scoped to a branch")
async def list_jobs(
    branch: Optional[str] = None,
    search: str = "",
    status_filter: Optional[JobStatus] = Query(default=None, alias="status"),
    priority: str = Query(default="all", pattern="^(all|priority|regular)$"),
    job_service: JobService = Depends(get_job_service),
) -> List[Job]:
    jobs = job_service.list_jobs(branch)
    return filter_jobs(jobs, search=search, status=status_filter, priority=priority)


@router.get("/my-branch", response_model=List[Job], summary="List jobs of the caller's branch")
async def list_my_branch_jobs(
    user: User = Depends(get_current_user),
    job_service: JobService = Depends(get_job_service),
) -> List[Job]:
    # El superadmin ve todas las sucursales
    branch = None if user.role == UserRole.SUPERADMIN else user.branch
    return job_service.list_jobs(branch)


@router.post(
    "",
    response_model=Job,
    status_code=status.HTTP_201_CREATED,
    summary="Log an incoming vehicle",
)
async def create_job(
    payload: JobCreate,
    job_service: JobService = Depends(get_job_service),
) -> Job:
    return job_service.create_job(payload)


@router.get("/{job_id}", response_model=Job, summary="Get a single job")
async def get_job(job_id: int, job_service: JobService = Depends(get_job_service)) -> Job:
    job = job_service.get_job(job_id)
    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found.",
        )
    return job


@router.patch("/{job_id}", response_model=Job, summary="Update some fields of a job")
async def update_job(
    job_id: int,
    payload: JobUpdate,
    job_service: JobService = Depends(get_job_service),
) -> Job:
    try:
        return job_service.update_job(job_id, payload)
    except JobNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Job not found.",
        )
    except InvalidStatusTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.delete(
    "/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a job (no error if it does not exist)",
)
async def delete_job(job_id: int, job_service: JobService = Depends(get_job_service)) -> Response:
    job_service.delete_job(job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
