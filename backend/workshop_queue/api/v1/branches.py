from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from workshop_queue.api.deps import get_current_user, get_job_service
from workshop_queue.core.enums import UserRole
from workshop_queue.models.user import User
from workshop_queue.services.job_service import JobService
from workshop_queue.services.queue_aggregator import summarize

router = APIRouter(prefix="/branches", tags=["branches"])


@router.get("/statistics", summary="Queue counts for one branch, or all of them")
async def branch_statistics(
    branch: Optional[str] = None,
    job_service: JobService = Depends(get_job_service),
) -> dict:
    return summarize(job_service.list_jobs(branch), branch=branch).to_statistics()


@router.get("/my-statistics", summary="Queue counts for the caller's branch")
async def my_branch_statistics(
    user: User = Depends(get_current_user),
    job_service: JobService = Depends(get_job_service),
) -> dict:
    branch = None if user.role == UserRole.SUPERADMIN else user.branch
    return summarize(job_service.list_jobs(branch), branch=user.branch).to_statistics()
