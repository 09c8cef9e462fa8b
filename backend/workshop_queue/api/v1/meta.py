"""Catálogos para la UI: estados con sus colores y reglas del formulario."""

from fastapi import APIRouter, Depends

from workshop_queue.api.deps import get_job_service
from workshop_queue.core.validation import describe_rules
from workshop_queue.services.job_service import JobService
from workshop_queue.services.status_model import describe_statuses

router = APIRouter(tags=["meta"])


@router.get("/statuses", summary="Job statuses in workflow order")
async def list_statuses(job_service: JobService = Depends(get_job_service)) -> list:
    return describe_statuses(enforce=job_service.enforce_transitions)


@router.get("/validation-rules", summary="Field rules shared with the job form")
async def validation_rules() -> dict:
    return describe_rules()
