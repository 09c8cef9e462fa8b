"""Agregados del dashboard y filtros de la tabla de jobs.

Todo se calcula al vuelo sobre la lista que se recibe; no hay caché ni
mantenimiento incremental. Para un dashboard de sucursal, el llamador pasa
la lista ya filtrada por esa sucursal.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Optional

from workshop_queue.core.enums import JobStatus
from workshop_queue.models.dashboard import QueueSummary
from workshop_queue.models.job import Job
from workshop_queue.services.status_model import WORKFLOW_ORDER

PRIORITY_FILTERS = ("all", "priority", "regular")


def summarize(jobs: Iterable[Job], branch: Optional[str] = None) -> QueueSummary:
    """Conteo por estado, total, prioritarios y jobs aún en cola."""
    jobs = list(jobs)
    counts = Counter(job.status for job in jobs)
    return QueueSummary(
        branch=branch,
        status_counts={status: counts[status] for status in WORKFLOW_ORDER if counts[status]},
        total=len(jobs),
        priority_count=sum(1 for job in jobs if job.is_priority),
        in_queue=sum(1 for job in jobs if job.status != JobStatus.READY_FOR_PICKUP),
    )


def filter_jobs(
    jobs: Iterable[Job],
    search: str = "",
    status: Optional[JobStatus] = None,
    priority: str = "all",
) -> List[Job]:
    """Filtro de la tabla: texto en cliente o matrícula, estado y prioridad."""
    if priority not in PRIORITY_FILTERS:
        raise ValueError(f"Unknown priority filter: {priority}")

    needle = search.lower()
    result = []
    for job in jobs:
        if needle and needle not in job.customer_name.lower() and needle not in job.reg_number.lower():
            continue
        if status is not None and job.status != status:
            continue
        if priority == "priority" and not job.is_priority:
            continue
        if priority == "regular" and job.is_priority:
            continue
        result.append(job)
    return result
