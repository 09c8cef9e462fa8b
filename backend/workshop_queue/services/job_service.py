"""Almacén en memoria de los jobs del taller.

Los ids son enteros crecientes que nunca se reutilizan, ni siquiera tras
borrar un job. Quien llama siempre recibe copias: modificar el objeto
devuelto no cambia el almacén.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Union

from workshop_queue.core.errors import JobNotFoundError
from workshop_queue.models.job import Job, JobCreate, JobUpdate
from workshop_queue.services.status_model import check_transition

logger = logging.getLogger(__name__)

DEFAULT_ALL_BRANCHES = "All Branches"


class JobService:
    """
    Gestión de jobs. Almacenamiento en memoria, un solo escritor.
    `BlobJobService` reutiliza esta lógica y además vuelca la lista a disco.
    """

    # True si el almacén siembra sus propios jobs de ejemplo al arrancar
    seeds_itself = False

    def __init__(
        self,
        all_branches_label: str = DEFAULT_ALL_BRANCHES,
        enforce_transitions: bool = False,
    ) -> None:
        self._jobs: Dict[int, Job] = {}
        self._next_id = 1
        self.all_branches_label = all_branches_label
        self.enforce_transitions = enforce_transitions

    def create_job(self, payload: JobCreate) -> Job:
        """Asigna id, `createdAt` y número de cola, guarda y devuelve el job."""
        data = payload.model_dump()
        if data["queue_number"] is None:
            data["queue_number"] = self._next_queue_number(payload.branch)

        job = Job(
            **data,
            id=self._next_id,
            created_at=datetime.now(timezone.utc),
        )
        jobs = dict(self._jobs)
        jobs[job.id] = job
        self._commit(jobs, job.id + 1)
        logger.info("Created job %s (%s) at %s", job.id, job.reg_number, job.branch)
        return job.model_copy()

    def get_job(self, job_id: int) -> Optional[Job]:
        """Devuelve un job por id o None si no existe."""
        job = self._jobs.get(job_id)
        return job.model_copy() if job else None

    def list_jobs(self, branch: Optional[str] = None) -> List[Job]:
        """Jobs en orden de inserción, opcionalmente sólo de una sucursal."""
        jobs = self._jobs.values()
        if branch and branch != self.all_branches_label:
            jobs = [j for j in jobs if j.branch == branch]
        return [j.model_copy() for j in jobs]

    def update_job(self, job_id: int, updates: Union[JobUpdate, Mapping[str, Any]]) -> Job:
        """Mezcla los campos enviados sobre el job existente.

        Acepta un `JobUpdate` o un diccionario; en ese caso se valida con
        `JobUpdate`, que descarta `id`, `createdAt` y `branch`.
        """
        existing = self._jobs.get(job_id)
        if existing is None:
            raise JobNotFoundError(job_id)

        if not isinstance(updates, JobUpdate):
            updates = JobUpdate.model_validate(dict(updates))
        changes = updates.changes()

        if "status" in changes:
            check_transition(existing.status, changes["status"], self.enforce_transitions)

        updated = existing.model_copy(update=changes)
        jobs = dict(self._jobs)
        jobs[job_id] = updated
        self._commit(jobs, self._next_id)
        logger.info("Updated job %s: %s", job_id, sorted(changes))
        return updated.model_copy()

    def delete_job(self, job_id: int) -> None:
        """Borra el job si existe. Borrar un id inexistente no hace nada."""
        if job_id not in self._jobs:
            return
        jobs = dict(self._jobs)
        del jobs[job_id]
        self._commit(jobs, self._next_id)
        logger.info("Deleted job %s", job_id)

    def _next_queue_number(self, branch: str) -> int:
        numbers = [j.queue_number for j in self._jobs.values() if j.branch == branch]
        return max(numbers, default=0) + 1

    def _commit(self, jobs: Dict[int, Job], next_id: int) -> None:
        # Si _persist falla, el estado en memoria queda intacto
        self._persist(jobs, next_id)
        self._jobs = jobs
        self._next_id = next_id

    def _persist(self, jobs: Dict[int, Job], next_id: int) -> None:
        # En memoria no hay nada que volcar
        pass
