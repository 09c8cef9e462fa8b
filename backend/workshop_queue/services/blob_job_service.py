"""Variante del almacén de jobs respaldada por un `BlobStore`.

La lista completa de jobs vive bajo la clave `autoflow:jobs` y el siguiente
id bajo `autoflow:next-job-id`, así que los ids no se reutilizan aunque el
proceso se reinicie. Si la clave no existe al arrancar, se siembra con los
dos jobs de ejemplo.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from pydantic import ValidationError

from workshop_queue.models.job import Job
from workshop_queue.services.blob_store import BlobStore
from workshop_queue.services.job_service import DEFAULT_ALL_BRANCHES, JobService
from workshop_queue.services.seed import DEMO_JOBS

logger = logging.getLogger(__name__)

JOBS_KEY = "autoflow:jobs"
NEXT_ID_KEY = "autoflow:next-job-id"


class BlobJobService(JobService):
    """Mismo contrato que `JobService`; cada escritura vuelca la lista.

    Sólo siembra los jobs de ejemplo cuando la clave no existe: una lista
    vacía guardada es un estado legítimo (p.ej. tras borrarlo todo).
    """

    seeds_itself = True

    def __init__(
        self,
        blob_store: BlobStore,
        all_branches_label: str = DEFAULT_ALL_BRANCHES,
        enforce_transitions: bool = False,
        seed: bool = True,
    ) -> None:
        super().__init__(all_branches_label, enforce_transitions)
        self.blob_store = blob_store
        self._load(seed)

    def _load(self, seed: bool) -> None:
        raw: Optional[list] = self.blob_store.get(JOBS_KEY)
        if raw is None:
            if seed:
                for payload in DEMO_JOBS:
                    self.create_job(payload)
            return

        try:
            jobs = [Job.model_validate(item) for item in raw]
        except ValidationError:
            logger.exception("Stored job list under %s is invalid; starting empty", JOBS_KEY)
            jobs = []

        self._jobs = {job.id: job for job in jobs}
        stored_next = self.blob_store.get(NEXT_ID_KEY)
        highest = max(self._jobs, default=0)
        self._next_id = max(int(stored_next or 0), highest + 1)
        logger.info("Loaded %d jobs from blob store", len(self._jobs))

    def _persist(self, jobs: Dict[int, Job], next_id: int) -> None:
        # Primero el contador: un id reservado de más no se reutiliza nunca
        self.blob_store.set(NEXT_ID_KEY, next_id)
        self.blob_store.set(
            JOBS_KEY,
            [job.model_dump(mode="json", by_alias=True) for job in jobs.values()],
        )
