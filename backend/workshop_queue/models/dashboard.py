"""Resumen de la cola que se muestra en el dashboard."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from workshop_queue.core.enums import JobStatus
from workshop_queue.models.base import CamelModel


class QueueSummary(CamelModel):
    """Conteos calculados al vuelo sobre la colección de jobs.

    `status_counts` sólo incluye estados con al menos un job, en el orden del
    flujo de trabajo. `in_queue` son los jobs que aún no están listos para
    recoger.
    """

    branch: Optional[str] = None
    status_counts: Dict[JobStatus, int] = Field(default_factory=dict)
    total: int = 0
    priority_count: int = 0
    in_queue: int = 0

    def to_statistics(self) -> dict:
        """Formato que consume el dashboard (`/branches/my-statistics`)."""
        return {
            "data": {
                "branch": self.branch,
                "serviceStatusCounts": {
                    status.value: count for status, count in self.status_counts.items()
                },
                "totalServices": self.total,
                "priorityCount": self.priority_count,
                "queue": {"totalInQueue": self.in_queue},
            }
        }
