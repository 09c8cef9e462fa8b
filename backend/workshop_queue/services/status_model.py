"""Modelo de estados del taller.

El flujo "natural" es:

    checked-in -> in-diagnostics -> waiting-for-parts
               -> work-in-progress -> ready-for-pickup

Por defecto cualquier estado puede pasar a cualquier otro. Si la
configuración activa `enforce_status_transitions`, sólo se permiten los
saltos de `ALLOWED_TRANSITIONS`: quedarse igual, avanzar un paso o
retroceder uno.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Tuple

from workshop_queue.core.enums import JobStatus
from workshop_queue.core.errors import InvalidStatusTransitionError

WORKFLOW_ORDER: Tuple[JobStatus, ...] = (
    JobStatus.CHECKED_IN,
    JobStatus.IN_DIAGNOSTICS,
    JobStatus.WAITING_FOR_PARTS,
    JobStatus.WORK_IN_PROGRESS,
    JobStatus.READY_FOR_PICKUP,
)

# Color de acento para la UI; no es un invariante de datos
STATUS_ACCENTS: Dict[JobStatus, str] = {
    JobStatus.CHECKED_IN: "blue",
    JobStatus.IN_DIAGNOSTICS: "orange",
    JobStatus.WAITING_FOR_PARTS: "red",
    JobStatus.WORK_IN_PROGRESS: "purple",
    JobStatus.READY_FOR_PICKUP: "green",
}

STATUS_LABELS: Dict[JobStatus, str] = {
    JobStatus.CHECKED_IN: "Checked In",
    JobStatus.IN_DIAGNOSTICS: "In Diagnostics",
    JobStatus.WAITING_FOR_PARTS: "Waiting for Parts",
    JobStatus.WORK_IN_PROGRESS: "Work in Progress",
    JobStatus.READY_FOR_PICKUP: "Ready for Pickup",
}


def _build_transitions() -> Dict[JobStatus, FrozenSet[JobStatus]]:
    table: Dict[JobStatus, FrozenSet[JobStatus]] = {}
    for i, status in enumerate(WORKFLOW_ORDER):
        neighbours = {status}
        if i > 0:
            neighbours.add(WORKFLOW_ORDER[i - 1])
        if i + 1 < len(WORKFLOW_ORDER):
            neighbours.add(WORKFLOW_ORDER[i + 1])
        table[status] = frozenset(neighbours)
    return table


ALLOWED_TRANSITIONS: Dict[JobStatus, FrozenSet[JobStatus]] = _build_transitions()


def is_transition_allowed(current: JobStatus, requested: JobStatus) -> bool:
    return requested in ALLOWED_TRANSITIONS[current]


def check_transition(current: JobStatus, requested: JobStatus, enforce: bool) -> None:
    """Lanza `InvalidStatusTransitionError` si `enforce` y el salto no es legal."""
    if enforce and not is_transition_allowed(current, requested):
        raise InvalidStatusTransitionError(current.value, requested.value)


def describe_statuses(enforce: bool = False) -> List[dict]:
    """Lista de estados (en orden de flujo) con etiqueta, color y destinos.

    `allowed` refleja lo que el almacén acepta de verdad: con `enforce`
    apagado, cualquier otro estado.
    """
    described = []
    for status in WORKFLOW_ORDER:
        targets = ALLOWED_TRANSITIONS[status] if enforce else WORKFLOW_ORDER
        described.append(
            {
                "value": status.value,
                "label": STATUS_LABELS[status],
                "accent": STATUS_ACCENTS[status],
                "allowed": [s.value for s in WORKFLOW_ORDER if s in targets and s != status],
            }
        )
    return described
