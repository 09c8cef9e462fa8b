"""Definición del modelo de datos de un Job (ticket de servicio).

Un job representa un vehículo que entra al taller y avanza por los estados
de `JobStatus` hasta que el cliente lo recoge. Hay tres modelos:

- `JobCreate`: payload de alta, validado con las reglas compartidas.
- `JobUpdate`: actualización parcial; sólo campos mutables.
- `Job`: registro completo tal como lo guarda y devuelve el almacén.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ValidationInfo, field_validator

from workshop_queue.core.enums import JobStatus
from workshop_queue.core.validation import enforce_rule
from workshop_queue.models.base import CamelModel

_RULED_FIELDS = ("reg_number", "customer_name", "service_type", "brand", "branch")


class JobCreate(CamelModel):
    """Datos que aporta el cliente al dar de alta un vehículo."""

    queue_number: Optional[int] = None  # Si falta, el almacén asigna uno por sucursal
    reg_number: str
    customer_name: str
    service_type: str
    brand: str
    status: JobStatus
    branch: str
    is_priority: bool = False

    @field_validator(*_RULED_FIELDS)
    @classmethod
    def check_min_length(cls, value: str, info: ValidationInfo) -> str:
        return enforce_rule(info.field_name, value)

    @field_validator("is_priority", mode="before")
    @classmethod
    def null_priority_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class JobUpdate(CamelModel):
    """Actualización parcial. `id`, `createdAt` y `branch` no se aceptan."""

    queue_number: Optional[int] = None
    reg_number: Optional[str] = None
    customer_name: Optional[str] = None
    service_type: Optional[str] = None
    brand: Optional[str] = None
    status: Optional[JobStatus] = None
    is_priority: Optional[bool] = None

    @field_validator(*_RULED_FIELDS[:-1])
    @classmethod
    def check_min_length(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if value is None:
            return value
        return enforce_rule(info.field_name, value)

    def changes(self) -> Dict[str, Any]:
        """Sólo los campos que el cliente envió con un valor."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class Job(CamelModel):
    """Registro completo de un job."""

    id: int
    queue_number: int
    reg_number: str
    customer_name: str
    service_type: str
    brand: str
    status: JobStatus
    branch: str
    is_priority: bool = False
    created_at: datetime
