"""Frontera de validación entre el exterior y el almacén.

`parse_job_create` / `parse_job_update` validan un payload crudo (claves
camelCase o snake_case) y, si falla, lanzan `JobValidationError` con el
primer campo que falló. Nada se aplica parcialmente: o el payload entero es
válido o el almacén no lo ve.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from pydantic import ValidationError

from workshop_queue.core.errors import JobValidationError
from workshop_queue.models.job import JobCreate, JobUpdate

# Segmentos de `loc` que indican el origen del dato, no el campo
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def first_validation_error(errors: Sequence[Mapping[str, Any]]) -> JobValidationError:
    """Convierte la primera entrada de `errors()` en un `JobValidationError`."""
    if not errors:
        return JobValidationError(field="", message="Invalid request")

    error = errors[0]
    loc = [str(part) for part in error.get("loc", ())]
    if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    return JobValidationError(field=".".join(loc), message=str(error.get("msg", "Invalid value")))


def parse_job_create(payload: Mapping[str, Any]) -> JobCreate:
    try:
        return JobCreate.model_validate(dict(payload))
    except ValidationError as e:
        raise first_validation_error(e.errors()) from e


def parse_job_update(payload: Mapping[str, Any]) -> JobUpdate:
    try:
        return JobUpdate.model_validate(dict(payload))
    except ValidationError as e:
        raise first_validation_error(e.errors()) from e
