"""Excepciones de dominio.

Los servicios lanzan estas excepciones y los routers las traducen a
respuestas HTTP; así los servicios no dependen de FastAPI.
"""

from __future__ import annotations


class JobNotFoundError(LookupError):
    """No existe ningún job con ese id."""

    def __init__(self, job_id: int) -> None:
        super().__init__(f"Job with id {job_id} not found")
        self.job_id = job_id


class InvalidStatusTransitionError(ValueError):
    """Salto de estado no permitido por la tabla de transiciones."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(f"Cannot move a job from '{current}' to '{requested}'")
        self.current = current
        self.requested = requested


class JobValidationError(ValueError):
    """Payload rechazado; guarda el primer campo que falló."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class AuthenticationError(Exception):
    """Credenciales o token inválidos. El mensaje nunca da detalles."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)
        self.message = message
