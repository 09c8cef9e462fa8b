"""Enumeraciones compartidas que describen estados, roles y backends."""

from enum import Enum


class JobStatus(str, Enum):
    """Estados posibles de un vehículo dentro del taller."""

    CHECKED_IN = "checked-in"
    IN_DIAGNOSTICS = "in-diagnostics"
    WAITING_FOR_PARTS = "waiting-for-parts"
    WORK_IN_PROGRESS = "work-in-progress"
    READY_FOR_PICKUP = "ready-for-pickup"


class UserRole(str, Enum):
    """Rol del usuario; el superadmin ve todas las sucursales."""

    STAFF = "staff"
    SUPERADMIN = "superadmin"


class StorageBackend(str, Enum):
    """Dónde vive la lista de jobs."""

    MEMORY = "memory"
    BLOB = "blob"  # JSON en disco, ver BlobJobService
