"""Carga de configuración de la aplicación.

Usa `pydantic-settings` para leer valores desde `.env` o variables de
entorno. Cada campo lleva un comentario corto sobre para qué sirve.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from workshop_queue.core.enums import StorageBackend


class Settings(BaseSettings):
    """Contenedor tipado para todas las opciones configurables."""

    app_name: str = "Workshop Queue API"
    environment: str = "development"

    # CORS
    allowed_origins: list[str] = ["*"]
    allow_credentials: bool = False

    # Valor de sucursal que significa "todas" al listar o agregar
    all_branches_label: str = "All Branches"

    # Si es True, sólo se permiten los saltos de estado de ALLOWED_TRANSITIONS
    enforce_status_transitions: bool = False

    # Usuarios y jobs de ejemplo al arrancar con los almacenes vacíos
    seed_demo_data: bool = True

    # "memory" (por defecto) o "blob" (JSON en disco bajo data_dir)
    storage_backend: StorageBackend = StorageBackend.MEMORY
    data_dir: Path = Path("data/workshop")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache
def get_settings() -> Settings:
    """Crea (y memoriza) la configuración de forma perezosa.

    Sólo se construye una instancia por proceso. También normalizamos la
    lista de orígenes permitidos para CORS cuando llega como cadena separada
    por comas.
    """

    settings = Settings()
    # Accept comma separated `ALLOWED_ORIGINS` env value as a string
    ao = settings.allowed_origins
    if isinstance(ao, str):
        settings.allowed_origins = [s.strip() for s in ao.split(",") if s.strip()]
    return settings
