"""Almacén clave-valor de blobs JSON en disco.

Cumple el papel que tiene `localStorage` en el cliente: cada clave guarda
un documento JSON completo. Las rutas son seguras para el sistema de
archivos.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class BlobStore:
    """Simple filesystem-based key-value store for JSON blobs."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_key(self, key: str) -> Path:
        """Construye una ruta segura para un identificador arbitrario."""
        # Avoid problematic characters in filenames
        safe_key = key.replace(":", "_").replace("/", "_")
        return self.base_dir / f"{safe_key}.json"

    def get(self, key: str) -> Any | None:
        """Lee el blob de `key`, o None si no existe o está corrupto."""
        path = self._path_for_key(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            logger.warning("Ignoring unreadable blob %s", path)
            return None

    def set(self, key: str, value: Any) -> None:
        """Guarda `value` como JSON. Escribe a un temporal y renombra."""
        path = self._path_for_key(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(value), encoding="utf-8")
        tmp_path.replace(path)

    def delete(self, key: str) -> None:
        self._path_for_key(key).unlink(missing_ok=True)
