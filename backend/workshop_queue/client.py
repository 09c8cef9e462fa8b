"""Cliente HTTP fino para el API del taller.

Equivale al helper `api` del navegador: peticiones JSON contra una URL base,
token bearer opcional y errores HTTP convertidos en `ApiError` con el
`message` que devuelve el servidor.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx


class ApiError(Exception):
    """Respuesta no-2xx (o falta de token) vista desde el cliente."""

    def __init__(self, message: str, status_code: int, data: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data


class WorkshopClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000/api/v1",
        http: Optional[httpx.Client] = None,
        access_token: Optional[str] = None,
        timeout: float = 10.0,
    ) -> None:
        # `http` permite inyectar un cliente ya configurado (p.ej. TestClient)
        self.base_url = base_url.rstrip("/")
        self.http = http or httpx.Client(timeout=timeout)
        self.access_token = access_token

    def _request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        skip_auth: bool = False,
    ) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        if not skip_auth:
            if not self.access_token:
                raise ApiError("No access token found", 401)
            headers["Authorization"] = f"Bearer {self.access_token}"

        response = self.http.request(
            method,
            f"{self.base_url}{endpoint}",
            json=json,
            params=params,
            headers=headers,
        )
        if response.is_error:
            try:
                data = response.json()
            except ValueError:
                data = None
            message = data.get("message") if isinstance(data, dict) else None
            raise ApiError(
                message or f"HTTP error! status: {response.status_code}",
                response.status_code,
                data,
            )
        return response

    def login(self, username: str, password: str) -> dict:
        """Hace login y guarda el token para las siguientes peticiones."""
        response = self._request(
            "POST",
            "/auth/login",
            json={"username": username, "password": password},
            skip_auth=True,
        )
        user = response.json()
        self.access_token = user["accessToken"]
        return user

    def logout(self) -> None:
        """Revoca el token en el servidor y lo olvida localmente."""
        if not self.access_token:
            return
        try:
            self._request("POST", "/auth/logout")
        finally:
            self.access_token = None

    def list_jobs(self, branch: Optional[str] = None) -> List[dict]:
        params = {"branch": branch} if branch else None
        return self._request("GET", "/jobs", params=params, skip_auth=True).json()

    def list_my_branch_jobs(self) -> List[dict]:
        return self._request("GET", "/jobs/my-branch").json()

    def create_job(self, job: Dict[str, Any]) -> dict:
        return self._request("POST", "/jobs", json=job, skip_auth=True).json()

    def update_job(self, job_id: int, changes: Dict[str, Any]) -> dict:
        return self._request("PATCH", f"/jobs/{job_id}", json=changes, skip_auth=True).json()

    def delete_job(self, job_id: int) -> None:
        self._request("DELETE", f"/jobs/{job_id}", skip_auth=True)

    def my_statistics(self) -> dict:
        return self._request("GET", "/branches/my-statistics").json()
