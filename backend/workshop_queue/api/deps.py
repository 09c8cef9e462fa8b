"""Dependencias de FastAPI: acceso a los almacenes y al usuario actual.

Los almacenes se crean una vez en `create_app()` y viven en `app.state`;
los handlers los reciben por inyección en vez de importar un global.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from workshop_queue.core.errors import AuthenticationError
from workshop_queue.models.user import User
from workshop_queue.services.job_service import JobService
from workshop_queue.services.user_service import UserService


def get_job_service(request: Request) -> JobService:
    return request.app.state.job_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    """Extrae el token de `Authorization: Bearer <token>`."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No access token found",
        )
    return token.strip()


def get_current_user(request: Request, token: str = Depends(get_bearer_token)) -> User:
    """Resuelve el usuario dueño del token."""
    try:
        return get_user_service(request).user_for_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )
