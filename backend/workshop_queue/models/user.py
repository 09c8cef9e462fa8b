"""Modelos de usuario y de login."""

from __future__ import annotations

from workshop_queue.core.enums import UserRole
from workshop_queue.models.base import CamelModel


class UserCreate(CamelModel):
    username: str
    password: str  # Texto plano, se compara por igualdad exacta
    branch: str
    role: UserRole = UserRole.STAFF


class User(UserCreate):
    id: int


class UserPublic(CamelModel):
    """Lo que se puede enseñar de un usuario (sin contraseña)."""

    id: int
    username: str
    branch: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(id=user.id, username=user.username, branch=user.branch, role=user.role)


class LoginRequest(CamelModel):
    username: str
    password: str


class LoginResponse(UserPublic):
    access_token: str
