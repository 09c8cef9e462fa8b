"""Usuarios del taller y sesiones de login.

Las contraseñas se comparan tal cual (sin hash). Un login correcto emite un
token opaco que el cliente envía como `Authorization: Bearer <token>`.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional
from uuid import uuid4

from workshop_queue.core.errors import AuthenticationError
from workshop_queue.models.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._sessions: Dict[str, int] = {}

    def create_user(self, payload: UserCreate) -> User:
        """Crea un usuario; el nombre de usuario debe ser único."""
        if self.get_user_by_username(payload.username) is not None:
            raise ValueError(f"Username already exists: {payload.username}")
        user = User(**payload.model_dump(), id=self._next_id)
        self._next_id += 1
        self._users[user.id] = user
        return user.model_copy()

    def get_user(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user.model_copy()
        return None

    def count(self) -> int:
        return len(self._users)

    def authenticate(self, username: str, password: str) -> User:
        """Devuelve el usuario si las credenciales coinciden exactamente."""
        user = self.get_user_by_username(username)
        if user is None or user.password != password:
            logger.warning("Rejected login for %r", username)
            raise AuthenticationError()
        return user

    def issue_token(self, user: User) -> str:
        """Token nuevo para `user`; uno por login, hasta `revoke_token`."""
        token = uuid4().hex
        self._sessions[token] = user.id
        return token

    def user_for_token(self, token: str) -> User:
        user_id = self._sessions.get(token)
        user = self.get_user(user_id) if user_id is not None else None
        if user is None:
            raise AuthenticationError("Invalid or expired token")
        return user

    def revoke_token(self, token: str) -> None:
        """Cierra la sesión del token. Un token desconocido no hace nada."""
        self._sessions.pop(token, None)
