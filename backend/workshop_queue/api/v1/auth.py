from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from workshop_queue.api.deps import get_bearer_token, get_current_user, get_user_service
from workshop_queue.core.errors import AuthenticationError
from workshop_queue.models.user import LoginRequest, LoginResponse, User, UserPublic
from workshop_queue.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse, summary="Log in with username and password")
async def login(
    payload: LoginRequest,
    user_service: UserService = Depends(get_user_service),
) -> LoginResponse:
    try:
        user = user_service.authenticate(payload.username, payload.password)
    except AuthenticationError:
        # Mismo mensaje para usuario inexistente y contraseña errónea
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    public = UserPublic.from_user(user)
    return LoginResponse(**public.model_dump(), access_token=user_service.issue_token(user))


@router.get("/me", response_model=UserPublic, summary="Current user")
async def me(user: User = Depends(get_current_user)) -> UserPublic:
    return UserPublic.from_user(user)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Revoke the caller's access token",
)
async def logout(
    token: str = Depends(get_bearer_token),
    user_service: UserService = Depends(get_user_service),
) -> Response:
    user_service.revoke_token(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
