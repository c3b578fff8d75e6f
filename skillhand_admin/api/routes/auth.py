"""
Admin login endpoints.
"""

from fastapi import APIRouter, HTTPException, status

from skillhand_admin.api.dependencies import AuthSessionDep, CurrentUserDep
from skillhand_admin.api.schemas.auth import LoginRequest, UserResponse
from skillhand_admin.api.schemas.common import BaseResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, session: AuthSessionDep):
    """Log in as a built-in account type."""
    try:
        user = session.login(body.user_type)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserResponse.from_entity(user)


@router.post("/logout", response_model=BaseResponse)
async def logout(session: AuthSessionDep, user: CurrentUserDep):
    session.logout()
    return BaseResponse(message="Logged out")


@router.get("/me", response_model=UserResponse)
async def me(user: CurrentUserDep):
    """Currently logged-in admin."""
    return UserResponse.from_entity(user)
