"""
Registration and login endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session as DBSession

from ..dependencies import get_auth_service, get_db
from ..services.auth_service import AuthService
from ..shared.api import get_current_user
from .dto.requests.auth_requests import LoginRequest, RegisterRequest
from .dto.responses.auth_responses import LoginResponse, UserResponse

router = APIRouter()


@router.post("/auth/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    db: DBSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Create a new account."""
    user = auth_service.register(
        db, name=request.name, email=request.email, password=request.password
    )
    db.commit()
    return UserResponse.from_entity(user)


@router.post("/auth/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    db: DBSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Exchange email and password for an access token."""
    token, user = auth_service.login(db, email=request.email, password=request.password)
    return LoginResponse(token=token, user=UserResponse.from_entity(user))


@router.get("/auth/me", response_model=UserResponse)
def get_me(
    user: dict = Depends(get_current_user),
    db: DBSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Return the account behind the current token."""
    return UserResponse.from_entity(auth_service.get_user(db, user.get("id")))
