from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from sqlmodel import Session

from app.config import Settings, get_app_settings
from app.database import get_database, get_session
from app.models.user import User
from app.schemas.user_schemas import AuthResponse, PublicUser, UserLogin, UserRegister
from app.services.auth_service import login_user, record_last_login, register_user

router = APIRouter()


def public_user(user: User) -> PublicUser:
    return PublicUser(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
    )


# -------- AUTH ROUTES --------

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserRegister,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    token, user = register_user(session, payload, settings)
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=public_user(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    payload: UserLogin,
    request: Request,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
):
    token, user = login_user(session, payload, settings)

    background_tasks.add_task(record_last_login, get_database(request), user.id)

    return AuthResponse(
        message="Login successful",
        token=token,
        user=public_user(user),
    )
