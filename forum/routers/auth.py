# routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from forum.database import get_db
from forum.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserSummary
from forum.utils.auth import register_user, verify_credentials

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    user = register_user(db, user_data.email, user_data.password)
    return AuthResponse(
        result="success",
        message="New user created successfully.",
        user=UserSummary(user_id=user.id, is_admin=user.is_admin),
    )


@router.post("/login", response_model=AuthResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Bad credentials answer 200 with a fail result"""
    user = verify_credentials(db, credentials.email, credentials.password)
    if not user:
        return AuthResponse(
            result="fail",
            message="Bad credentials. Login failed!",
            user=UserSummary(),
        )

    return AuthResponse(
        result="success",
        message="Login successfully.",
        user=UserSummary(user_id=user.id, is_admin=user.is_admin),
    )
