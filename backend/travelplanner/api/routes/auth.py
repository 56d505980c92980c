"""
Authentication routes for sign-up, sign-in, sign-out and password reset.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
import logging
from travelplanner.db.session import get_db
from travelplanner.schemas.user import (
    UserCreate, UserLogin, Token, UserResponse,
    PasswordResetRequest, PasswordResetConfirm, PasswordResetResponse
)
from travelplanner.models.user import User
from travelplanner.core.config import settings
from travelplanner.core.security import (
    verify_password, get_password_hash, create_access_token, decode_access_token,
    create_password_reset_token, verify_password_reset_token, password_fingerprint
)
from travelplanner.api.dependencies import security

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    email = user_data.email.lower()
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An account with this email already exists."
        )

    new_user = User(
        email=email,
        display_name=f"{user_data.first_name} {user_data.last_name}",
        hashed_password=get_password_hash(user_data.password)
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"User {new_user.id} signed up")
    return new_user


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Sign in with email and password and get a JWT token."""
    user = db.query(User).filter(User.email == credentials.email.lower()).first()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No account found with this email address."
        )
    if not verify_password(credentials.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password. Please try again."
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive"
        )

    access_token = create_access_token(data={"sub": user.email, "user_id": user.id})
    return {"access_token": access_token, "token_type": "bearer"}


@router.post("/logout")
async def logout(credentials: HTTPAuthorizationCredentials = Depends(security)):
    """Sign out (the client discards its token)."""
    decoded = decode_access_token(credentials.credentials)
    if not decoded:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    return {"message": "Signed out successfully"}


@router.post("/password-reset", response_model=PasswordResetResponse)
async def request_password_reset(request: PasswordResetRequest, db: Session = Depends(get_db)):
    """
    Issue a password reset token.

    Delivery is out of band: the token is logged, and returned in the
    response only when DEBUG is enabled.
    """
    user = db.query(User).filter(User.email == request.email.lower()).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No account found with this email address."
        )

    token = create_password_reset_token(user.email, user.hashed_password)
    logger.info(f"Password reset requested for user {user.id}")
    if settings.DEBUG:
        logger.debug(f"Password reset token for {user.email}: {token}")

    return {
        "message": "Password reset email sent! Check your inbox.",
        "reset_token": token if settings.DEBUG else None
    }


@router.post("/password-reset/confirm")
async def confirm_password_reset(data: PasswordResetConfirm, db: Session = Depends(get_db)):
    """Set a new password using a reset token. Each token works once."""
    invalid_token = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Invalid or expired reset token"
    )
    payload = verify_password_reset_token(data.token)
    if not payload:
        raise invalid_token

    user = db.query(User).filter(User.email == payload["sub"]).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No account found with this email address."
        )
    if payload.get("pwd") != password_fingerprint(user.hashed_password):
        raise invalid_token

    user.hashed_password = get_password_hash(data.new_password)
    db.commit()
    logger.info(f"Password reset completed for user {user.id}")
    return {"message": "Password updated successfully"}
