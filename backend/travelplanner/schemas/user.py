"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, field_validator, model_validator
from typing import Optional
from datetime import datetime
from travelplanner.core.utils import sanitize_input, validate_input


class UserBase(BaseModel):
    """Base user schema."""
    email: EmailStr


class UserCreate(UserBase):
    """Schema for user sign-up."""
    first_name: str
    last_name: str
    password: str
    confirm_password: str
    terms_agreed: bool = False

    @field_validator("first_name")
    @classmethod
    def check_first_name(cls, v):
        if not validate_input(v, "text", 50):
            raise ValueError("Please enter a valid first name")
        return sanitize_input(v)

    @field_validator("last_name")
    @classmethod
    def check_last_name(cls, v):
        if not validate_input(v, "text", 50):
            raise ValueError("Please enter a valid last name")
        return sanitize_input(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v):
        if not v or len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v

    @model_validator(mode="after")
    def check_confirmation(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        if not self.terms_agreed:
            raise ValueError("Please agree to the terms and conditions")
        return self


class UserResponse(UserBase):
    """Schema for user response."""
    id: int
    display_name: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for email/password sign-in."""
    email: EmailStr
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"


class PasswordResetRequest(BaseModel):
    """Schema for requesting a password reset."""
    email: EmailStr


class PasswordResetConfirm(BaseModel):
    """Schema for completing a password reset."""
    token: str
    new_password: str

    @field_validator("new_password")
    @classmethod
    def check_password(cls, v):
        if not v or len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v


class PasswordResetResponse(BaseModel):
    """Reset acknowledgement; the token is only echoed in debug mode."""
    message: str
    reset_token: Optional[str] = None
