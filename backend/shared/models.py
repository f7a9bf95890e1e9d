"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class AuthenticatedUser(BaseModel):
    """
    The caller of a request, built from verified Supabase JWT claims.

    Stripe customers are looked up by email, so a user without an email
    never gets this far (see AuthService.validate_token).
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: EmailStr = Field(..., description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")

    role: str = Field(default="user", description="Supabase role claim")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
