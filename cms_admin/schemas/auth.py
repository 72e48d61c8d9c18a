"""Pydantic schemas for authentication."""

from pydantic import BaseModel


class CredentialsLogin(BaseModel):
    """Schema for the username/password fallback."""

    username: str
    password: str


class GoogleAuthURL(BaseModel):
    """Schema for Google OAuth URL response."""

    auth_url: str


class GoogleCallbackRequest(BaseModel):
    """Schema for Google OAuth callback."""

    code: str


class AdminResponse(BaseModel):
    """Schema for the signed-in operator."""

    email: str
    name: str | None = None
    provider: str
    role: str = "admin"
