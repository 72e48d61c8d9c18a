"""API dependencies including authentication."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from cms_admin.db import get_db
from cms_admin.schemas.auth import AdminResponse
from cms_admin.services.auth import CREDENTIALS_PROVIDER, auth_service


async def get_current_admin(request: Request) -> AdminResponse:
    """Dependency to get the signed-in operator from the access token cookie."""
    token = request.cookies.get("access_token")

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    payload = auth_service.verify_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    email = payload.get("sub")
    if not email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    if payload.get("role") != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    return AdminResponse(
        email=email,
        name=payload.get("name"),
        provider=payload.get("provider", CREDENTIALS_PROVIDER),
    )


CurrentAdmin = Annotated[AdminResponse, Depends(get_current_admin)]
DBSession = Annotated[AsyncSession, Depends(get_db)]
