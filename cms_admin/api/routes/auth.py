"""Authentication routes.

Operators sign in with Google (allow-listed emails only) or with the admin
credentials fallback. Both paths end with HTTP-only JWT cookies.
"""

import logging

import httpx
from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from cms_admin.api.deps import CurrentAdmin, DBSession
from cms_admin.config import settings
from cms_admin.schemas.auth import (
    AdminResponse,
    CredentialsLogin,
    GoogleAuthURL,
    GoogleCallbackRequest,
)
from cms_admin.services.auth import (
    ADMIN_IDENTITY,
    CREDENTIALS_PROVIDER,
    GOOGLE_PROVIDER,
    auth_service,
)
from cms_admin.services.google_oauth import google_oauth_client
from cms_admin.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Cookie settings
ACCESS_TOKEN_MAX_AGE = 1800  # 30 minutes
REFRESH_TOKEN_MAX_AGE = 604800  # 7 days


def set_auth_cookies(response: Response, access_token: str, refresh_token: str) -> None:
    """Set HTTP-only authentication cookies."""
    response.set_cookie(
        key="access_token",
        value=access_token,
        httponly=True,
        secure=not settings.is_development,  # True for HTTPS in production
        samesite="lax",
        max_age=ACCESS_TOKEN_MAX_AGE,
        path="/",
    )
    response.set_cookie(
        key="refresh_token",
        value=refresh_token,
        httponly=True,
        secure=not settings.is_development,  # True for HTTPS in production
        samesite="lax",
        max_age=REFRESH_TOKEN_MAX_AGE,
        path="/",
    )


def clear_auth_cookies(response: Response) -> None:
    """Clear authentication cookies."""
    response.delete_cookie(key="access_token", path="/")
    response.delete_cookie(key="refresh_token", path="/")


def session_rejected(detail: str) -> JSONResponse:
    """401 that also clears the session cookies."""
    response = JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": detail},
    )
    clear_auth_cookies(response)
    return response


def issue_session(response: Response, email: str, name: str | None, provider: str) -> AdminResponse:
    """Set fresh cookies and describe the signed-in operator."""
    access_token = auth_service.create_access_token(email, name, provider)
    refresh_token = auth_service.create_refresh_token(email, name, provider)
    set_auth_cookies(response, access_token, refresh_token)
    return AdminResponse(email=email, name=name, provider=provider)


@router.post("/login", response_model=AdminResponse)
async def login(credentials: CredentialsLogin, response: Response) -> AdminResponse:
    """Sign in with the admin credentials fallback."""
    if not auth_service.verify_admin_credentials(credentials.username, credentials.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    return issue_session(
        response,
        ADMIN_IDENTITY["email"],
        ADMIN_IDENTITY["name"],
        CREDENTIALS_PROVIDER,
    )


@router.get("/google/url", response_model=GoogleAuthURL)
async def get_google_auth_url() -> GoogleAuthURL:
    """Get the Google consent URL."""
    return GoogleAuthURL(auth_url=google_oauth_client.get_authorization_url())


@router.post("/google/callback", response_model=AdminResponse)
async def google_callback(
    request: GoogleCallbackRequest,
    response: Response,
    db: DBSession,
) -> AdminResponse:
    """Exchange the Google code, check the allow-list and start a session."""
    try:
        token_data = await google_oauth_client.exchange_code_for_token(request.code)
        profile = await google_oauth_client.get_user_info(token_data["access_token"])
    except (httpx.HTTPError, KeyError) as e:
        logger.error(f"Google sign-in failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to complete Google sign-in",
        )

    email = profile.get("email")
    if not auth_service.is_allowed_email(email):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This Google account is not allowed",
        )

    user = await UserRepository(db).get_or_create(email, profile.get("name"))
    return issue_session(response, user.email, user.name, GOOGLE_PROVIDER)


@router.post("/refresh", response_model=AdminResponse)
async def refresh_token(request: Request, response: Response) -> AdminResponse:
    """Refresh access token using refresh token from cookie."""
    refresh_token_value = request.cookies.get("refresh_token")

    if not refresh_token_value:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No refresh token provided",
        )

    payload = auth_service.verify_refresh_token(refresh_token_value)

    if payload is None or not payload.get("sub"):
        return session_rejected("Invalid or expired refresh token")

    provider = payload.get("provider", CREDENTIALS_PROVIDER)
    # Google operators removed from the allow-list lose access at the next refresh
    if provider == GOOGLE_PROVIDER and not auth_service.is_allowed_email(payload["sub"]):
        return session_rejected("This Google account is no longer allowed")

    return issue_session(response, payload["sub"], payload.get("name"), provider)


@router.post("/logout")
async def logout(response: Response) -> dict:
    """Logout and clear authentication cookies."""
    clear_auth_cookies(response)
    return {"message": "Successfully logged out"}


@router.get("/me", response_model=AdminResponse)
async def get_current_admin_info(current_admin: CurrentAdmin) -> AdminResponse:
    """Get the signed-in operator."""
    return current_admin
