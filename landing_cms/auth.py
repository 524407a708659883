"""
Landing CMS - Editor Authentication

Single-editor authentication.  The username and password are read from
environment variables (AUTH_USERNAME / AUTH_PASSWORD) and are the only
credentials checked anywhere: the JSON login endpoint and the Basic-Auth
gate on mutating routes both go through `verify_credentials`.

There are no sessions; every mutating request carries its credentials.  How
a request is authenticated is decided by the `AuthStrategy` stored on
``app.state.auth_strategy``, so the scheme can change without touching
route code.

Usage:
    - Add `require_auth` as a dependency on protected routes.
    - Call `verify_credentials(username, password)` for explicit checks.
"""

import hmac
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic
from loguru import logger

from landing_cms.config import AUTH_PASSWORD, AUTH_USERNAME


def verify_credentials(username: str, password: str) -> bool:
    """Verify credentials against the configured values."""
    if not AUTH_PASSWORD:
        return False

    user_ok = hmac.compare_digest(username.encode("utf-8"), AUTH_USERNAME.encode("utf-8"))
    pass_ok = hmac.compare_digest(password.encode("utf-8"), AUTH_PASSWORD.encode("utf-8"))
    return user_ok and pass_ok


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


class AuthStrategy:
    """Resolve the editor behind a request, or None if not authenticated."""

    async def __call__(self, request: Request) -> Optional[str]:
        raise NotImplementedError


class BasicAuthStrategy(AuthStrategy):
    """HTTP Basic credentials checked against the configured editor account."""

    def __init__(self) -> None:
        self._scheme = HTTPBasic(auto_error=False)

    async def __call__(self, request: Request) -> Optional[str]:
        try:
            credentials = await self._scheme(request)
        except HTTPException:
            # Header present but not decodable as base64 "user:pass"
            return None

        if credentials is None:
            return None

        if verify_credentials(credentials.username, credentials.password):
            return credentials.username

        logger.warning("🔒 Rejected credentials for '{}'", credentials.username)
        return None


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def get_auth_strategy(request: Request) -> AuthStrategy:
    """Return the strategy configured on the application."""
    return request.app.state.auth_strategy


async def require_auth(
    request: Request,
    strategy: AuthStrategy = Depends(get_auth_strategy),
) -> str:
    """Dependency for mutating routes: return the editor or raise 401."""
    user = await strategy(request)
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
