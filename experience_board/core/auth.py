"""
Shared-secret authentication.

Provides:
- require_admin: bearer token must equal ADMIN_PASSWORD
- require_cron: bearer token must equal CRON_SECRET

There are no user accounts. An unset secret locks its endpoints.
"""

import secrets
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from experience_board.core.config import Settings, get_settings
from experience_board.core.errors import AuthError

# Bearer token extractor; missing header is handled here, not by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


def secret_matches(credentials: Optional[HTTPAuthorizationCredentials], secret: str) -> bool:
    """Constant-time comparison of the presented token against the secret."""
    if not secret or credentials is None:
        return False
    return secrets.compare_digest(
        credentials.credentials.encode("utf-8"), secret.encode("utf-8")
    )


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    FastAPI dependency - reject the request unless it carries the admin secret.

    Usage:
        router = APIRouter(dependencies=[Depends(require_admin)])
    """
    if not secret_matches(credentials, settings.admin_password):
        raise AuthError()


async def require_cron(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> None:
    """FastAPI dependency - reject the request unless it carries the cron secret."""
    if not secret_matches(credentials, settings.cron_secret):
        raise AuthError()
