"""Bearer-token authentication for profile routes."""

from functools import lru_cache
from typing import Annotated

import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import IAuthProvider, TokenUser

logger = structlog.get_logger()

bearer_scheme = HTTPBearer(auto_error=False, description="JWT issued at login")


@lru_cache
def get_auth_provider() -> IAuthProvider:
    """Shared token verifier configured from settings."""
    return JWTAuthProvider()


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth_provider: Annotated[IAuthProvider, Depends(get_auth_provider)],
) -> TokenUser:
    """Resolve the calling account from its bearer token.

    The account id is bound to the request's log context so every later
    log line for the request carries it.

    Raises:
        AuthenticationError: no token was sent, or it does not verify
    """
    if credentials is None:
        logger.info("auth_rejected", reason="missing_token")
        raise AuthenticationError(
            message="No token, authorization denied",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    user = await auth_provider.validate_token(credentials.credentials)
    if user is None:
        logger.info("auth_rejected", reason="invalid_token")
        raise AuthenticationError(
            message="Token is not valid",
            error_code=ErrorCode.INVALID_TOKEN,
        )

    structlog.contextvars.bind_contextvars(user_id=str(user.id))
    return user


CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
