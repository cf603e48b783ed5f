"""
API Dependencies

Authentication and role checks shared by every domain router, plus the
session and container dependencies.
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from pharmalink.core.container import DependencyContainer, get_container
from pharmalink.core.domain import AuthenticationException, AuthorizationException
from pharmalink.database.async_db import get_async_db
from pharmalink.domains.users.domain.entities import Identity, UserRole
from pharmalink.integrations.identity import JWTIdentityVerifier, get_identity_verifier

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_async_db)]


def get_di_container() -> DependencyContainer:
    return get_container()


Container = Annotated[DependencyContainer, Depends(get_di_container)]


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    verifier: Annotated[JWTIdentityVerifier, Depends(get_identity_verifier)],
) -> Identity:
    """
    Verify the bearer token of the request.

    Raises:
        AuthenticationException: If the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("No token provided")
    return verifier.verify(credentials.credentials)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]


def require_role(*roles: UserRole):
    """Dependency factory: the caller's role must be one of `roles`."""

    async def dependency(identity: CurrentIdentity) -> Identity:
        if identity.role not in roles:
            logger.info(f"{identity.user_id} ({identity.role.value}) denied; requires {[r.value for r in roles]}")
            raise AuthorizationException("access", resource=f"role:{'|'.join(r.value for r in roles)}")
        return identity

    return dependency


CustomerIdentity = Annotated[Identity, Depends(require_role(UserRole.CUSTOMER))]
PartnerIdentity = Annotated[Identity, Depends(require_role(UserRole.PARTNER))]
AgentIdentity = Annotated[Identity, Depends(require_role(UserRole.AGENT))]
