"""
Bearer Token Verification

Tokens are issued by the external identity provider; this side only checks
signature, expiry and (optionally) audience, then reads the claims.

Claims used:
- `uid` or `sub`: provider user id (required)
- `phone_number`: becomes the user id when present
- `role`: customer (default), partner or agent
- `email`, `name`: optional profile hints
"""

import logging
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from pharmalink.config.settings import Settings, get_settings
from pharmalink.core.domain import AuthenticationException
from pharmalink.domains.users.domain.entities import Identity, UserRole

logger = logging.getLogger(__name__)


class JWTIdentityVerifier:
    def __init__(self, secret: str, algorithm: str = "HS256", audience: str | None = None):
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTIdentityVerifier":
        return cls(
            secret=settings.IDENTITY_JWT_SECRET,
            algorithm=settings.IDENTITY_JWT_ALGORITHM,
            audience=settings.IDENTITY_JWT_AUDIENCE,
        )

    def decode(self, token: str) -> dict[str, Any]:
        """
        Verify and decode a token.

        Raises:
            AuthenticationException: If the token is expired or invalid
        """
        options = {"verify_aud": self._audience is not None}
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options=options,
            )
        except ExpiredSignatureError as e:
            raise AuthenticationException("Token expired") from e
        except JWTError as e:
            logger.debug(f"Token rejected: {e}")
            raise AuthenticationException("Invalid token") from e

    def verify(self, token: str) -> Identity:
        claims = self.decode(token)

        uid = claims.get("uid") or claims.get("sub")
        if not uid:
            raise AuthenticationException("Token has no subject")

        return Identity(
            uid=str(uid),
            phone=claims.get("phone_number") or None,
            role=UserRole.from_claim(claims.get("role")),
            email=claims.get("email"),
            name=claims.get("name"),
        )


_verifier: JWTIdentityVerifier | None = None


def get_identity_verifier() -> JWTIdentityVerifier:
    global _verifier
    if _verifier is None:
        _verifier = JWTIdentityVerifier.from_settings(get_settings())
    return _verifier
