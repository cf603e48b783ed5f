from pharmalink.integrations.identity.jwt_verifier import JWTIdentityVerifier, get_identity_verifier

__all__ = ["JWTIdentityVerifier", "get_identity_verifier"]
