"""
Users Infrastructure Repositories
"""

from pharmalink.domains.users.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

__all__ = ["SQLAlchemyUserRepository"]
