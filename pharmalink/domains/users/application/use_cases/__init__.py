"""
Users Application Use Cases
"""

from pharmalink.domains.users.application.use_cases.profile import (
    GetCurrentUserUseCase,
    GetPartnerProfileUseCase,
    UpdatePartnerProfileUseCase,
)

__all__ = ["GetCurrentUserUseCase", "GetPartnerProfileUseCase", "UpdatePartnerProfileUseCase"]
