"""
Unit tests for user registration on first sight and partner profiles.
"""

import pytest

from pharmalink.core.domain import AuthenticationException, ValidationException
from pharmalink.domains.users.application.use_cases import (
    GetCurrentUserUseCase,
    GetPartnerProfileUseCase,
    UpdatePartnerProfileUseCase,
)
from pharmalink.domains.users.domain.entities import Identity, UserRole


@pytest.mark.unit
class TestIdentity:
    def test_user_id_prefers_phone(self):
        assert Identity(uid="firebase-uid", phone="+919800000001").user_id == "+919800000001"

    def test_user_id_falls_back_to_uid(self):
        assert Identity(uid="firebase-uid").user_id == "firebase-uid"

    @pytest.mark.parametrize(
        "claim,role",
        [(None, UserRole.CUSTOMER), ("Partner", UserRole.PARTNER), ("agent", UserRole.AGENT)],
    )
    def test_role_claim(self, claim, role):
        assert UserRole.from_claim(claim) == role

    def test_unknown_role_claim(self):
        with pytest.raises(AuthenticationException):
            UserRole.from_claim("admin")


@pytest.mark.unit
@pytest.mark.use_case
class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_registers_on_first_sight(self, user_repository, customer):
        user = await GetCurrentUserUseCase(user_repository).execute(customer)

        assert user.id == customer.user_id
        assert user.role == UserRole.CUSTOMER
        assert customer.user_id in user_repository.rows

    @pytest.mark.asyncio
    async def test_returns_existing_record(self, user_repository, partner_with_pharmacy):
        user = await GetCurrentUserUseCase(user_repository).execute(partner_with_pharmacy)

        assert user.pharmacy_id == "ph-1"


@pytest.mark.unit
@pytest.mark.use_case
class TestPartnerProfile:
    @pytest.mark.asyncio
    async def test_profile_includes_linked_pharmacy(self, user_repository, pharmacy_repository, partner_with_pharmacy):
        profile = await GetPartnerProfileUseCase(user_repository, pharmacy_repository).execute(partner_with_pharmacy)

        assert profile["user"]["pharmacyId"] == "ph-1"
        assert profile["pharmacy"]["name"] == "City Pharmacy"

    @pytest.mark.asyncio
    async def test_profile_without_pharmacy(self, user_repository, pharmacy_repository, partner):
        profile = await GetPartnerProfileUseCase(user_repository, pharmacy_repository).execute(partner)

        assert "pharmacy" not in profile

    @pytest.mark.asyncio
    async def test_update_ignores_protected_fields(self, user_repository, partner_with_pharmacy):
        use_case = UpdatePartnerProfileUseCase(user_repository)

        user = await use_case.execute(
            partner_with_pharmacy,
            {"name": "Dr. Rao", "bio": "20 years in retail pharmacy", "role": "agent", "pharmacy_id": "ph-9"},
        )

        assert user.name == "Dr. Rao"
        assert user.profile["bio"] == "20 years in retail pharmacy"
        assert user.role == UserRole.PARTNER
        assert user.pharmacy_id == "ph-1"

    @pytest.mark.asyncio
    async def test_update_needs_a_valid_field(self, user_repository, partner):
        with pytest.raises(ValidationException):
            await UpdatePartnerProfileUseCase(user_repository).execute(partner, {"role": "agent"})
