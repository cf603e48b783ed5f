"""
Resolve the pharmacy a partner acts for.
"""

from pharmalink.core.domain import ValidationException
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.pharmacies.domain.entities import Pharmacy
from pharmalink.domains.users.application.ports import IUserRepository
from pharmalink.domains.users.domain.entities import Identity


class NoPharmacyAssociated(ValidationException):
    def __init__(self) -> None:
        super().__init__("No pharmacy associated with this account", field="pharmacyId")


async def resolve_pharmacy_id(user_repository: IUserRepository, identity: Identity) -> str | None:
    user = await user_repository.find_by_id(identity.user_id)
    return user.pharmacy_id if user else None


async def require_pharmacy(
    user_repository: IUserRepository,
    pharmacy_repository: IPharmacyRepository,
    identity: Identity,
) -> tuple[str, Pharmacy | None]:
    """
    Pharmacy ID of the acting partner and, if it still exists, the pharmacy.

    Raises:
        NoPharmacyAssociated: If the user has no pharmacy
    """
    pharmacy_id = await resolve_pharmacy_id(user_repository, identity)
    if not pharmacy_id:
        raise NoPharmacyAssociated()
    return pharmacy_id, await pharmacy_repository.find_by_id(pharmacy_id)
