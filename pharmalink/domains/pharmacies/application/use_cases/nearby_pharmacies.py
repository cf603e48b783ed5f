"""
Nearby Pharmacies Use Case
"""

import logging

from pharmalink.core.domain import ValidationException
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.pharmacies.domain.entities import DEFAULT_SEARCH_RADIUS_KM, NearbyPharmacy
from pharmalink.domains.pharmacies.domain.value_objects import PharmacyStatus

logger = logging.getLogger(__name__)


class FindNearbyPharmaciesUseCase:
    """
    Verified pharmacies within a radius of a point, closest first.

    Scans every verified pharmacy and filters by great-circle distance;
    there is no spatial index.
    """

    def __init__(self, pharmacy_repository: IPharmacyRepository, default_radius_km: float = DEFAULT_SEARCH_RADIUS_KM):
        self.pharmacy_repo = pharmacy_repository
        self.default_radius_km = default_radius_km

    async def execute(
        self,
        latitude: float | None,
        longitude: float | None,
        radius_km: float | None = None,
    ) -> list[NearbyPharmacy]:
        """
        Args:
            latitude: Query point latitude in degrees
            longitude: Query point longitude in degrees
            radius_km: Inclusive search radius

        Raises:
            ValidationException: If a coordinate is missing or the radius is not positive
        """
        if latitude is None or longitude is None:
            raise ValidationException("Latitude and longitude required", field="latitude")
        radius = self.default_radius_km if radius_km is None else radius_km
        if radius <= 0:
            raise ValidationException("Radius must be positive", field="radius")

        verified = await self.pharmacy_repo.find_by_status(PharmacyStatus.VERIFIED)

        hits = []
        for pharmacy in verified:
            distance = pharmacy.distance_km(latitude, longitude)
            if distance <= radius:
                hits.append(NearbyPharmacy(pharmacy=pharmacy, distance=distance))
        hits.sort(key=lambda hit: hit.distance)

        logger.debug(f"{len(hits)}/{len(verified)} verified pharmacies within {radius} km of ({latitude}, {longitude})")
        return hits
