"""
Agent Dashboard Use Cases

Onboarding counters and recent activity for field agents.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from pharmalink.core.domain import ValidationException, utc_now
from pharmalink.domains.pharmacies.application.ports import IPharmacyRepository
from pharmalink.domains.pharmacies.domain.entities import Pharmacy
from pharmalink.domains.pharmacies.domain.value_objects import PharmacyStatus

# Onboarding targets per reporting period
PERIOD_TARGETS = {"week": 10, "month": 50, "lifetime": 500}
PERIOD_DAYS = {"week": 7, "month": 30}


def _summary(counts: dict[PharmacyStatus, int]) -> dict[str, int]:
    total = sum(counts.values())
    return {
        "onboarded": total,
        "verified": counts.get(PharmacyStatus.VERIFIED, 0),
        "pending": counts.get(PharmacyStatus.PENDING, 0),
        "rejected": counts.get(PharmacyStatus.REJECTED, 0),
    }


class AgentDashboardUseCase:
    def __init__(self, pharmacy_repository: IPharmacyRepository, clock: Callable[[], datetime] = utc_now):
        self.pharmacy_repo = pharmacy_repository
        self.clock = clock

    async def stats(self) -> dict[str, Any]:
        """All-time counts plus this month's target."""
        summary = _summary(await self.pharmacy_repo.count_by_status())
        return {
            "total": summary["onboarded"],
            **summary,
            "target": PERIOD_TARGETS["month"],
            "period": "month",
        }

    async def performance(self, period: str = "month") -> dict[str, Any]:
        """
        Counts for pharmacies onboarded within the period.

        Raises:
            ValidationException: If period is not week, month or lifetime
        """
        if period not in PERIOD_TARGETS:
            raise ValidationException(f"Invalid period '{period}'", field="period")

        since = None
        if period in PERIOD_DAYS:
            since = self.clock() - timedelta(days=PERIOD_DAYS[period])

        summary = _summary(await self.pharmacy_repo.count_by_status(since=since))
        return {
            "period": period,
            **summary,
            "target": PERIOD_TARGETS[period],
            "trend": f"+{summary['onboarded']}",
        }

    async def recent_activity(self, limit: int = 5) -> list[Pharmacy]:
        return await self.pharmacy_repo.find_recent(limit=limit)
