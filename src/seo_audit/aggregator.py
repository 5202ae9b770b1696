"""Merge the three audit sources into one report."""

from datetime import datetime, timezone
from typing import Optional

from .models import AuditReport, PerformanceReport, RecommendationSet, StructuralReport


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def aggregate(
    url: str,
    performance: PerformanceReport,
    structural: StructuralReport,
    recommendations: RecommendationSet,
    now: Optional[datetime] = None,
) -> AuditReport:
    """Build the AuditReport, stamped at aggregation time."""
    return AuditReport(
        url=url,
        timestamp=now or utcnow(),
        performance=performance,
        structural=structural,
        recommendations=recommendations,
    )
