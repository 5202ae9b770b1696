"""Sequential multi-URL audits with per-item failure isolation."""

import logging
import time
from typing import Callable, Optional, Sequence

from .aggregator import utcnow
from .auditor import AuditOrchestrator
from .models import BatchItemResult, BatchResult, BatchSummary


logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def audit_item(orchestrator: AuditOrchestrator, url: str) -> BatchItemResult:
    """Audit one URL, turning a failure into a failed item."""
    try:
        report = orchestrator.audit_one(url)
    except Exception as e:
        logger.error("Audit failed for %s: %s", url, e)
        return BatchItemResult.failed(url, str(e) or e.__class__.__name__, utcnow())
    return BatchItemResult.succeeded(report)


def summarize(results: Sequence[BatchItemResult], duration_seconds: int) -> BatchSummary:
    successful = sum(1 for r in results if r.success)
    return BatchSummary(
        total=len(results),
        successful=successful,
        failed=len(results) - successful,
        duration_seconds=duration_seconds,
    )


def run_batch(
    orchestrator: AuditOrchestrator,
    urls: Sequence[str],
    on_progress: Optional[ProgressCallback] = None,
    clock: Callable[[], float] = time.monotonic,
) -> BatchResult:
    """Audit each URL in order. Never raises for a single URL's failure.

    Args:
        orchestrator: Pipeline used for every URL
        urls: URLs to audit, in output order
        on_progress: Called as ``(index, total, url)`` before each audit
        clock: Seconds source for the batch duration

    Returns:
        BatchResult with one item per input URL
    """
    start = clock()
    results: list[BatchItemResult] = []

    for index, url in enumerate(urls, 1):
        if on_progress:
            on_progress(index, len(urls), url)
        results.append(audit_item(orchestrator, url))

    duration = max(0, round(clock() - start))
    summary = summarize(results, duration)
    logger.info(
        "Batch finished: %d/%d successful in %ds",
        summary.successful, summary.total, summary.duration_seconds,
    )
    return BatchResult(summary=summary, results=tuple(results))
