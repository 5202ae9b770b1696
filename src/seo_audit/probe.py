"""Lighthouse performance probe."""

import contextlib
import json
import logging
import os
import subprocess
import tempfile
from typing import Any

from .config import Settings
from .errors import ProbeError
from .models import (
    AuditCheck,
    CategoryScores,
    Diagnostic,
    Metrics,
    Opportunity,
    PerformanceReport,
    SeoChecks,
)


logger = logging.getLogger(__name__)

CATEGORIES = ["performance", "seo", "accessibility", "best-practices"]
SKIPPED_AUDITS = ["screenshot-thumbnails", "final-screenshot"]
CHROME_FLAGS = "--headless --no-sandbox --disable-setuid-sandbox"
MAX_WAIT_FOR_LOAD_MS = 45000

MAX_FAILED_AUDITS = 15
MAX_OPPORTUNITIES = 10
MAX_DIAGNOSTICS = 10

METRIC_AUDITS = {
    "fcp": "first-contentful-paint",
    "lcp": "largest-contentful-paint",
    "cls": "cumulative-layout-shift",
    "tti": "interactive",
    "tbt": "total-blocking-time",
    "si": "speed-index",
}

SEO_AUDITS = {
    "meta_description": "meta-description",
    "http_status_code": "http-status-code",
    "link_text": "link-text",
    "crawlable": "is-crawlable",
    "robots": "robots-txt",
    "hreflang": "hreflang",
    "canonical": "canonical",
}


def _category_score(lhr: dict[str, Any], name: str) -> int:
    score = lhr.get("categories", {}).get(name, {}).get("score")
    return round(score * 100) if score is not None else 0


def _numeric(audits: dict[str, Any], audit_id: str) -> float:
    value = audits.get(audit_id, {}).get("numericValue")
    return float(value) if value is not None else 0.0


def _detail_type(audit: dict[str, Any]) -> str | None:
    details = audit.get("details") or {}
    return details.get("type")


def _is_failing(audit: dict[str, Any]) -> bool:
    score = audit.get("score")
    return score is not None and score < 1


def parse_lighthouse_result(lhr: dict[str, Any]) -> PerformanceReport:
    """Reduce a Lighthouse result (LHR) to a PerformanceReport."""
    audits: dict[str, Any] = lhr.get("audits", {})

    failed_audits = [
        AuditCheck(
            id=audit_id,
            title=audit.get("title", ""),
            description=audit.get("description", ""),
            score=audit["score"],
        )
        for audit_id, audit in audits.items()
        if _is_failing(audit)
    ][:MAX_FAILED_AUDITS]

    opportunities = [
        Opportunity(
            id=audit_id,
            title=audit.get("title", ""),
            description=audit.get("description", ""),
            savings=audit["details"].get("overallSavingsMs") or 0,
        )
        for audit_id, audit in audits.items()
        if _detail_type(audit) == "opportunity"
    ][:MAX_OPPORTUNITIES]

    diagnostics = [
        Diagnostic(
            id=audit_id,
            title=audit.get("title", ""),
            description=audit.get("description", ""),
        )
        for audit_id, audit in audits.items()
        if _detail_type(audit) == "table" and _is_failing(audit)
    ][:MAX_DIAGNOSTICS]

    return PerformanceReport(
        scores=CategoryScores(
            performance=_category_score(lhr, "performance"),
            seo=_category_score(lhr, "seo"),
            accessibility=_category_score(lhr, "accessibility"),
            best_practices=_category_score(lhr, "best-practices"),
        ),
        metrics=Metrics(**{name: _numeric(audits, audit_id) for name, audit_id in METRIC_AUDITS.items()}),
        seo_checks=SeoChecks(**{
            name: audits.get(audit_id, {}).get("score") == 1
            for name, audit_id in SEO_AUDITS.items()
        }),
        failed_audits=tuple(failed_audits),
        opportunities=tuple(opportunities),
        diagnostics=tuple(diagnostics),
    )


class LighthouseProbe:
    """Runs the Lighthouse CLI against a URL in headless Chrome."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def build_command(self, url: str, output_path: str) -> list[str]:
        cmd = [
            self.settings.lighthouse_path,
            url,
            "--output=json",
            f"--output-path={output_path}",
            "--quiet",
            f"--chrome-flags={CHROME_FLAGS}",
            f"--only-categories={','.join(CATEGORIES)}",
            f"--skip-audits={','.join(SKIPPED_AUDITS)}",
            f"--max-wait-for-load={MAX_WAIT_FOR_LOAD_MS}",
        ]
        return cmd

    def run(self, url: str) -> PerformanceReport:
        """Measure a URL. Raises ProbeError if Lighthouse fails."""
        fd, output_path = tempfile.mkstemp(suffix=".json", prefix="lighthouse-")
        os.close(fd)
        cmd = self.build_command(url, output_path)
        logger.debug("Running %s", " ".join(cmd))

        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self.settings.lighthouse_timeout,
            )
            with open(output_path, "r", encoding="utf-8") as f:
                lhr = json.load(f)
        except FileNotFoundError as e:
            raise ProbeError(f"Lighthouse not available: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeError(f"Lighthouse timed out after {self.settings.lighthouse_timeout}s") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip().splitlines()
            detail = stderr[-1] if stderr else f"exit code {e.returncode}"
            raise ProbeError(f"Lighthouse failed: {detail}") from e
        except json.JSONDecodeError as e:
            raise ProbeError(f"Unreadable Lighthouse output: {e}") from e
        finally:
            with contextlib.suppress(OSError):
                os.unlink(output_path)

        if not isinstance(lhr, dict):
            raise ProbeError(f"Unexpected Lighthouse result: {type(lhr).__name__}")

        runtime_error = lhr.get("runtimeError")
        if runtime_error:
            message = runtime_error.get("message", "unknown") if isinstance(runtime_error, dict) else runtime_error
            raise ProbeError(f"Lighthouse runtime error: {message}")

        try:
            return parse_lighthouse_result(lhr)
        except (AttributeError, KeyError, TypeError) as e:
            raise ProbeError(f"Unexpected Lighthouse result: {e}") from e
