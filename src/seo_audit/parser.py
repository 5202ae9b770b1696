"""Parse generated recommendation text into structured records."""

import logging
import re

from .models import Priority, Recommendation


logger = logging.getLogger(__name__)

ARROW = "→"

# 1. [HIGH] issue → fix  |  2. [PRIORITY: med] issue
HEADER_RE = re.compile(
    r"^\d+\.\s*\[(?:PRIORITY:\s*)?(HIGH|MEDIUM|MED|LOW)\]\s*(.+?)(?:" + ARROW + r"(.+))?$",
    re.IGNORECASE | re.ASCII,
)


def normalize_priority(token: str) -> Priority:
    """Map a bracketed priority token to a Priority."""
    token = token.upper()
    if token == "MED":
        return Priority.MEDIUM
    return Priority(token)


def parse_recommendations(text: str) -> list[Recommendation]:
    """Extract prioritized recommendations from free-form model output.

    Lines that are not recommendation headers are skipped. A header with no
    inline fix takes its fix from the next line when that line starts with
    the arrow; otherwise the fix repeats the issue. Order is preserved and
    nothing is truncated.
    """
    lines = text.splitlines() if text else []
    recommendations: list[Recommendation] = []
    skipped = 0

    i = 0
    while i < len(lines):
        line = lines[i].strip()
        i += 1

        match = HEADER_RE.match(line)
        if not match:
            if line:
                skipped += 1
            continue

        priority = normalize_priority(match.group(1))
        issue = match.group(2).strip()
        fix = (match.group(3) or "").strip()

        if not fix and i < len(lines):
            next_line = lines[i].strip()
            if next_line.startswith(ARROW):
                fix = next_line[len(ARROW):].strip()
                i += 1  # consumed

        recommendations.append(Recommendation(
            priority=priority,
            issue=issue,
            fix=fix or issue,
        ))

    if skipped:
        logger.debug("Skipped %d non-recommendation lines", skipped)
    return recommendations
