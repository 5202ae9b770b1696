"""Prompt template for generating SEO recommendations."""

import json

from .models import PerformanceReport, StructuralReport


FORMAT_INSTRUCTIONS = """CRITICAL: Use EXACTLY this format for each recommendation:
1. [HIGH] Issue title → Specific fix action in 1-2 sentences
2. [MEDIUM] Issue title → Specific fix action in 1-2 sentences
3. [LOW] Issue title → Specific fix action in 1-2 sentences

Requirements:
- ONE line per recommendation
- Priority must be HIGH, MEDIUM, or LOW in brackets
- Use → arrow between issue and fix
- Fix must be 1-2 sentences maximum
- No bullet points, no sub-lists
- Max 10 recommendations

Focus on:
- Quick wins (high impact, low effort)
- Failed Lighthouse audits with specific savings
- Core Web Vitals improvements
- Technical SEO gaps

Example:
1. [HIGH] LCP 5.8s exceeds threshold → Preload hero image and defer non-critical CSS/JS to reduce LCP below 2.5s
2. [MEDIUM] 50 images missing alt text → Add descriptive alt attributes to all images for accessibility and SEO"""


def _bullets(items: list[str]) -> str:
    return "\n".join(items) if items else "- None"


def _yes_no(value) -> str:
    return "Yes" if value else "No"


def build_prompt(url: str, performance: PerformanceReport, structural: StructuralReport) -> str:
    """Summarize the audit findings and ask for 5-10 prioritized fixes."""
    scores = performance.scores
    metrics = performance.metrics
    meta = structural.meta
    h1 = structural.headings.get("h1", [])
    h2 = structural.headings.get("h2", [])

    failed = [f"- {a.title}: {a.description}" for a in performance.failed_audits]
    opportunities = [
        f"- {o.title} (saves {round(o.savings)}ms): {o.description}"
        for o in performance.opportunities
    ]
    diagnostics = [f"- {d.title}: {d.description}" for d in performance.diagnostics]

    if meta.description:
        description = f"Present ({meta.description_length} chars)"
    else:
        description = "MISSING"

    sections = [
        "Analyze this website's SEO and provide 5-10 actionable fixes.",
        f"URL: {url}",
        "LIGHTHOUSE SCORES:\n"
        f"- Performance: {scores.performance}/100\n"
        f"- SEO: {scores.seo}/100\n"
        f"- Accessibility: {scores.accessibility}/100\n"
        f"- Best Practices: {scores.best_practices}/100",
        "CORE WEB VITALS:\n"
        f"- LCP: {round(metrics.lcp)}ms\n"
        f"- CLS: {metrics.cls:.3f}\n"
        f"- FCP: {round(metrics.fcp)}ms\n"
        f"- TTI: {round(metrics.tti)}ms\n"
        f"- TBT: {round(metrics.tbt)}ms\n"
        f"- Speed Index: {round(metrics.si)}ms",
        f"FAILED LIGHTHOUSE AUDITS (Top {len(failed)}):\n{_bullets(failed)}",
        f"PERFORMANCE OPPORTUNITIES:\n{_bullets(opportunities)}",
        f"DIAGNOSTICS:\n{_bullets(diagnostics)}",
        "META DATA:\n"
        f"- Title: {meta.title or 'MISSING'} ({meta.title_length} chars)\n"
        f"- Description: {description}\n"
        f"- Canonical: {meta.canonical or 'MISSING'}",
        "HEADINGS:\n"
        f"- H1: {len(h1)} found - {json.dumps(h1[:2])}\n"
        f"- H2: {len(h2)} found",
        "IMAGES:\n"
        f"- Total: {structural.images.total}\n"
        f"- Missing alt: {structural.images.missing_alt}",
        "SCHEMA:\n"
        f"- Found: {len(structural.schema)} schemas\n"
        f"- Types: {', '.join(structural.schema_types)}",
        "OPEN GRAPH:\n"
        f"- Title: {_yes_no(structural.open_graph.get('title'))}\n"
        f"- Description: {_yes_no(structural.open_graph.get('description'))}\n"
        f"- Image: {_yes_no(structural.open_graph.get('image'))}",
        "TWITTER CARD:\n"
        f"- Card: {_yes_no(structural.twitter.get('card'))}",
        FORMAT_INSTRUCTIONS,
    ]
    return "\n\n".join(sections)
