"""Data models for SEO audit results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class Priority(Enum):
    """Priority tier for a recommendation."""
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class CategoryScores:
    """Lighthouse category scores (0-100)."""
    performance: int
    seo: int
    accessibility: int
    best_practices: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "performance": self.performance,
            "seo": self.seo,
            "accessibility": self.accessibility,
            "bestPractices": self.best_practices,
        }


@dataclass(frozen=True)
class Metrics:
    """Core Web Vitals. Timings in ms, CLS unitless."""
    lcp: float
    cls: float
    fcp: float
    tti: float
    tbt: float
    si: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "lcp": self.lcp,
            "cls": self.cls,
            "fcp": self.fcp,
            "tti": self.tti,
            "tbt": self.tbt,
            "si": self.si,
        }


@dataclass(frozen=True)
class AuditCheck:
    """A Lighthouse audit that did not fully pass."""
    id: str
    title: str
    description: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "description": self.description, "score": self.score}


@dataclass(frozen=True)
class Opportunity:
    """A performance opportunity with its estimated saving."""
    id: str
    title: str
    description: str
    savings: float  # ms

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "description": self.description, "savings": self.savings}


@dataclass(frozen=True)
class Diagnostic:
    id: str
    title: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "description": self.description}


@dataclass(frozen=True)
class SeoChecks:
    """Pass/fail state of the Lighthouse SEO audits we report on."""
    meta_description: bool = False
    http_status_code: bool = False
    link_text: bool = False
    crawlable: bool = False
    robots: bool = False
    hreflang: bool = False
    canonical: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "metaDescription": self.meta_description,
            "httpStatusCode": self.http_status_code,
            "linkText": self.link_text,
            "crawlable": self.crawlable,
            "robots": self.robots,
            "hreflang": self.hreflang,
            "canonical": self.canonical,
        }


@dataclass(frozen=True)
class PerformanceReport:
    """Output of the performance probe for one URL."""
    scores: CategoryScores
    metrics: Metrics
    seo_checks: SeoChecks = field(default_factory=SeoChecks)
    failed_audits: tuple[AuditCheck, ...] = ()
    opportunities: tuple[Opportunity, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "scores": self.scores.to_dict(),
            "metrics": self.metrics.to_dict(),
            "audits": self.seo_checks.to_dict(),
            "failedAudits": [a.to_dict() for a in self.failed_audits],
            "opportunities": [o.to_dict() for o in self.opportunities],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass(frozen=True)
class MetaData:
    """Document metadata from <head>."""
    title: Optional[str] = None
    title_length: int = 0
    description: Optional[str] = None
    description_length: int = 0
    keywords: Optional[str] = None
    robots: Optional[str] = None
    canonical: Optional[str] = None
    author: Optional[str] = None
    viewport: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "titleLength": self.title_length,
            "description": self.description,
            "descriptionLength": self.description_length,
            "keywords": self.keywords,
            "robots": self.robots,
            "canonical": self.canonical,
            "author": self.author,
            "viewport": self.viewport,
        }


@dataclass(frozen=True)
class ImageInventory:
    total: int = 0
    missing_alt: int = 0
    sample: tuple[Mapping[str, Optional[str]], ...] = ()  # first 10 {src, alt}

    def __post_init__(self):
        object.__setattr__(self, "sample", tuple(MappingProxyType(dict(img)) for img in self.sample))

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "missingAlt": self.missing_alt,
            "images": [dict(img) for img in self.sample],
        }


@dataclass(frozen=True)
class LinkSummary:
    internal: int = 0
    external: int = 0
    external_links: tuple[str, ...] = ()  # first 5

    def to_dict(self) -> dict[str, Any]:
        return {
            "internal": self.internal,
            "external": self.external,
            "externalLinks": list(self.external_links),
        }


@dataclass(frozen=True)
class TechnicalSummary:
    """Script and stylesheet inventory."""
    has_google_analytics: bool = False
    has_gtm: bool = False
    scripts: int = 0
    deferred_scripts: int = 0
    async_scripts: int = 0
    inline_scripts: int = 0
    stylesheets: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "hasGoogleAnalytics": self.has_google_analytics,
            "hasGTM": self.has_gtm,
            "scripts": self.scripts,
            "deferredScripts": self.deferred_scripts,
            "asyncScripts": self.async_scripts,
            "inlineScripts": self.inline_scripts,
            "stylesheets": self.stylesheets,
        }


def empty_headings() -> dict[str, tuple[str, ...]]:
    return {f"h{i}": () for i in range(1, 7)}


@dataclass(frozen=True)
class StructuralReport:
    """Output of the markup analyzer for one URL."""
    meta: MetaData = field(default_factory=MetaData)
    headings: Mapping[str, tuple[str, ...]] = field(default_factory=empty_headings)
    images: ImageInventory = field(default_factory=ImageInventory)
    links: LinkSummary = field(default_factory=LinkSummary)
    schema: tuple[Any, ...] = ()  # parsed JSON-LD blocks
    open_graph: Mapping[str, str] = field(default_factory=dict)
    twitter: Mapping[str, str] = field(default_factory=dict)
    technical: TechnicalSummary = field(default_factory=TechnicalSummary)

    def __post_init__(self):
        # Read-only views; JSON-LD blocks in `schema` are kept as parsed.
        headings = {level: tuple(texts) for level, texts in self.headings.items()}
        object.__setattr__(self, "headings", MappingProxyType(headings))
        object.__setattr__(self, "schema", tuple(self.schema))
        object.__setattr__(self, "open_graph", MappingProxyType(dict(self.open_graph)))
        object.__setattr__(self, "twitter", MappingProxyType(dict(self.twitter)))

    @property
    def schema_types(self) -> list[str]:
        """@type values of the top-level JSON-LD blocks."""
        types = []
        for block in self.schema:
            if not isinstance(block, dict):
                continue
            type_val = block.get("@type")
            if isinstance(type_val, list):
                types.extend(str(t) for t in type_val)
            elif type_val:
                types.append(str(type_val))
        return types

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "headings": {level: list(texts) for level, texts in self.headings.items()},
            "images": self.images.to_dict(),
            "links": self.links.to_dict(),
            "schema": list(self.schema),
            "openGraph": dict(self.open_graph),
            "twitter": dict(self.twitter),
            "technical": self.technical.to_dict(),
        }


@dataclass(frozen=True)
class Recommendation:
    """A single prioritized fix. `fix` is never empty."""
    priority: Priority
    issue: str
    fix: str

    def to_dict(self) -> dict[str, Any]:
        return {"priority": self.priority.value, "issue": self.issue, "fix": self.fix}


@dataclass(frozen=True)
class RecommendationSet:
    """Recommendations produced by the text generator, if any."""
    enabled: bool
    provider: Optional[str] = None
    model: Optional[str] = None
    recommendations: tuple[Recommendation, ...] = ()
    raw_text: Optional[str] = None

    @classmethod
    def disabled(cls) -> "RecommendationSet":
        return cls(enabled=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"enabled": self.enabled}
        if self.provider is not None:
            data["provider"] = self.provider
        if self.model is not None:
            data["model"] = self.model
        data["recommendations"] = [r.to_dict() for r in self.recommendations]
        if self.raw_text is not None:
            data["rawText"] = self.raw_text
        return data


@dataclass(frozen=True)
class AuditReport:
    """Complete audit record for a URL."""
    url: str
    timestamp: datetime
    performance: PerformanceReport
    structural: StructuralReport
    recommendations: RecommendationSet

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "timestamp": self.timestamp.isoformat(),
            "performance": self.performance.to_dict(),
            "structural": self.structural.to_dict(),
            "recommendations": self.recommendations.to_dict(),
        }


@dataclass(frozen=True)
class BatchItemResult:
    """Outcome of one URL in a batch: a report, or an error message."""
    url: str
    success: bool
    timestamp: datetime
    report: Optional[AuditReport] = None
    error: Optional[str] = None

    @classmethod
    def succeeded(cls, report: AuditReport) -> "BatchItemResult":
        return cls(url=report.url, success=True, timestamp=report.timestamp, report=report)

    @classmethod
    def failed(cls, url: str, error: str, timestamp: datetime) -> "BatchItemResult":
        return cls(url=url, success=False, timestamp=timestamp, error=error)

    def to_dict(self) -> dict[str, Any]:
        if self.success and self.report is not None:
            return {**self.report.to_dict(), "success": True}
        return {
            "url": self.url,
            "success": False,
            "error": self.error,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class BatchSummary:
    total: int
    successful: int
    failed: int
    duration_seconds: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "successful": self.successful,
            "failed": self.failed,
            "durationSeconds": self.duration_seconds,
        }


@dataclass(frozen=True)
class BatchResult:
    """Batch outcome. `results` follows input URL order."""
    summary: BatchSummary
    results: tuple[BatchItemResult, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "results": [r.to_dict() for r in self.results],
        }
