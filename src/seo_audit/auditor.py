"""Per-URL audit pipeline."""

import logging
from typing import Protocol

from .aggregator import aggregate
from .config import Settings
from .models import AuditReport, PerformanceReport, RecommendationSet, StructuralReport
from .parser import parse_recommendations
from .prompts import build_prompt
from .providers import RecommendationGenerator, build_generator


logger = logging.getLogger(__name__)


class PerformanceProbe(Protocol):
    def run(self, url: str) -> PerformanceReport: ...


class StructuralAnalyzer(Protocol):
    def analyze(self, url: str) -> StructuralReport: ...


class AuditOrchestrator:
    """Runs probe, analyzer and generator in sequence for one URL.

    Probe and analyzer failures propagate to the caller. Generation failures
    never do: the report is returned with recommendations disabled.
    """

    def __init__(
        self,
        probe: PerformanceProbe,
        analyzer: StructuralAnalyzer,
        generator: RecommendationGenerator,
    ):
        self.probe = probe
        self.analyzer = analyzer
        self.generator = generator

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuditOrchestrator":
        from .analyzer import HTMLAnalyzer
        from .probe import LighthouseProbe

        return cls(
            probe=LighthouseProbe(settings),
            analyzer=HTMLAnalyzer(settings),
            generator=build_generator(settings),
        )

    def recommend(self, url: str, performance: PerformanceReport, structural: StructuralReport) -> RecommendationSet:
        prompt = build_prompt(url, performance, structural)
        try:
            text = self.generator.generate(prompt)
        except Exception as e:
            logger.warning("Recommendations unavailable for %s: %s", url, e)
            return RecommendationSet.disabled()

        return RecommendationSet(
            enabled=True,
            provider=self.generator.provider,
            model=self.generator.model,
            recommendations=tuple(parse_recommendations(text)),
            raw_text=text,
        )

    def audit_one(self, url: str) -> AuditReport:
        """Audit a single URL. Raises ProbeError or FetchError on fatal failure."""
        logger.info("Running Lighthouse for %s", url)
        performance = self.probe.run(url)

        logger.info("Analyzing HTML for %s", url)
        structural = self.analyzer.analyze(url)

        logger.info("Generating recommendations for %s", url)
        recommendations = self.recommend(url, performance, structural)

        return aggregate(url, performance, structural, recommendations)
