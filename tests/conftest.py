"""Shared fixtures: fake collaborators and canned reports."""

import pytest

from seo_audit.errors import FetchError, GenerationError, ProbeError
from seo_audit.models import (
    AuditCheck,
    CategoryScores,
    ImageInventory,
    MetaData,
    Metrics,
    Opportunity,
    PerformanceReport,
    StructuralReport,
)
from seo_audit.providers import RecommendationGenerator


SAMPLE_TEXT = (
    "1. [HIGH] Missing title tag → Add a descriptive title element.\n"
    "2. [LOW] No canonical link"
)


def make_performance() -> PerformanceReport:
    return PerformanceReport(
        scores=CategoryScores(performance=42, seo=88, accessibility=91, best_practices=75),
        metrics=Metrics(lcp=5812.4, cls=0.1234, fcp=1900.0, tti=7000.6, tbt=350.2, si=4100.0),
        failed_audits=(AuditCheck("document-title", "Document has a title", "Titles matter.", 0),),
        opportunities=(Opportunity("render-blocking-resources", "Eliminate render-blocking resources",
                                   "Defer CSS.", 1234.6),),
    )


def make_structural() -> StructuralReport:
    return StructuralReport(
        meta=MetaData(title="Example", title_length=7, canonical=None),
        headings={"h1": ["Welcome", "Second", "Third"], "h2": ["A"], "h3": [], "h4": [], "h5": [], "h6": []},
        images=ImageInventory(total=4, missing_alt=2),
        schema=({"@type": "Organization"}, {"@type": ["WebSite", "WebPage"]}),
        open_graph={"title": "Example"},
    )


class FakeProbe:
    def __init__(self, failing: set[str] | None = None):
        self.failing = failing or set()
        self.calls: list[str] = []

    def run(self, url: str) -> PerformanceReport:
        self.calls.append(url)
        if url in self.failing:
            raise ProbeError(f"Navigation timeout for {url}")
        return make_performance()


class FakeAnalyzer:
    def __init__(self, failing: set[str] | None = None):
        self.failing = failing or set()
        self.calls: list[str] = []

    def analyze(self, url: str) -> StructuralReport:
        self.calls.append(url)
        if url in self.failing:
            raise FetchError("HTTP 503")
        return make_structural()


class FakeGenerator(RecommendationGenerator):
    provider = "fake"
    model = "fake-1"

    def __init__(self, text: str = SAMPLE_TEXT, error: Exception | None = None):
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def probe():
    return FakeProbe()


@pytest.fixture
def analyzer():
    return FakeAnalyzer()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def failing_generator():
    return FakeGenerator(error=GenerationError("No AI provider configured"))
