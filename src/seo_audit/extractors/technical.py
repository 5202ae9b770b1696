"""Script and stylesheet inventory."""

from bs4 import BeautifulSoup

from ..models import TechnicalSummary


def _has_script_src(soup: BeautifulSoup, needle: str) -> bool:
    return any(needle in s.get("src", "") for s in soup.find_all("script", src=True))


def analyze_technical(soup: BeautifulSoup) -> TechnicalSummary:
    scripts = soup.find_all("script")
    stylesheets = [
        link for link in soup.find_all("link", rel=True)
        if "stylesheet" in link.get("rel", [])
    ]
    return TechnicalSummary(
        has_google_analytics=_has_script_src(soup, "google-analytics") or _has_script_src(soup, "gtag"),
        has_gtm=_has_script_src(soup, "googletagmanager"),
        scripts=len(scripts),
        deferred_scripts=sum(1 for s in scripts if s.has_attr("defer")),
        async_scripts=sum(1 for s in scripts if s.has_attr("async")),
        inline_scripts=sum(1 for s in scripts if not s.has_attr("src")),
        stylesheets=len(stylesheets),
    )
