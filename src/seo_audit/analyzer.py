"""Structural HTML analyzer."""

import logging

import httpx
from bs4 import BeautifulSoup

from .config import Settings
from .errors import FetchError
from .extractors import (
    analyze_images,
    analyze_links,
    analyze_technical,
    extract_headings,
    extract_json_ld,
    extract_meta,
    extract_open_graph,
    extract_twitter,
)
from .models import StructuralReport


logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; SEOAuditToolkit/1.0)",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme."""
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def analyze_html(html: str, url: str) -> StructuralReport:
    """Build a StructuralReport from raw markup. Never raises on bad HTML."""
    soup = BeautifulSoup(html, "lxml")
    return StructuralReport(
        meta=extract_meta(soup),
        headings=extract_headings(soup),
        images=analyze_images(soup),
        links=analyze_links(soup, url),
        schema=tuple(extract_json_ld(soup)),
        open_graph=extract_open_graph(soup),
        twitter=extract_twitter(soup),
        technical=analyze_technical(soup),
    )


class HTMLAnalyzer:
    """Fetches a page and extracts its SEO structure."""

    def __init__(self, settings: Settings | None = None, transport: httpx.BaseTransport | None = None):
        self.settings = settings or Settings()
        self.transport = transport

    def fetch(self, url: str) -> str:
        """GET the page body. Raises FetchError on any transport or HTTP failure."""
        timeout = self.settings.http_timeout
        try:
            with httpx.Client(
                headers=DEFAULT_HEADERS,
                timeout=timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException as e:
            raise FetchError(f"Timeout after {timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise FetchError(f"Request failed: {e}") from e

    def analyze(self, url: str) -> StructuralReport:
        html = self.fetch(url)
        logger.debug("Fetched %d bytes from %s", len(html), url)
        return analyze_html(html, url)
