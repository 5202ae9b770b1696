"""Headings, images and links."""

from urllib.parse import urlparse

from bs4 import BeautifulSoup

from ..models import ImageInventory, LinkSummary


MAX_IMAGE_SAMPLE = 10
MAX_EXTERNAL_LINKS = 5


def extract_headings(soup: BeautifulSoup) -> dict[str, list[str]]:
    """Non-empty heading text grouped by level h1-h6."""
    headings: dict[str, list[str]] = {}
    for level in range(1, 7):
        texts = [h.get_text(strip=True) for h in soup.find_all(f"h{level}")]
        headings[f"h{level}"] = [t for t in texts if t]
    return headings


def analyze_images(soup: BeautifulSoup) -> ImageInventory:
    images = soup.find_all("img")
    missing_alt = 0
    sample = []

    for img in images:
        alt = img.get("alt")
        if not alt or not alt.strip():
            missing_alt += 1
        if len(sample) < MAX_IMAGE_SAMPLE:
            sample.append({"src": img.get("src"), "alt": alt or None})

    return ImageInventory(total=len(images), missing_alt=missing_alt, sample=tuple(sample))


def analyze_links(soup: BeautifulSoup, base_url: str) -> LinkSummary:
    """Count internal and external links relative to the page host.

    Fragment, mailto: and other relative links are not counted.
    """
    host = urlparse(base_url).netloc
    internal = 0
    external = 0
    external_links: list[str] = []

    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if href.startswith(("http://", "https://")) and urlparse(href).netloc != host:
            external += 1
            if len(external_links) < MAX_EXTERNAL_LINKS:
                external_links.append(href)
        elif href.startswith("/") or href.startswith(base_url):
            internal += 1

    return LinkSummary(internal=internal, external=external, external_links=tuple(external_links))
