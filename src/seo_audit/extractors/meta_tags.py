"""Meta tag and social preview extraction."""

from bs4 import BeautifulSoup

from ..models import MetaData


def _meta_content(soup: BeautifulSoup, name: str) -> str | None:
    tag = soup.find("meta", attrs={"name": name})
    content = tag.get("content") if tag else None
    return content or None


def extract_meta(soup: BeautifulSoup) -> MetaData:
    """Read title, description, canonical and other document metadata."""
    title_tag = soup.find("title")
    title = title_tag.get_text() if title_tag else ""
    description = _meta_content(soup, "description")

    canonical_tag = soup.find("link", rel="canonical")
    canonical = canonical_tag.get("href") if canonical_tag else None

    return MetaData(
        title=title or None,
        title_length=len(title),
        description=description,
        description_length=len(description or ""),
        keywords=_meta_content(soup, "keywords"),
        robots=_meta_content(soup, "robots"),
        canonical=canonical or None,
        author=_meta_content(soup, "author"),
        viewport=_meta_content(soup, "viewport"),
    )


def _prefixed_tags(soup: BeautifulSoup, attr: str, prefix: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in soup.find_all("meta", attrs={attr: True}):
        key = tag.get(attr, "")
        if key.startswith(prefix):
            tags[key[len(prefix):]] = tag.get("content", "")
    return tags


def extract_open_graph(soup: BeautifulSoup) -> dict[str, str]:
    """Collect og:* properties keyed without the prefix."""
    return _prefixed_tags(soup, "property", "og:")


def extract_twitter(soup: BeautifulSoup) -> dict[str, str]:
    """Collect twitter:* tags keyed without the prefix."""
    return _prefixed_tags(soup, "name", "twitter:")
