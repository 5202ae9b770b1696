"""JSON-LD structured data extraction."""

import json
from typing import Any

from bs4 import BeautifulSoup


def extract_json_ld(soup: BeautifulSoup) -> list[Any]:
    """Extract all JSON-LD blocks from the page.

    Top-level arrays are flattened. Blocks that are not valid JSON are
    dropped without error.
    """
    scripts = soup.find_all("script", type="application/ld+json")
    results: list[Any] = []

    for script in scripts:
        content = script.string or script.get_text()
        if not content or not content.strip():
            continue
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            continue
        if isinstance(data, list):
            results.extend(data)
        else:
            results.append(data)

    return results
