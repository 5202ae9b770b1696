"""Extractors that read SEO-relevant structure from parsed HTML."""

from .meta_tags import extract_meta, extract_open_graph, extract_twitter
from .content import extract_headings, analyze_images, analyze_links
from .structured_data import extract_json_ld
from .technical import analyze_technical

__all__ = [
    "extract_meta",
    "extract_open_graph",
    "extract_twitter",
    "extract_headings",
    "analyze_images",
    "analyze_links",
    "extract_json_ld",
    "analyze_technical",
]
