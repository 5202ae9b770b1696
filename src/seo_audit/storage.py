"""Save audit reports as JSON files."""

import json
import time
from pathlib import Path
from typing import Any
from urllib.parse import urlparse


def report_filename(url: str | None = None, now_ms: int | None = None) -> str:
    """seo-audit-<host>-<ms>.json for one URL, seo-audit-batch-<ms>.json otherwise."""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    if url is None:
        return f"seo-audit-batch-{stamp}.json"
    host = urlparse(url).hostname or "unknown"
    return f"seo-audit-{host}-{stamp}.json"


def save_report(data: dict[str, Any], filename: str, output_dir: Path | None = None) -> Path:
    output_dir = output_dir or Path.cwd()
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
