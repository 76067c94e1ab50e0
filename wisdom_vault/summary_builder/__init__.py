"""Summary builder package."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from . import aggregate, config, output, parser, records, renderer, tagging

__all__ = [
    "aggregate",
    "config",
    "output",
    "parser",
    "records",
    "renderer",
    "tagging",
    "load_summaries",
]


def load_summaries(base_path: Path) -> dict[str, Any]:
    """Convenience wrapper to load the built document under ``base_path``."""
    from .output import load_output

    return load_output(base_path / config.DEFAULT_OUTPUT_FILE)
