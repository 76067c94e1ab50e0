"""Persistence of the aggregate summaries document."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, cast

from .records import OutputDocument


def empty_output() -> dict[str, Any]:
    return OutputDocument().to_dict()


def dumps_output(document: OutputDocument) -> str:
    return json.dumps(document.to_dict(), ensure_ascii=False, separators=(",", ":"))


def write_output(path: Path, document: OutputDocument) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_output(document), encoding="utf-8")


def load_output(path: Path) -> dict[str, Any]:
    if not path.exists():
        return empty_output()
    with path.open("r", encoding="utf-8") as fh:
        return cast(dict[str, Any], json.load(fh))
