"""Record types written to the aggregate document, plus small pure helpers."""
from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

SOURCE_LABEL = "RC"
FALLBACK_DATE_LABEL = "2025"

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_NON_DIGIT_RE = re.compile(r"\D+")


@dataclass(frozen=True)
class Section:
    heading: str
    bullets: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"h": self.heading, "b": list(self.bullets)}


@dataclass(frozen=True)
class SummaryRecord:
    """One parsed summary, as persisted in ``summaries``."""

    id: int
    date_label: str
    title: str
    tags: tuple[str, ...]
    sections: tuple[Section, ...]
    source_label: str = SOURCE_LABEL

    @property
    def bullet_count(self) -> int:
        return sum(len(section.bullets) for section in self.sections)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "w": self.source_label,
            "d": self.date_label,
            "s": self.title,
            "t": list(self.tags),
            "sec": [section.to_dict() for section in self.sections],
        }


@dataclass
class OutputDocument:
    summaries: list[SummaryRecord] = field(default_factory=list)
    xref: list[Any] = field(default_factory=list)
    cols: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "summaries": [record.to_dict() for record in self.summaries],
            "xref": list(self.xref),
            "cols": list(self.cols),
        }


def format_date_label(timestamp: float | None) -> str:
    """Render ``timestamp`` (seconds since the epoch) as e.g. ``"Mar 7"``."""

    if timestamp is None:
        return FALLBACK_DATE_LABEL
    try:
        moment = datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError):
        return FALLBACK_DATE_LABEL
    return f"{MONTHS[moment.month - 1]} {moment.day}"


def natural_sort_key(name: str) -> tuple[int, str]:
    digits = _NON_DIGIT_RE.sub("", name)
    return (int(digits) if digits else 0, name)


def natural_sort(names: Iterable[str]) -> list[str]:
    return sorted(names, key=natural_sort_key)
