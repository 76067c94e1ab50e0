"""Parsing utilities for turning plain-text summaries into sectioned bullets."""
from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field

from .records import Section

logger = logging.getLogger(__name__)

BULLET_MARKERS = "•-*·▸▪▶►»◦‣"

BULLET_RE = re.compile(rf"^[{re.escape(BULLET_MARKERS)}]")
BULLET_PREFIX_RE = re.compile(rf"^[{re.escape(BULLET_MARKERS)}]\s*")
ENUMERATOR_RE = re.compile(r"^\d+[.)]\s+")
URL_RE = re.compile(r"^https?://")

DEFAULT_HEADING = "Overview"
MIN_TITLE_CHARS = 3
MIN_BULLET_CHARS = 6
MIN_HEADING_LINE_CHARS = 4
MAX_HEADING_LINE_CHARS = 220
MIN_HEADING_CHARS = 3


@dataclass
class ParsedDocument:
    """Title and retained sections extracted from a single summary."""

    title: str
    sections: list[Section] = field(default_factory=list)

    @property
    def corpus(self) -> str:
        parts = [self.title]
        parts.extend(f"{section.heading} {' '.join(section.bullets)}" for section in self.sections)
        return " ".join(parts)


class ParserState(enum.Enum):
    NO_SECTION = "no_section"
    SECTION_OPEN = "section_open"


class SectionBuilder:
    """Two-state machine collecting sections while lines are fed in order.

    Bullets arriving before any heading open an implicit ``Overview`` section.
    Headings equal to the title never open a section.
    """

    def __init__(self, title: str) -> None:
        self.title = title
        self.state = ParserState.NO_SECTION
        self._opened: list[tuple[str, list[str]]] = []

    @property
    def current(self) -> Section | None:
        if self.state is ParserState.NO_SECTION:
            return None
        heading, bullets = self._opened[-1]
        return Section(heading, tuple(bullets))

    def open_section(self, heading: str) -> bool:
        if len(heading) < MIN_HEADING_CHARS or heading == self.title:
            return False
        self._opened.append((heading, []))
        self.state = ParserState.SECTION_OPEN
        return True

    def add_bullet(self, text: str) -> bool:
        if len(text) < MIN_BULLET_CHARS:
            return False
        if self.state is ParserState.NO_SECTION:
            self._opened.append((DEFAULT_HEADING, []))
            self.state = ParserState.SECTION_OPEN
        self._opened[-1][1].append(text)
        return True

    def sections(self) -> list[Section]:
        return [Section(heading, tuple(bullets)) for heading, bullets in self._opened if bullets]


def is_bullet_line(line: str) -> bool:
    return bool(BULLET_RE.match(line))


def strip_bullet(line: str) -> str:
    return BULLET_PREFIX_RE.sub("", line, count=1).strip()


def is_heading_candidate(line: str) -> bool:
    if not MIN_HEADING_LINE_CHARS <= len(line) <= MAX_HEADING_LINE_CHARS:
        return False
    return not URL_RE.match(line)


def clean_heading(line: str) -> str:
    cleaned = ENUMERATOR_RE.sub("", line, count=1)
    if cleaned.endswith(":"):
        cleaned = cleaned[:-1]
    return cleaned.strip()


def split_lines(text: str) -> list[str]:
    return [line.rstrip() for line in text.split("\n")]


def parse_summary(text: str) -> ParsedDocument | None:
    """Parse ``text`` into a title plus its bullet-bearing sections.

    Returns ``None`` when the text has no usable title or no section ends up
    with at least one bullet.
    """

    lines = split_lines(text)
    index = 0
    while index < len(lines) and not lines[index].strip():
        index += 1
    if index >= len(lines):
        return None

    title = lines[index].strip()
    if len(title) < MIN_TITLE_CHARS:
        return None

    builder = SectionBuilder(title)
    for raw_line in lines[index + 1 :]:
        line = raw_line.strip()
        if not line:
            continue
        if is_bullet_line(line):
            builder.add_bullet(strip_bullet(line))
            continue
        if is_heading_candidate(line):
            builder.open_section(clean_heading(line))

    sections = builder.sections()
    if not sections:
        logger.debug("No bullet sections found under title %r", title)
        return None
    return ParsedDocument(title=title, sections=sections)
