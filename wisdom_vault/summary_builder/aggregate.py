"""Directory scanning and aggregation of parsed summaries."""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .parser import parse_summary
from .records import (
    OutputDocument,
    SummaryRecord,
    format_date_label,
    natural_sort_key,
)
from .tagging import TAG_RULES, KeywordRule, assign_tags

logger = logging.getLogger(__name__)

SUMMARY_SUFFIX = ".txt"


@dataclass
class SourceFile:
    name: str
    text: str
    mtime: float | None = None


@dataclass
class FileOutcome:
    """What happened to a single input file during the build."""

    file: str
    status: str
    record_id: int | None = None
    error: str | None = None


@dataclass
class BuildResult:
    document: OutputDocument
    files: dict[str, FileOutcome]
    parsed: int
    skipped: int
    tag_counts: Counter[str]
    total_bullets: int
    output_path: Path | None = None

    @property
    def found(self) -> int:
        return len(self.files)


@dataclass
class SummaryAggregator:
    """Assigns ids, tags and counters as documents arrive in processing order."""

    rules: Sequence[KeywordRule] = TAG_RULES
    verbose: bool = False
    next_id: int = 1
    skipped: int = 0
    records: list[SummaryRecord] = field(default_factory=list)
    tag_counts: Counter[str] = field(default_factory=Counter)
    files: dict[str, FileOutcome] = field(default_factory=dict)

    @property
    def parsed(self) -> int:
        return len(self.records)

    @property
    def total_bullets(self) -> int:
        return sum(record.bullet_count for record in self.records)

    def add(self, name: str, text: str, timestamp: float | None = None) -> SummaryRecord | None:
        parsed = parse_summary(text)
        if parsed is None:
            self.skipped += 1
            self.files[name] = FileOutcome(file=name, status="skipped")
            if self.verbose:
                logger.warning("Skipped: %s", name)
            else:
                logger.debug("Skipped: %s", name)
            return None
        record = SummaryRecord(
            id=self.next_id,
            date_label=format_date_label(timestamp),
            title=parsed.title,
            tags=tuple(assign_tags(parsed.corpus, self.rules)),
            sections=tuple(parsed.sections),
        )
        self.next_id += 1
        self.records.append(record)
        self.tag_counts.update(record.tags)
        self.files[name] = FileOutcome(file=name, status="parsed", record_id=record.id)
        return record

    def add_source(self, source: SourceFile) -> SummaryRecord | None:
        return self.add(source.name, source.text, source.mtime)

    def add_error(self, name: str, exc: BaseException) -> None:
        self.skipped += 1
        self.files[name] = FileOutcome(file=name, status="error", error=str(exc))
        logger.warning("Error reading %s: %s", name, exc)

    def build(self) -> OutputDocument:
        return OutputDocument(summaries=list(reversed(self.records)))

    def result(self) -> BuildResult:
        return BuildResult(
            document=self.build(),
            files=dict(self.files),
            parsed=self.parsed,
            skipped=self.skipped,
            tag_counts=Counter(self.tag_counts),
            total_bullets=self.total_bullets,
        )


def iter_summary_files(directory: Path) -> Iterator[Path]:
    candidates = [
        path
        for path in directory.iterdir()
        if path.name.endswith(SUMMARY_SUFFIX) and not path.is_dir()
    ]
    yield from sorted(candidates, key=lambda path: natural_sort_key(path.name))


def read_source(path: Path) -> SourceFile:
    # utf-8-sig drops a leading BOM so it never ends up in the title.
    text = path.read_text(encoding="utf-8-sig", errors="replace")
    try:
        mtime: float | None = path.stat().st_mtime
    except OSError:
        mtime = None
    return SourceFile(name=path.name, text=text, mtime=mtime)


def build_from_directory(
    directory: Path,
    *,
    rules: Sequence[KeywordRule] = TAG_RULES,
    verbose: bool = False,
) -> BuildResult:
    aggregator = SummaryAggregator(rules=rules, verbose=verbose)
    paths = list(iter_summary_files(directory))
    logger.debug("Found %d .txt files", len(paths))
    for path in paths:
        try:
            source = read_source(path)
        except OSError as exc:
            aggregator.add_error(path.name, exc)
            continue
        aggregator.add_source(source)
    logger.debug("Parsed %d summaries (%d skipped)", aggregator.parsed, aggregator.skipped)
    return aggregator.result()
