"""Console report rendering for a finished build."""
from __future__ import annotations

from .aggregate import BuildResult


def render_tag_distribution(result: BuildResult) -> list[str]:
    # most_common keeps first-seen order for equal counts
    return [f"{count:>4}  {tag}" for tag, count in result.tag_counts.most_common()]


def render_report(result: BuildResult) -> str:
    lines = [
        f"Found {result.found} .txt files",
        f"Parsed {result.parsed} summaries ({result.skipped} skipped)",
        "",
        "Tag distribution:",
        *render_tag_distribution(result),
        "",
        f"Total insights: {result.total_bullets}",
    ]
    if result.output_path is not None:
        lines.append(f"Written -> {result.output_path}")
    return "\n".join(lines)
