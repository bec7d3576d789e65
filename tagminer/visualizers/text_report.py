from typing import Any, Dict, List, Optional

from rich.markup import escape
from rich.table import Table

from ..analyzers.base import RankedResult, TagReport


def render(ranked: RankedResult, separator: Optional[str] = "\n") -> str:
    """One ``"label count"`` line per entry, joined by ``separator``."""
    lines = [f"{label} {count}" for label, count in ranked]
    return (separator or "\n").join(lines)


def render_table(ranked: RankedResult, title: str = "Tag frequencies") -> Table:
    """Build a rich Table of the ranked labels for console output."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Tag", style="cyan")
    table.add_column("Count", justify="right", style="green")

    for position, (label, count) in enumerate(ranked, start=1):
        table.add_row(str(position), escape(label), str(count))

    return table


def report_payload(report: TagReport) -> Dict[str, Any]:
    """JSON-serializable view of a report."""
    ranked: List[List[Any]] = [[label, count] for label, count in report.ranked]
    return {
        "ranked": ranked,
        "total_observed": report.total_observed,
        "sources": report.sources,
        "malformed": report.malformed,
    }
