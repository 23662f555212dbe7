from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from resultreplay.config.models import ReplayOptions
from resultreplay.report.loader import load_report
from resultreplay.report.models import Report
from resultreplay.util.duration import format_duration

from .models import RunSummary
from .render import (
    HIGHLIGHT,
    MUTED,
    NEGATIVE,
    POSITIVE,
    WARNING,
    build_console,
    render_cases,
    render_suite,
)

logger = logging.getLogger(__name__)


def print_summary(
    console: Console,
    report: Report,
    summary: RunSummary,
    options: ReplayOptions,
) -> None:
    console.print(Text(f"Test Original Time: {report.date} {report.time}"))
    console.print(Text("Summary:"))
    console.print(
        Text.assemble(
            (f"Passed: {summary.passed}, ", POSITIVE),
            (f"Failed: {summary.failed}, ", NEGATIVE),
            (f"Skipped: {summary.skipped}, ", WARNING),
            (f"Pending: {summary.pending}, Inconclusive: {summary.inconclusive}", MUTED),
        )
    )
    console.print(
        Text(f"Tests completed in {format_duration(report.suite.time, full_words=True)}")
    )
    console.print(Text("-" * options.divider_width))


def replay_report(
    path: Path | str,
    *,
    console: Console | None = None,
    options: ReplayOptions | None = None,
) -> RunSummary:
    """Replay a result file to the console and return the counters it produced."""
    options = options or ReplayOptions()
    console = console or build_console(options)
    report = load_report(Path(path))

    summary = RunSummary()
    console.print(Text(f"Executing script {report.suite.name} (REPLAY)", style=HIGHLIGHT))
    console.print()
    if report.suite.suites is None:
        render_cases(console, report.suite.cases, summary, options)
    else:
        for suite in report.suite.suites:
            render_suite(console, suite, summary, options, nested=False)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Replayed %d of %d case(s): passed=%d failed=%d skipped=%d inconclusive=%d",
            summary.total,
            len(report.all_cases()),
            summary.passed,
            summary.failed,
            summary.skipped,
            summary.inconclusive,
        )
    print_summary(console, report, summary, options)
    return summary
