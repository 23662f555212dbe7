from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Iterable

from rich.console import Console
from rich.text import Text

from resultreplay.config.models import ReplayOptions
from resultreplay.report.models import FAILURE, IGNORED, SUCCESS, Case, Suite
from resultreplay.util.duration import format_duration

from .models import RunSummary

POSITIVE = "green"
NEGATIVE = "red"
WARNING = "yellow"
ALERT = "magenta"
MUTED = "bright_black"
HIGHLIGHT = "cyan"


@dataclass(frozen=True)
class OutcomeStyle:
    bucket: str
    marker: str
    style: str


OUTCOME_STYLES: dict[str, OutcomeStyle] = {
    SUCCESS: OutcomeStyle("passed", "[+]", POSITIVE),
    FAILURE: OutcomeStyle("failed", "[-]", NEGATIVE),
    IGNORED: OutcomeStyle("skipped", "[!]", WARNING),
}
INCONCLUSIVE = OutcomeStyle("inconclusive", "[?]", ALERT)


def build_console(options: ReplayOptions) -> Console:
    return Console(no_color=options.no_color, soft_wrap=True, highlight=False)


def outcome_style(result: str) -> OutcomeStyle:
    return OUTCOME_STYLES.get(result, INCONCLUSIVE)


def render_case(
    console: Console,
    case: Case,
    summary: RunSummary,
    options: ReplayOptions,
) -> None:
    style = outcome_style(case.result)
    summary.count(style.bucket)
    duration = format_duration(case.time)
    console.print(
        Text.assemble(
            (f"    {style.marker} {case.description} ", style.style),
            (duration, MUTED),
        )
    )
    if case.result == FAILURE and case.message:
        for line in case.message.split("\n"):
            console.print(Text(f"    {line}", style=style.style))
    if options.delay_ms:
        time.sleep(options.delay_ms / 1000.0)


def render_cases(
    console: Console,
    cases: Iterable[Case],
    summary: RunSummary,
    options: ReplayOptions,
) -> None:
    for case in cases:
        render_case(console, case, summary, options)
    console.print()


def render_suite(
    console: Console,
    suite: Suite,
    summary: RunSummary,
    options: ReplayOptions,
    *,
    nested: bool,
) -> None:
    header = "  Describing" if nested else "Context"
    console.print(Text(f"{header} {suite.name}", style=POSITIVE))
    if suite.suites is None:
        render_cases(console, suite.cases, summary, options)
        return
    console.print()
    for child in suite.suites:
        render_suite(console, child, summary, options, nested=True)
    console.print()
