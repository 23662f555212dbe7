from .engine import print_summary, replay_report
from .models import RunSummary
from .render import build_console, outcome_style, render_case, render_cases, render_suite

__all__ = [
    "RunSummary",
    "build_console",
    "outcome_style",
    "print_summary",
    "render_case",
    "render_cases",
    "render_suite",
    "replay_report",
]
