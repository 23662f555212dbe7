from __future__ import annotations

import logging
from pathlib import Path
import xml.etree.ElementTree as ET

from .models import FAILURE, Case, Report, Suite

logger = logging.getLogger(__name__)

RESULTS_TAG = "test-results"
SUITE_TAG = "test-suite"
CASE_TAG = "test-case"


class FormatError(ValueError):
    """Raised when a file is not a result report in the expected layout."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path} is not a valid result file: {reason}")
        self.path = path
        self.reason = reason


def _parse_time(value: str | None) -> float:
    if not value:
        return 0.0
    try:
        return float(value.replace(",", "."))
    except ValueError:
        return 0.0


def _failure_message(element: ET.Element) -> str | None:
    failure = element.find("failure")
    if failure is None:
        return None
    message = failure.find("message")
    if message is None:
        return ""
    return message.text or ""


def _parse_case(element: ET.Element) -> Case:
    description = element.get("description") or element.get("name") or ""
    result = element.get("result", "")
    return Case(
        description=description,
        time=_parse_time(element.get("time")),
        result=result,
        message=_failure_message(element) if result == FAILURE else None,
    )


def _parse_suite(element: ET.Element) -> Suite:
    name = element.get("name", "")
    time = _parse_time(element.get("time"))
    children = element.findall(f"results/{SUITE_TAG}")
    if children:
        return Suite(name=name, time=time, suites=[_parse_suite(child) for child in children])
    cases = [_parse_case(child) for child in element.findall(f"results/{CASE_TAG}")]
    return Suite(name=name, time=time, cases=cases)


def load_report(path: Path) -> Report:
    if not path.is_file():
        raise FileNotFoundError(f"Result file not found: {path}")
    try:
        root = ET.fromstring(path.read_bytes())
    except ET.ParseError as exc:
        raise FormatError(path, "malformed XML") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if root.tag != RESULTS_TAG:
        raise FormatError(path, f"missing <{RESULTS_TAG}> element")
    suites = root.findall(SUITE_TAG)
    if not suites:
        raise FormatError(path, "missing top-level test suite")
    if len(suites) > 1:
        raise FormatError(path, f"expected one top-level test suite, found {len(suites)}")
    outer = suites[0]
    inner = outer.find(f"results/{SUITE_TAG}")
    if inner is None:
        raise FormatError(path, "missing inner top-level test suite")

    suite = _parse_suite(inner)
    logger.debug(
        "Loaded %s: top suite %r with %d child suite(s)",
        path,
        suite.name,
        len(suite.suites or []),
    )
    return Report(date=root.get("date", ""), time=root.get("time", ""), suite=suite)
