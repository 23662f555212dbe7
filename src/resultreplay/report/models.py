from __future__ import annotations

from dataclasses import dataclass, field

SUCCESS = "Success"
FAILURE = "Failure"
IGNORED = "Ignored"


@dataclass(frozen=True)
class Case:
    description: str
    time: float
    result: str
    message: str | None = None


@dataclass(frozen=True)
class Suite:
    name: str
    time: float
    # None marks a leaf suite; its children live in ``cases``.
    suites: list[Suite] | None = None
    cases: list[Case] = field(default_factory=list)


@dataclass(frozen=True)
class Report:
    date: str
    time: str
    suite: Suite

    def all_cases(self) -> list[Case]:
        collected: list[Case] = []
        pending = [self.suite]
        while pending:
            current = pending.pop()
            if current.suites is not None:
                pending.extend(reversed(current.suites))
            else:
                collected.extend(current.cases)
        return collected
