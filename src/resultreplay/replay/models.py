from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RunSummary:
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    pending: int = 0
    inconclusive: int = 0

    def count(self, bucket: str) -> None:
        if bucket == "passed":
            self.passed += 1
        elif bucket == "failed":
            self.failed += 1
        elif bucket == "skipped":
            self.skipped += 1
        elif bucket == "inconclusive":
            self.inconclusive += 1
        else:
            raise ValueError(f"Unknown result bucket: {bucket}")

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped + self.pending + self.inconclusive
