from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

REPORT = """<?xml version="1.0" encoding="utf-8"?>
<test-results date="2024-01-05" time="10:11:12">
  <test-suite name="Pester" time="0.5">
    <results>
      <test-suite name="Sample.Tests.ps1" time="0.5">
        <results>
          <test-suite name="Sample.Tests" time="0.5">
            <results>
              <test-case description="adds numbers" time="0.01" result="Success" />
              <test-case description="divides by zero" time="0.2" result="Failure">
                <failure><message>Expected exception
Got none</message></failure>
              </test-case>
            </results>
          </test-suite>
        </results>
      </test-suite>
    </results>
  </test-suite>
</test-results>
"""


def _run_cli(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env.setdefault("PYTHONPATH", str(cwd / "src"))
    env["COLUMNS"] = "200"
    return subprocess.run(
        [sys.executable, "-m", "resultreplay", *args],
        cwd=cwd,
        text=True,
        input=stdin,
        capture_output=True,
        env=env,
    )


def _root() -> Path:
    return Path(__file__).resolve().parents[2]


def _write_report(tmp_path: Path) -> Path:
    path = tmp_path / "results.xml"
    path.write_text(REPORT, encoding="utf-8")
    return path


def test_replay_positional_path(tmp_path: Path) -> None:
    report = _write_report(tmp_path)
    result = _run_cli([str(report)], cwd=_root())

    assert result.returncode == 0
    assert "Executing script Sample.Tests.ps1 (REPLAY)" in result.stdout
    assert "[-] divides by zero 200ms" in result.stdout
    assert "Passed: 1, Failed: 1, Skipped: 0, Pending: 0, Inconclusive: 0" in result.stdout


def test_replay_named_path_alias(tmp_path: Path) -> None:
    report = _write_report(tmp_path)
    result = _run_cli(["--full-name", str(report), "--no-color"], cwd=_root())

    assert result.returncode == 0
    assert "Context Sample.Tests" in result.stdout


def test_replay_path_from_stdin(tmp_path: Path) -> None:
    report = _write_report(tmp_path)

    plain = _run_cli([], cwd=_root(), stdin=f"{report}\n")
    assert plain.returncode == 0
    assert "Test Original Time: 2024-01-05 10:11:12" in plain.stdout

    piped = _run_cli([], cwd=_root(), stdin=json.dumps({"FullName": str(report)}))
    assert piped.returncode == 0
    assert "Tests completed in 500ms" in piped.stdout


def test_replay_missing_path_is_usage_error() -> None:
    result = _run_cli([], cwd=_root())
    assert result.returncode == 2


def test_replay_missing_file_fails(tmp_path: Path) -> None:
    result = _run_cli([str(tmp_path / "missing.xml")], cwd=_root())

    assert result.returncode == 1
    assert "Result file not found" in result.stderr
    assert "Executing script" not in result.stdout


def test_replay_invalid_layout_fails_without_summary(tmp_path: Path) -> None:
    path = tmp_path / "bad.xml"
    path.write_text('<test-results><test-suite name="Pester" /></test-results>', encoding="utf-8")

    result = _run_cli([str(path)], cwd=_root())

    assert result.returncode == 1
    assert "is not a valid result file" in result.stderr
    assert "Summary:" not in result.stdout
