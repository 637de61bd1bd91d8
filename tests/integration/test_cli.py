from __future__ import annotations

import json
from pathlib import Path

import pytest

from windowsum.integration.cli import main
from windowsum.integration.config import ENV_FORMAT, ENV_STRATEGY


ARTICLE_CASES = Path(__file__).resolve().parents[2] / "cases" / "article_examples.yaml"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_STRATEGY, raising=False)
    monkeypatch.delenv(ENV_FORMAT, raising=False)


def test_default_length(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["09121"]) == 0
    assert capsys.readouterr().out.strip() == "12"


def test_explicit_length(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["09121", "--length", "2"]) == 0
    # "09" -> 9, "91" -> 10, "12" -> 3, "21" -> 3
    assert capsys.readouterr().out.strip() == "10"


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["919191", "-L", "2", "--format", "json", "--strategy", "rolling"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "digits": "919191",
        "length": 2,
        "strategy": "rolling",
        "max": 10,
        "best_offsets": [0, 1, 2, 3, 4],
    }


def test_env_selects_format(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv(ENV_FORMAT, "json")
    assert main(["9"]) == 0
    assert json.loads(capsys.readouterr().out)["max"] == 9


def test_verbose_lists_windows(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["09121", "--verbose"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "12"
    assert "[windowsum] offset=1 window=912 sum=12" in captured.err
    assert captured.err.count("offset=") == 3


@pytest.mark.parametrize(
    "argv, message",
    [
        (["12", "--length", "3"], "exceeds input length"),
        (["12a"], "non-digit character"),
        (["123", "--length", "0"], "must be positive"),
        (["123", "--length", "-2"], "must be positive"),
    ],
)
def test_invalid_input_exits_one(argv: list[str], message: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert message in captured.err


def test_missing_digits_exits_two(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 2
    assert "DIGITS is required" in capsys.readouterr().err


def test_digits_and_cases_conflict() -> None:
    assert main(["123", "--cases", str(ARTICLE_CASES)]) == 2


def test_cases_pass(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--cases", str(ARTICLE_CASES)]) == 0
    out = capsys.readouterr().out
    assert "PASS running-example: max=12" in out
    assert "FAIL" not in out


def test_cases_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--cases", str(ARTICLE_CASES), "--format", "json", "--strategy", "filtered"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["failed"] == 0
    assert payload["strategy"] == "filtered"


def test_failing_case_exits_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "cases.yaml"
    p.write_text(
        "schema: windowsum/cases/v1\n"
        "cases:\n"
        "  - name: wrong\n"
        "    digits: \"09121\"\n"
        "    expect: 99\n",
        encoding="utf-8",
    )
    assert main(["--cases", str(p)]) == 1
    captured = capsys.readouterr()
    assert "FAIL wrong: expected 99, got 12" in captured.out
    assert "1 of 1 cases failed" in captured.err


def test_unreadable_case_file_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--cases", str(tmp_path / "nope.yaml")]) == 2
    assert "case file invalid" in capsys.readouterr().err
