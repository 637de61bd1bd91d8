"""
Fail-closed loader and runner for window digit-sum case files.

A case file is YAML:

    schema: windowsum/cases/v1
    cases:
      - name: article-example
        digits: "09121"
        length: 3          # optional, defaults to ceil(len(digits) / 2)
        expect: 12         # or: expect_error: NoValidWindowError

Malformed files raise ``CaseFileError``; nothing is skipped silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from ..core.errors import InvalidCharacterError, InvalidLengthError, NoValidWindowError, WindowSumError
from ..core.offsets import OffsetStrategy
from ..core.window import default_window_length, max_window_digit_sum


SCHEMA = "windowsum/cases/v1"

_ERROR_TYPES: dict[str, type[WindowSumError]] = {
    "InvalidCharacterError": InvalidCharacterError,
    "InvalidLengthError": InvalidLengthError,
    "NoValidWindowError": NoValidWindowError,
}


class CaseFileError(Exception):
    """Raised when a case file is unreadable or malformed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class WindowCase:
    name: str
    digits: str
    length: int
    expect: Optional[int] = None
    expect_error: Optional[str] = None


@dataclass(frozen=True)
class CaseOutcome:
    name: str
    passed: bool
    detail: str


def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise CaseFileError(f"{name} must be an object")
    return obj


def _require_list(obj: Any, *, name: str) -> list[Any]:
    if not isinstance(obj, list):
        raise CaseFileError(f"{name} must be a list")
    return obj


def _require_str(obj: Any, *, name: str, allow_empty: bool = False) -> str:
    if not isinstance(obj, str):
        raise CaseFileError(f"{name} must be a string")
    if not allow_empty and not obj.strip():
        raise CaseFileError(f"{name} must be a non-empty string")
    return obj


def _require_int(obj: Any, *, name: str) -> int:
    if not isinstance(obj, int) or isinstance(obj, bool):
        raise CaseFileError(f"{name} must be an int")
    return obj


def _parse_case(obj: Any, *, idx: int) -> WindowCase:
    case = _require_mapping(obj, name=f"cases[{idx}]")
    name = _require_str(case.get("name"), name=f"cases[{idx}].name").strip()
    digits = _require_str(case.get("digits"), name=f"cases[{idx}].digits", allow_empty=True)

    raw_length = case.get("length")
    if raw_length is None:
        length = default_window_length(len(digits))
    else:
        length = _require_int(raw_length, name=f"cases[{idx}].length")

    has_expect = "expect" in case
    has_error = "expect_error" in case
    if has_expect == has_error:
        raise CaseFileError(f"cases[{idx}] must set exactly one of expect / expect_error")

    if has_expect:
        return WindowCase(
            name=name,
            digits=digits,
            length=length,
            expect=_require_int(case["expect"], name=f"cases[{idx}].expect"),
        )
    err = _require_str(case["expect_error"], name=f"cases[{idx}].expect_error").strip()
    if err not in _ERROR_TYPES:
        raise CaseFileError(f"cases[{idx}].expect_error unknown: {err}")
    return WindowCase(name=name, digits=digits, length=length, expect_error=err)


def parse_cases(root_obj: Any) -> list[WindowCase]:
    root = _require_mapping(root_obj, name="case file")
    schema = _require_str(root.get("schema"), name="case file.schema")
    if schema != SCHEMA:
        raise CaseFileError(f"unsupported case file schema: {schema}")

    out: list[WindowCase] = []
    seen: set[str] = set()
    for idx, obj in enumerate(_require_list(root.get("cases"), name="case file.cases")):
        case = _parse_case(obj, idx=idx)
        if case.name in seen:
            raise CaseFileError(f"duplicate case name: {case.name}")
        seen.add(case.name)
        out.append(case)
    return out


def load_cases(path: Path) -> list[WindowCase]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CaseFileError(f"cannot read case file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CaseFileError(f"invalid YAML in {path}: {exc}") from exc
    return parse_cases(data)


def run_case(case: WindowCase, *, strategy: OffsetStrategy = OffsetStrategy.COUNTED) -> CaseOutcome:
    try:
        got = max_window_digit_sum(case.digits, case.length, strategy=strategy)
    except WindowSumError as exc:
        got_error = type(exc).__name__
        if case.expect_error == got_error:
            return CaseOutcome(case.name, True, f"raised {got_error}")
        return CaseOutcome(case.name, False, f"unexpected {got_error}: {exc}")

    if case.expect_error is not None:
        return CaseOutcome(case.name, False, f"expected {case.expect_error}, got {got}")
    if got != case.expect:
        return CaseOutcome(case.name, False, f"expected {case.expect}, got {got}")
    return CaseOutcome(case.name, True, f"max={got}")


def run_cases(
    cases: Iterable[WindowCase], *, strategy: OffsetStrategy = OffsetStrategy.COUNTED
) -> list[CaseOutcome]:
    return [run_case(c, strategy=strategy) for c in cases]
