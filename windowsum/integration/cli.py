"""
Command-line surface for the window digit-sum kernel.

    windowsum 09121                 -> 12  (length defaults to ceil(5 / 2) = 3)
    windowsum 09121 --length 2
    windowsum --cases cases/article_examples.yaml

Exit codes: 0 ok, 1 invalid input or failing case, 2 usage / unreadable case file.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..core.errors import WindowSumError
from ..core.offsets import OffsetStrategy
from ..core.window import default_window_length, evaluate_or_raise, window_sums
from .cases import CaseFileError, load_cases, run_cases
from .config import OUTPUT_FORMATS, CliConfig, load_config


TAG = "[windowsum]"


def _log(msg: str) -> None:
    print(f"{TAG} {msg}", file=sys.stderr)


def build_parser(config: CliConfig) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="windowsum",
        description="Maximum digit-sum over fixed-length windows of a digit string.",
    )
    p.add_argument("digits", nargs="?", help="Digit string, e.g. 09121")
    p.add_argument("--length", "-L", type=int, default=None, help="Window length (default: ceil(N/2))")
    p.add_argument(
        "--strategy",
        choices=[s.value for s in OffsetStrategy],
        default=config.strategy.value,
        help="Offset enumeration strategy",
    )
    p.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default=config.output_format)
    p.add_argument("--verbose", "-v", action="store_true", help="Write every window and its sum to stderr")
    p.add_argument("--cases", type=Path, default=None, help="Run a YAML case file instead of one input")
    return p


def _run_single(digits: str, length: int, strategy: OffsetStrategy, output_format: str, verbose: bool) -> int:
    try:
        result = evaluate_or_raise(digits, length, strategy=strategy)
    except WindowSumError as exc:
        _log(f"error: {exc}")
        return 1

    if verbose:
        sums = window_sums(digits, length, strategy=strategy)
        for offset, s in enumerate(sums):
            _log(f"offset={offset} window={digits[offset:offset + length]} sum={s}")

    if output_format == "json":
        print(
            json.dumps(
                {
                    "digits": digits,
                    "length": length,
                    "strategy": strategy.value,
                    "max": result.value,
                    "best_offsets": list(result.best_offsets),
                },
                sort_keys=True,
            )
        )
    else:
        print(result.value)
    return 0


def _run_cases(path: Path, strategy: OffsetStrategy, output_format: str) -> int:
    try:
        cases = load_cases(path)
    except CaseFileError as exc:
        _log(f"case file invalid: {exc}")
        return 2

    outcomes = run_cases(cases, strategy=strategy)
    failed = [o for o in outcomes if not o.passed]
    if output_format == "json":
        print(
            json.dumps(
                {
                    "strategy": strategy.value,
                    "passed": len(outcomes) - len(failed),
                    "failed": len(failed),
                    "cases": [{"name": o.name, "passed": o.passed, "detail": o.detail} for o in outcomes],
                },
                sort_keys=True,
            )
        )
    else:
        for o in outcomes:
            print(f"{'PASS' if o.passed else 'FAIL'} {o.name}: {o.detail}")
    if failed:
        _log(f"{len(failed)} of {len(outcomes)} cases failed")
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)
    strategy = OffsetStrategy(args.strategy)

    if args.cases is not None:
        if args.digits is not None:
            _log("error: pass either DIGITS or --cases, not both")
            return 2
        return _run_cases(args.cases, strategy, args.output_format)

    if args.digits is None:
        parser.print_usage(sys.stderr)
        _log("error: DIGITS is required")
        return 2

    length = args.length if args.length is not None else default_window_length(len(args.digits))
    return _run_single(args.digits, length, strategy, args.output_format, args.verbose)


if __name__ == "__main__":
    raise SystemExit(main())
