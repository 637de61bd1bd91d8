"""
Command-line and case-file integration layer
"""

from .cases import CaseFileError, CaseOutcome, WindowCase, load_cases, parse_cases, run_cases
from .config import CliConfig, load_config

__all__ = [
    "CaseFileError",
    "CaseOutcome",
    "WindowCase",
    "load_cases",
    "parse_cases",
    "run_cases",
    "CliConfig",
    "load_config",
]
