"""Environment-driven defaults for the `windowsum` command.

Blank or unrecognized values fall back to the defaults; command-line flags
override whatever is read here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.offsets import OffsetStrategy


ENV_STRATEGY = "WINDOWSUM_STRATEGY"
ENV_FORMAT = "WINDOWSUM_FORMAT"

OUTPUT_FORMATS = ("text", "json")


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _env_choice(env: Mapping[str, str], name: str, default: str, *, choices: tuple[str, ...]) -> str:
    v = _env_str(env, name, default).lower()
    return v if v in choices else default


@dataclass(frozen=True)
class CliConfig:
    strategy: OffsetStrategy = OffsetStrategy.COUNTED
    output_format: str = "text"

    def __post_init__(self) -> None:
        if not isinstance(self.strategy, OffsetStrategy):
            raise TypeError("strategy must be an OffsetStrategy")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {OUTPUT_FORMATS}: {self.output_format}")


def load_config(env: Optional[Mapping[str, str]] = None) -> CliConfig:
    """Read ``CliConfig`` from ``env`` (defaults to ``os.environ``)."""
    if env is None:
        env = os.environ
    strategies = tuple(s.value for s in OffsetStrategy)
    strategy = _env_choice(env, ENV_STRATEGY, OffsetStrategy.COUNTED.value, choices=strategies)
    output_format = _env_choice(env, ENV_FORMAT, "text", choices=OUTPUT_FORMATS)
    return CliConfig(strategy=OffsetStrategy(strategy), output_format=output_format)
