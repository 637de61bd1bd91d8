from __future__ import annotations

import pytest

from windowsum.core.offsets import OffsetStrategy
from windowsum.integration.config import ENV_FORMAT, ENV_STRATEGY, CliConfig, load_config


def test_defaults() -> None:
    cfg = load_config({})
    assert cfg.strategy is OffsetStrategy.COUNTED
    assert cfg.output_format == "text"


def test_reads_env() -> None:
    cfg = load_config({ENV_STRATEGY: " Rolling ", ENV_FORMAT: "JSON"})
    assert cfg.strategy is OffsetStrategy.ROLLING
    assert cfg.output_format == "json"


@pytest.mark.parametrize("raw", ["", "   ", "sideways"])
def test_invalid_env_falls_back(raw: str) -> None:
    cfg = load_config({ENV_STRATEGY: raw, ENV_FORMAT: raw})
    assert cfg == CliConfig()


def test_defaults_to_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_STRATEGY, "filtered")
    assert load_config().strategy is OffsetStrategy.FILTERED


def test_config_validates() -> None:
    with pytest.raises(ValueError):
        CliConfig(output_format="xml")
    with pytest.raises(TypeError):
        CliConfig(strategy="counted")  # type: ignore[arg-type]
