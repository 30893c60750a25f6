from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from filesizes.core.format_config import FormatConfig

EnvWriter = Callable[[dict[str, str]], Path]


@pytest.fixture
def write_env(tmp_path: Path) -> EnvWriter:
    def _write(values: dict[str, str]) -> Path:
        env_file = tmp_path / "filesizes.env"
        text = "\n".join(f"{key}={value}" for key, value in values.items()) + "\n"
        env_file.write_text(text, encoding="utf-8")
        return env_file

    return _write


@pytest.fixture
def binary_long_config(tmp_path: Path) -> FormatConfig:
    return FormatConfig(
        env_file=tmp_path / "filesizes.env",
        pattern="%.2f",
        use_abbreviation=False,
        use_metric=False,
    )
