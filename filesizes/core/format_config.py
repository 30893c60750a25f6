from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .size_formatter import DEFAULT_PATTERN


@dataclass
class FormatConfig:
    env_file: Path | None = None
    pattern: str = DEFAULT_PATTERN
    use_abbreviation: bool = True
    use_metric: bool = True
