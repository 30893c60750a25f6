from __future__ import annotations

import os
from pathlib import Path

from .errors import InvalidPatternError
from .format_config import FormatConfig
from .size_formatter import DEFAULT_PATTERN, SizeFormatter

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigLoader:
    def __init__(self, project_root: Path) -> None:
        self._project_root = project_root

    @property
    def default_env_file(self) -> Path:
        return self._project_root / "config" / "filesizes.env"

    def load(self, env_path: str | None = None) -> FormatConfig:
        if env_path:
            env_file = Path(env_path).expanduser()
            if not env_file.is_file():
                raise SystemExit(f"Missing env file: {env_file}")
        elif self.default_env_file.is_file():
            env_file = self.default_env_file
        else:
            return FormatConfig()

        env_values = self._parse_env_file(env_file)
        pattern = env_values.get("FILESIZE_PATTERN", DEFAULT_PATTERN)
        self._validate_pattern(pattern)

        return FormatConfig(
            env_file=env_file,
            pattern=pattern,
            use_abbreviation=self._parse_bool(env_values, "FILESIZE_USE_ABBREVIATION", True),
            use_metric=self._parse_bool(env_values, "FILESIZE_USE_METRIC", True),
        )

    def _parse_env_file(self, env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        for raw_line in env_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            values[key.strip()] = os.path.expandvars(cleaned)
        return values

    def _parse_bool(self, env_values: dict[str, str], name: str, default: bool) -> bool:
        raw = env_values.get(name)
        if raw is None or raw == "":
            return default
        lowered = raw.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise SystemExit(f"Invalid boolean for {name}: {raw}")

    def _validate_pattern(self, pattern: str) -> None:
        try:
            SizeFormatter.render_number(pattern, 1.0)
        except InvalidPatternError as exc:
            raise SystemExit(f"Invalid format pattern: {pattern}") from exc
