from __future__ import annotations

import dataclasses
from pathlib import Path

from ..core.config_loader import ConfigLoader
from ..core.format_config import FormatConfig
from .base import Command
from .convert_command import ConvertCommand
from .format_command import FormatCommand
from .parse_command import ParseCommand
from .select_command import SelectCommand


class CommandFactory:
    def __init__(
        self,
        project_root: Path,
        *,
        config_loader: ConfigLoader | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader(project_root)

    def create(
        self,
        action: str,
        value: str,
        env_file: str | None,
        *,
        pattern: str | None = None,
        use_abbreviation: bool | None = None,
        use_metric: bool | None = None,
    ) -> Command:
        config = self._apply_overrides(
            self._config_loader.load(env_file),
            pattern=pattern,
            use_abbreviation=use_abbreviation,
            use_metric=use_metric,
        )

        if action == "parse":
            return ParseCommand(value)
        if action == "format":
            return FormatCommand(value, config)
        if action == "select":
            return SelectCommand(value, config)
        if action == "convert":
            return ConvertCommand(value, config)
        raise SystemExit(f"Unsupported action: {action}")

    def _apply_overrides(self, config: FormatConfig, **overrides: object) -> FormatConfig:
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return config
        return dataclasses.replace(config, **changes)
