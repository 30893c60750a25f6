#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .commands.factory import CommandFactory


class CliApplication:
    def __init__(self, project_root: Path) -> None:
        self._factory = CommandFactory(project_root)

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="filesizes",
            description="Convert between file-size expressions and byte counts",
        )
        parser.add_argument(
            "action",
            choices=["parse", "format", "select", "convert"],
        )
        parser.add_argument(
            "value",
            help='Size expression (e.g. "2 MB") or a byte count, depending on the action',
        )
        parser.add_argument(
            "env_file",
            nargs="?",
            default=None,
            help="Optional path to env file (default: config/filesizes.env)",
        )
        parser.add_argument(
            "--pattern",
            default=None,
            help='printf-style float format for the number (default: "%%.1f")',
        )
        parser.add_argument(
            "--long",
            dest="use_abbreviation",
            action="store_const",
            const=False,
            default=None,
            help="Use full unit names instead of abbreviations",
        )
        parser.add_argument(
            "--binary",
            dest="use_metric",
            action="store_const",
            const=False,
            default=None,
            help="Use 1024-based units (KiB, MiB, ...)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Log debug output to stderr",
        )
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        if args.verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            )
        command = self._factory.create(
            args.action,
            args.value,
            args.env_file,
            pattern=args.pattern,
            use_abbreviation=args.use_abbreviation,
            use_metric=args.use_metric,
        )
        return command.run()


def main() -> int:
    project_root = Path(__file__).resolve().parent.parent
    app = CliApplication(project_root)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
