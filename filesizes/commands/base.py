from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

from ..core.errors import FilesizeError

T = TypeVar("T")


class Command(ABC):
    @abstractmethod
    def run(self) -> int:
        raise NotImplementedError

    def _call(self, func: Callable[..., T], *args: object) -> T:
        """Run a library call, turning its errors into a CLI exit message."""
        try:
            return func(*args)
        except FilesizeError as exc:
            raise SystemExit(f"Error: {exc}") from exc
