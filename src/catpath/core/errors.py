from __future__ import annotations

from typing import Optional


class CatPathError(RuntimeError):
    """Base class for every error catpath reports on its own."""


class ConfigurationError(CatPathError):
    """Invalid command-line options, detected before any assembly starts."""


class AssemblyError(CatPathError):
    """Unexpected system failure while expanding or probing a path."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
