from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HomeResolverProtocol(Protocol):
    def home(self) -> Optional[str]:
        """Return the invoking user's home directory, or None if unknown."""
        ...


@runtime_checkable
class DirectoryProbeProtocol(Protocol):
    def is_dir(self, path: str) -> bool:
        """Return True if *path* names an existing, reachable directory."""
        ...
