from __future__ import annotations

"""
Filesystem adapters used while assembling a path list.

    * EnvHomeResolver    – home directory from the environment.
    * StatDirectoryProbe – "is this an existing, reachable directory?"
"""

import errno
import os
import stat
from typing import Mapping, Optional, Sequence

from catpath.constants import HOME_ENV_VARS
from catpath.core.errors import AssemblyError
from catpath.core.interfaces.logging import LoggerLikeProtocol
from catpath.logging.helpers import get_logger, trace_io

# stat() failures that simply mean "not a usable directory".
_NEGATIVE_ERRNOS = frozenset(
    {
        errno.ENOENT,
        errno.ENOTDIR,
        errno.EACCES,
        errno.EPERM,
        errno.ELOOP,
        errno.ENAMETOOLONG,
    }
)


class EnvHomeResolver:
    """Resolve the home directory from environment variables.

    Unset or empty variables yield None; nothing here ever raises.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        *,
        names: Sequence[str] = HOME_ENV_VARS,
    ) -> None:
        self._environ = environ
        self._names = tuple(names)

    def home(self) -> Optional[str]:
        env = os.environ if self._environ is None else self._environ
        for name in self._names:
            value = env.get(name)
            if value:
                return value
        return None


class StatDirectoryProbe:
    """Directory check built on os.stat (symlinks are followed)."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger("io.probe")

    def is_dir(self, path: str) -> bool:
        try:
            st = os.stat(path)
        except ValueError:
            # embedded NUL byte
            return False
        except OSError as exc:
            if exc.errno in _NEGATIVE_ERRNOS:
                trace_io(self._log, "stat failed", path=path, errno=exc.errno)
                return False
            raise AssemblyError(f"Unable to examine {path}: {exc.strerror or exc}", path=path) from exc
        return stat.S_ISDIR(st.st_mode)
