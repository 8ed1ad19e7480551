from __future__ import annotations

"""
PathAssembler – rebuilds a clean path list from tokenized paths.

For every token, in input order:

    1. expand a leading ``~/`` (only with ``PathArgs.expand``);
    2. drop absolute paths that are not existing directories
       (unless ``PathArgs.force``);
    3. drop paths already emitted (unless ``PathArgs.allow_dups``);
    4. append, separated by ``PathArgs.sep``.

Steps 2 and 3 see the expanded value. Per-token drops are silent; only an
unexpected system error from the home lookup or the probe escapes, as
``AssemblyError``.
"""

from typing import Iterable, List, Optional, Set

from catpath.constants import HOME_PREFIX, ROOT_MARKER
from catpath.core.errors import AssemblyError
from catpath.core.interfaces.fs import DirectoryProbeProtocol, HomeResolverProtocol
from catpath.core.interfaces.logging import LoggerLikeProtocol
from catpath.core.models import PathArgs
from catpath.logging.helpers import get_logger, trace_io

_UNSET = object()


class PathAssembler:
    def __init__(
        self,
        *,
        home_resolver: HomeResolverProtocol,
        probe: DirectoryProbeProtocol,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._home_resolver = home_resolver
        self._probe = probe
        self._log = logger or get_logger("assembly")

    def assemble(self, tokens: Iterable[str], config: PathArgs) -> str:
        """Return the separator-joined list built from *tokens*."""
        parts: List[str] = []
        seen: Set[str] = set()
        home = _UNSET

        for token in tokens:
            if not token:
                continue
            curr = token

            if config.expand and curr.startswith(HOME_PREFIX):
                if home is _UNSET:
                    home = self._lookup_home()
                if home:
                    curr = home + curr[1:]
                    trace_io(self._log, "expanded home marker", token=token, path=curr)

            if not config.force and curr.startswith(ROOT_MARKER):
                if not self._probe_dir(curr):
                    trace_io(self._log, "skipped: not a directory", path=curr)
                    continue

            if not config.allow_dups:
                if curr in seen:
                    trace_io(self._log, "skipped: duplicate", path=curr)
                    continue
                seen.add(curr)

            parts.append(curr)

        return config.sep.join(parts)

    def _lookup_home(self) -> Optional[str]:
        try:
            return self._home_resolver.home()
        except AssemblyError:
            raise
        except Exception as exc:
            raise AssemblyError(f"Unable to determine home directory: {exc}") from exc

    def _probe_dir(self, path: str) -> bool:
        try:
            return self._probe.is_dir(path)
        except AssemblyError:
            raise
        except Exception as exc:
            raise AssemblyError(f"Unable to examine {path}: {exc}", path=path) from exc


def assemble(
    tokens: Iterable[str],
    config: PathArgs,
    *,
    home_resolver: Optional[HomeResolverProtocol] = None,
    probe: Optional[DirectoryProbeProtocol] = None,
) -> str:
    """Assemble *tokens* with the default environment and stat adapters."""
    from catpath.runtime.wiring import build_assembler

    return build_assembler(home_resolver=home_resolver, probe=probe).assemble(tokens, config)
