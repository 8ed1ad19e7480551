from __future__ import annotations

import argparse
from typing import Optional

from catpath.assembly.assembler import PathAssembler
from catpath.core.interfaces.logging import LoggerLikeProtocol
from catpath.core.interfaces.fs import DirectoryProbeProtocol, HomeResolverProtocol
from catpath.core.models import PathArgs
from catpath.io.probes import EnvHomeResolver, StatDirectoryProbe
from catpath.parsing.parser import resolve_separator


def build_path_args(ns: argparse.Namespace) -> PathArgs:
    """Turn a parsed namespace into the immutable PathArgs configuration."""
    return PathArgs(
        sep=resolve_separator(getattr(ns, "sep", None)),
        allow_dups=bool(getattr(ns, "allow_dups", False)),
        force=bool(getattr(ns, "force", False)),
        expand=bool(getattr(ns, "expand", False)),
        help=bool(getattr(ns, "help", False)),
    )


def build_assembler(
    *,
    logger: Optional[LoggerLikeProtocol] = None,
    home_resolver: Optional[HomeResolverProtocol] = None,
    probe: Optional[DirectoryProbeProtocol] = None,
) -> PathAssembler:
    """Wire the default filesystem adapters into a PathAssembler."""
    return PathAssembler(
        home_resolver=home_resolver or EnvHomeResolver(),
        probe=probe or StatDirectoryProbe(),
        logger=logger,
    )
