from __future__ import annotations

from typing import Optional

from catpath.constants import DEFAULT_SEP
from catpath.core.interfaces.fs import DirectoryProbeProtocol, HomeResolverProtocol
from catpath.core.models import PathArgs
from catpath.parsing.tokenizer import PathListTokenizer
from catpath.runtime.wiring import build_assembler


def concat_paths(
    *path_lists: Optional[str],
    sep: str = DEFAULT_SEP,
    allow_dups: bool = False,
    force: bool = False,
    expand: bool = False,
    home_resolver: Optional[HomeResolverProtocol] = None,
    probe: Optional[DirectoryProbeProtocol] = None,
) -> str:
    """Programmatic equivalent of ``catpath [-d] [-f] [-x] [-s SEP] LIST...``.

    >>> concat_paths('/a::/b', '/a', force=True)
    '/a:/b'
    """
    config = PathArgs(sep=sep, allow_dups=allow_dups, force=force, expand=expand)
    tokens = PathListTokenizer.tokenize_all(path_lists, config.sep)
    return build_assembler(home_resolver=home_resolver, probe=probe).assemble(tokens, config)
