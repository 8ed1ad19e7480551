from __future__ import annotations

from catpath.constants import DEFAULT_SEP
from catpath.cli import CatPath, main
from catpath.core.errors import AssemblyError, CatPathError, ConfigurationError
from catpath.core.models import PathArgs
from catpath.parsing.tokenizer import PathListTokenizer, tokenize
from catpath.assembly.assembler import PathAssembler, assemble
from catpath.io.probes import EnvHomeResolver, StatDirectoryProbe
from catpath.runtime.sdk import concat_paths

__version__ = '1.0.0'

__all__ = [
    'CatPath',
    'DEFAULT_SEP',
    'PathArgs',
    'PathListTokenizer',
    'PathAssembler',
    'EnvHomeResolver',
    'StatDirectoryProbe',
    'CatPathError',
    'ConfigurationError',
    'AssemblyError',
    'assemble',
    'concat_paths',
    'main',
    'tokenize',
]
