from dataclasses import dataclass

from catpath.constants import DEFAULT_SEP
from catpath.core.errors import ConfigurationError


@dataclass(frozen=True)
class PathArgs:
    """What the command line is asking for.

    Built once from the parsed options and read-only afterwards.
    """
    sep: str = DEFAULT_SEP
    allow_dups: bool = False
    force: bool = False
    expand: bool = False
    help: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.sep, str):
            raise ConfigurationError(f'Separator must be a string, not {type(self.sep).__name__}')
        if not self.sep:
            raise ConfigurationError('Specified separator is an empty string')
        if len(self.sep) != 1:
            raise ConfigurationError('Specified separator consists of multiple characters')
