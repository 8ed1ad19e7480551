from __future__ import annotations

"""
Command-line option handling.

`scan_argv` walks argv the way GNU getopt does for the option string
``dfhs:x``: options and path lists may be interleaved, flags may be bundled,
``-s`` takes the rest of its token (or the next token) verbatim, ``--`` ends
option processing and errors are raised in left-to-right order. argparse
then builds the namespace from the recognized flags and renders the help.
"""

import argparse
from typing import List, NoReturn, Optional, Sequence, Tuple

from catpath.constants import DEFAULT_SEP, PROG_NAME
from catpath.core.errors import ConfigurationError

_FLAG_CHARS = frozenset("dfhx")
_SEP_CHAR = "s"
_END_OF_OPTIONS = "--"


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigurationError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def _build_parser(prog: str = PROG_NAME) -> OptionParser:
    """
    Build the CLI argument parser.

    Notes:
        - ``-h`` is a plain flag so that every other option is still
          validated before help is shown.
        - Path lists and ``-s`` values are collected by `scan_argv`; the
          parser only ever sees the separate boolean flags.
    """
    p = OptionParser(
        prog=prog,
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTION...] PATH...",
        add_help=False,
        allow_abbrev=False,
        description=(
            "Concatenate directory paths into a list.  Each PATH is a list\n"
            "of one or more directory paths, separated by a designated\n"
            "separator character (see -s option)."
        ),
    )
    p.add_argument(
        "paths",
        metavar="PATH",
        nargs="*",
        help=argparse.SUPPRESS,
    )
    p.add_argument(
        "-d",
        dest="allow_dups",
        action="store_true",
        help="allow duplicate paths",
    )
    p.add_argument(
        "-f",
        dest="force",
        action="store_true",
        help="include a path even if the directory doesn't exist",
    )
    p.add_argument(
        "-h",
        dest="help",
        action="store_true",
        help="display this help text",
    )
    p.add_argument(
        "-s",
        metavar="CHAR",
        dest="sep",
        action="append",
        help=f"specify a character used to separate paths\n(defaults to '{DEFAULT_SEP}')",
    )
    p.add_argument(
        "-x",
        dest="expand",
        action="store_true",
        help="replace tildes ('~') with the user's home directory",
    )
    return p


def resolve_separator(values: Optional[Sequence[str]]) -> str:
    """Validate every -s value in order and return the effective separator.

    Repeating -s is allowed only when every occurrence names the same
    character.
    """
    sep = DEFAULT_SEP
    found = False
    for value in values or ():
        if not value:
            raise ConfigurationError("Specified separator is an empty string")
        if len(value) != 1:
            raise ConfigurationError("Specified separator consists of multiple characters")
        if found and value != sep:
            raise ConfigurationError("Conflicting specifications for separator character")
        sep = value
        found = True
    return sep


def scan_argv(argv: Sequence[str]) -> Tuple[List[str], List[str], List[str]]:
    """Split *argv* into (flag tokens, separator values, path lists).

    >>> scan_argv(["-dx", "/a", "-s;", "--", "-f"])
    (['-d', '-x'], [';'], ['/a', '-f'])
    """
    flags: List[str] = []
    seps: List[str] = []
    paths: List[str] = []

    args = list(argv)
    i, n = (0, len(args))
    while i < n:
        tok = args[i]
        i += 1
        if tok == _END_OF_OPTIONS:
            paths.extend(args[i:])
            break
        if not tok.startswith("-") or tok == "-":
            paths.append(tok)
            continue

        for j in range(1, len(tok)):
            ch = tok[j]
            if ch in _FLAG_CHARS:
                flags.append(f"-{ch}")
                continue
            if ch != _SEP_CHAR:
                raise ConfigurationError(f"Invalid option -{ch} on command line")
            value = tok[j + 1:]
            if not value:
                if i >= n:
                    raise ConfigurationError(f"Required argument missing on -{ch} option")
                value = args[i]
                i += 1
            seps.append(value)
            resolve_separator(seps)
            break

    return flags, seps, paths


def parse_argv(argv: Sequence[str], *, prog: str = PROG_NAME) -> Tuple[argparse.Namespace, OptionParser]:
    """Parse *argv* (without the program name) and return (namespace, parser)."""
    flags, seps, paths = scan_argv(argv)
    parser = _build_parser(prog)
    ns = parser.parse_args(flags)
    ns.sep = seps or None
    ns.paths = paths
    return ns, parser


def help_text(parser: Optional[argparse.ArgumentParser] = None) -> str:
    """Return the formatted help text, without a trailing newline."""
    return (parser or _build_parser()).format_help().rstrip("\n")


__all__: List[str] = ["OptionParser", "_build_parser", "help_text", "parse_argv", "resolve_separator", "scan_argv"]
