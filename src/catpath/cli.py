from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from catpath.constants import ENV_DEBUG, ENV_JSON_LOGS, PROG_NAME
from catpath.core.errors import CatPathError
from catpath.core.interfaces.fs import DirectoryProbeProtocol, HomeResolverProtocol
from catpath.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from catpath.logging.factory import DefaultLoggerFactory
from catpath.logging.helpers import get_logger, resolve_level
from catpath.parsing.parser import help_text, parse_argv
from catpath.parsing.tokenizer import PathListTokenizer
from catpath.runtime.wiring import build_assembler, build_path_args


logger = get_logger('catpath')


def _configure_logging(enable_json: bool, prog: str = PROG_NAME) -> LoggerLikeProtocol:
    """Configure process-wide logging, either JSON or plain `prog: message` text."""
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=resolve_level(), prog=prog)
    lg = factory.get_logger('catpath')
    global logger
    logger = lg
    return lg


def _prog_name(argv0: Optional[str]) -> str:
    name = Path(argv0).name if argv0 else ''
    if not name or name == '__main__.py':
        return PROG_NAME
    return name


class CatPath:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        prog: str = PROG_NAME,
        home_resolver: Optional[HomeResolverProtocol] = None,
        probe: Optional[DirectoryProbeProtocol] = None,
    ) -> str:
        """Run the tool with an argv-like sequence and return the text to print.

        The result is the help text when -h is given, otherwise the assembled
        path list. Option errors raise ConfigurationError before any path is
        examined.
        """
        ns, parser = parse_argv(argv, prog=prog)
        config = build_path_args(ns)
        if config.help:
            return help_text(parser)

        tokens = PathListTokenizer.tokenize_all(ns.paths, config.sep)
        assembler = build_assembler(
            logger=get_logger('assembly'),
            home_resolver=home_resolver,
            probe=probe,
        )
        return assembler.assemble(tokens, config)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `catpath` console script and `python -m catpath`."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = _prog_name(sys.argv[0] if sys.argv else None)
    _configure_logging(os.getenv(ENV_JSON_LOGS) == '1', prog)
    try:
        out = CatPath.run(args, prog=prog)
        sys.stdout.write(out + '\n')
        sys.stdout.flush()
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except CatPathError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv(ENV_DEBUG) == '1':
            raise
        logger.error('Exception encountered: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
