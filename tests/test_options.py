from __future__ import annotations

import argparse
import unittest

import _support  # noqa: F401

from catpath.core.errors import ConfigurationError
from catpath.core.models import PathArgs
from catpath.parsing.parser import help_text, parse_argv, resolve_separator, scan_argv
from catpath.runtime.wiring import build_path_args


def _config(argv) -> PathArgs:
    ns, _ = parse_argv(argv)
    return build_path_args(ns)


class ParseArgvTests(unittest.TestCase):
    def test_defaults(self) -> None:
        ns, _ = parse_argv(["/a:/b"])
        self.assertEqual(ns.paths, ["/a:/b"])
        self.assertEqual(build_path_args(ns), PathArgs())

    def test_every_flag(self) -> None:
        cfg = _config(["-d", "-f", "-x", "-s", ";", "/a"])
        self.assertEqual(cfg, PathArgs(sep=";", allow_dups=True, force=True, expand=True))

    def test_bundled_flags(self) -> None:
        cfg = _config(["-dfx", "/a"])
        self.assertTrue(cfg.allow_dups and cfg.force and cfg.expand)

    def test_attached_separator(self) -> None:
        self.assertEqual(_config(["-s;", "/a"]).sep, ";")

    def test_options_after_paths(self) -> None:
        ns, _ = parse_argv(["/a", "-d", "/b"])
        self.assertEqual(ns.paths, ["/a", "/b"])
        self.assertTrue(ns.allow_dups)

    def test_no_paths(self) -> None:
        ns, _ = parse_argv([])
        self.assertEqual(ns.paths, [])

    def test_help_flag(self) -> None:
        self.assertTrue(_config(["-h"]).help)


# --------------------------------------------------------------------------- #
#  getopt-compatible scanning                                                 #
# --------------------------------------------------------------------------- #
class EndOfOptionsTests(unittest.TestCase):
    def test_double_dash_ends_options(self) -> None:
        ns, _ = parse_argv(["--", "-d", "a", "a"])
        self.assertEqual(ns.paths, ["-d", "a", "a"])
        self.assertFalse(ns.allow_dups)

    def test_options_before_double_dash_still_apply(self) -> None:
        ns, _ = parse_argv(["-f", "--", "/a", "-s"])
        self.assertTrue(ns.force)
        self.assertEqual(ns.paths, ["/a", "-s"])

    def test_only_first_double_dash_is_special(self) -> None:
        ns, _ = parse_argv(["--", "--", "-x"])
        self.assertEqual(ns.paths, ["--", "-x"])
        self.assertFalse(ns.expand)

    def test_lone_dash_is_a_path(self) -> None:
        ns, _ = parse_argv(["-", "-d"])
        self.assertEqual(ns.paths, ["-"])
        self.assertTrue(ns.allow_dups)


class SeparatorValueTests(unittest.TestCase):
    def test_attached_value_taken_literally(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "multiple characters"):
            _config(["-s=;", "/a;/b"])

    def test_next_token_taken_even_if_it_looks_like_a_flag(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "multiple characters"):
            _config(["-s", "-x", "/a"])

    def test_dash_as_separator(self) -> None:
        self.assertEqual(_config(["-s", "-", "/a-/b"]).sep, "-")

    def test_bundle_ending_in_s(self) -> None:
        cfg = _config(["-ds", ";", "/a"])
        self.assertTrue(cfg.allow_dups)
        self.assertEqual(cfg.sep, ";")

    def test_bundle_with_attached_separator(self) -> None:
        flags, seps, paths = scan_argv(["-fs,", "/a"])
        self.assertEqual((flags, seps, paths), (["-f"], [","], ["/a"]))


class ErrorOrderTests(unittest.TestCase):
    def test_digit_is_an_invalid_option(self) -> None:
        with self.assertRaises(ConfigurationError) as cm:
            parse_argv(["-1"])
        self.assertEqual(str(cm.exception), "Invalid option -1 on command line")

    def test_separator_error_reported_before_later_option(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "multiple characters"):
            parse_argv(["-s", "ab", "-q"])

    def test_unknown_option_reported_before_later_separator(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "Invalid option -q"):
            parse_argv(["-q", "-s", "ab"])

    def test_conflict_reported_while_scanning(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "Conflicting"):
            parse_argv(["-s", ";", "-s", ",", "-q"])

    def test_unknown_inside_bundle(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "Invalid option -q"):
            parse_argv(["-dq"])


class SeparatorValidationTests(unittest.TestCase):
    def test_empty(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "empty string"):
            _config(["-s", "", "/a"])

    def test_multiple_characters(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "multiple characters"):
            _config(["-s", "::", "/a"])

    def test_conflicting(self) -> None:
        with self.assertRaisesRegex(ConfigurationError, "Conflicting specifications"):
            _config(["-s", ";", "-s", ",", "/a"])

    def test_repeated_same_value(self) -> None:
        self.assertEqual(_config(["-s", ";", "-s", ";"]).sep, ";")

    def test_repeating_the_default_is_fine(self) -> None:
        self.assertEqual(resolve_separator([":", ":"]), ":")

    def test_no_values(self) -> None:
        self.assertEqual(resolve_separator(None), ":")

    def test_validated_even_with_help(self) -> None:
        with self.assertRaises(ConfigurationError):
            _config(["-h", "-s", "ab"])

    def test_path_args_rejects_bad_separator(self) -> None:
        with self.assertRaises(ConfigurationError):
            PathArgs(sep="")
        with self.assertRaises(ConfigurationError):
            PathArgs(sep="ab")

    def test_path_args_rejects_non_string_separator(self) -> None:
        with self.assertRaises(ConfigurationError) as cm:
            PathArgs(sep=None)
        self.assertEqual(str(cm.exception), "Separator must be a string, not NoneType")
        with self.assertRaisesRegex(ConfigurationError, "not int"):
            PathArgs(sep=5)


class ParserErrorTests(unittest.TestCase):
    def test_missing_argument(self) -> None:
        with self.assertRaises(ConfigurationError) as cm:
            parse_argv(["-s"])
        self.assertEqual(str(cm.exception), "Required argument missing on -s option")

    def test_unknown_option(self) -> None:
        with self.assertRaises(ConfigurationError) as cm:
            parse_argv(["-q", "/a"])
        self.assertEqual(str(cm.exception), "Invalid option -q on command line")

    def test_long_options_are_unknown(self) -> None:
        with self.assertRaises(ConfigurationError):
            parse_argv(["--help"])

    def test_build_path_args_tolerates_bare_namespace(self) -> None:
        self.assertEqual(build_path_args(argparse.Namespace()), PathArgs())


class HelpTextTests(unittest.TestCase):
    def test_mentions_every_flag(self) -> None:
        text = help_text()
        self.assertIn("catpath [OPTION...] PATH...", text)
        for flag in ("-d", "-f", "-h", "-s CHAR", "-x"):
            self.assertIn(flag, text)
        self.assertIn("defaults to ':'", text)
        self.assertFalse(text.endswith("\n"))


if __name__ == "__main__":
    unittest.main()
