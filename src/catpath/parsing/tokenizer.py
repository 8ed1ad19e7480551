from __future__ import annotations

"""
PathListTokenizer – splits separator-delimited path lists into path tokens.

Stray separators (leading, trailing or doubled) are normalized away, so the
tokenizer never yields an empty token and never fails.
"""

from typing import Iterable, List, Optional

from catpath.constants import DEFAULT_SEP


class PathListTokenizer:
    @staticmethod
    def tokenize(raw: Optional[str], sep: str = DEFAULT_SEP, *, out: Optional[List[str]] = None) -> List[str]:
        """Split *raw* on *sep* and append each path to *out* (or a new list).

        The scan alternates between skipping a run of separators and
        collecting everything up to the next separator as one token:

        >>> PathListTokenizer.tokenize('::/usr/bin::/bin:')
        ['/usr/bin', '/bin']
        """
        tokens: List[str] = out if out is not None else []
        if not raw:
            return tokens

        i, n = (0, len(raw))
        while True:
            while i < n and raw[i] == sep:
                i += 1
            if i >= n:
                break
            stop = raw.find(sep, i + 1)
            if stop == -1:
                stop = n
            tokens.append(raw[i:stop])
            i = stop
        return tokens

    @staticmethod
    def tokenize_all(raws: Iterable[Optional[str]], sep: str = DEFAULT_SEP) -> List[str]:
        """Tokenize every argument in order into one flat list."""
        tokens: List[str] = []
        for raw in raws:
            PathListTokenizer.tokenize(raw, sep, out=tokens)
        return tokens


def tokenize(raw: Optional[str], sep: str = DEFAULT_SEP) -> List[str]:
    """Module-level shortcut for `PathListTokenizer.tokenize`."""
    return PathListTokenizer.tokenize(raw, sep)
