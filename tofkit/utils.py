"""Small string helpers."""

from __future__ import annotations


def split_into_tokens(s: str, delimiter: str) -> list[str]:
    """Split ``s`` on a single-character ``delimiter``.

    Every delimiter produces a boundary, so empty tokens are kept and an
    empty input yields a single empty token.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return s.split(delimiter)