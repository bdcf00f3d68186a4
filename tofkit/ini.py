"""Reading ``key=value`` parameter lists from strings and files."""

from __future__ import annotations

import logging
import os

from .status import Status, TofError

_log = logging.getLogger(__name__)


def _parse_lines(lines: list[str]) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        if not sep:
            _log.warning(
                "Unexpected format on this line:\n%s\nExpecting 'key=value' format",
                line,
            )
            continue
        if not value:
            _log.warning("No value found for parameter: %s", key)
            continue
        # The first occurrence of a key wins.
        pairs.setdefault(key, value)
    return dict(sorted(pairs.items()))


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def parse_key_value_string(text: str) -> dict[str, str]:
    """Parse newline-separated ``key=value`` pairs, sorted by key.

    Lines without ``=`` and keys with an empty value are skipped with a
    warning; the first value seen for a key is kept.
    """
    return _parse_lines(_split_lines(text))


def read_key_value_file(path: str | os.PathLike[str]) -> dict[str, str]:
    """Parse a ``key=value`` file; raises :class:`TofError` if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", newline="\n") as stream:
            text = stream.read()
    except OSError as exc:
        _log.error("Failed to open: %s", path)
        raise TofError(Status.UNREACHABLE, f"Failed to open: {path}") from exc
    return parse_key_value_string(text)