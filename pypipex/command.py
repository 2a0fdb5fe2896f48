"""Splitting a command line into an argument vector."""

from __future__ import annotations

import re

# A piece of the command is either a quoted run (single or double quotes,
# which may be left open at the end of the text) or a run of non-space
# characters. Quotes only count when they open a piece.
_PIECE_PATTERN = re.compile(
    r""" *(?:(?P<quote>['"])(?P<quoted>.*?)(?:(?P<close>(?P=quote))|\Z)|(?P<word>[^ ]+))""",
    re.DOTALL,
)


def parse_command(text: str) -> list[str]:
    """Split ``text`` on spaces, honouring quotes that open a word.

    A quoted word runs to the matching quote or to the end of the text.
    Text made only of spaces yields itself as the single word; empty text
    yields no words. A quote that is the very last character, with nothing
    after it, is an error.
    """
    if text and not text.strip(" "):
        return [text]

    words: list[str] = []
    for match in _PIECE_PATTERN.finditer(text):
        word = match.group("word")
        if word is not None:
            words.append(word)
            continue
        quoted = match.group("quoted")
        if match.group("close") is None and not quoted:
            raise ValueError("unterminated quote at end of command")
        words.append(quoted)
    return words