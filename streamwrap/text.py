from typing import List

import emoji

from .scanner import Scanner


def wordwrap(text: str, width: int, *, prefix: str = "", tabWidth: int = 4) -> List[str]:
    """
    Given a text string and a maximum allowed width, word-wraps that text by
    returning a list of lines, none of which are longer than the specified
    width (not counting the prefix). Embedded newlines are always honored,
    trailing whitespace is dropped from each line and words too long to fit
    are split mid-word.
    """

    scanner = Scanner(text, width)
    scanner.setPrefix(prefix)
    scanner.setTabWidth(tabWidth)
    return scanner.readLines()


def striplow(text: str, allow_safe: bool = False) -> str:
    for i in range(32):
        # Allow newline characters, allow tabs.
        if allow_safe and i in {9, 10}:
            continue
        text = text.replace(chr(i), "")
    return text


def demojize(text: str) -> str:
    # Emoji render wider than a single column, so spell them out instead.
    return emoji.demojize(text)
