"""
Boundary detection for display paragraphs: line breaks and sentences.
"""

import re
import string
from typing import Iterator, List, Optional

# A run of line breaks, CRLF or LF. A lone CR is not a break.
LINE_BREAKS = re.compile(r"(?:\r?\n)+")

# Collapsing works per CRLF: a "\r\n\r\n" blank line becomes two spaces
LINE_BREAK = re.compile(r"\r?\n+")

TERMINAL_MARKS = frozenset(".?!")

# Characters that may open a sentence after a terminal mark and whitespace
SENTENCE_OPENERS = frozenset(
    string.ascii_uppercase + string.digits + "\"“‘'()"
)


def iter_newline_units(text: Optional[str]) -> Iterator[str]:
    """Yield trimmed, non-empty lines of text, in order."""
    if not text:
        return
    for piece in LINE_BREAKS.split(text):
        piece = piece.strip()
        if piece:
            yield piece


def split_by_newlines(text: Optional[str]) -> List[str]:
    """Split text on line breaks into trimmed, non-empty units."""
    return list(iter_newline_units(text))


def collapse_line_breaks(text: str) -> str:
    """Replace each line break (CRLF or a run of LF) with a space."""
    return LINE_BREAK.sub(" ", text)


def _split_at_sentence_starts(text: str) -> List[str]:
    """Split after a terminal mark followed by whitespace and a sentence opener.

    The mark stays with the sentence it ends and the whitespace between the
    two sentences is dropped. Marks not followed by whitespace (decimals,
    "?!" runs) or followed by a lowercase word are not boundaries.
    """
    pieces = []
    start = 0
    pos = 0
    length = len(text)

    while pos < length:
        if text[pos] in TERMINAL_MARKS:
            nxt = pos + 1
            while nxt < length and text[nxt].isspace():
                nxt += 1
            if nxt > pos + 1 and nxt < length and text[nxt] in SENTENCE_OPENERS:
                pieces.append(text[start : pos + 1])
                start = pos = nxt
                continue
        pos += 1

    pieces.append(text[start:])
    return pieces


def _split_after_every_mark(text: str) -> List[str]:
    """Split right after each terminal mark, whatever follows it."""
    pieces = []
    start = 0
    for pos, char in enumerate(text):
        if char in TERMINAL_MARKS:
            pieces.append(text[start : pos + 1])
            start = pos + 1
    pieces.append(text[start:])
    return pieces


def _clean(pieces: List[str]) -> List[str]:
    return [p.strip() for p in pieces if p.strip()]


def split_by_sentences(text: Optional[str]) -> List[str]:
    """
    Split text into trimmed, non-empty sentences.

    Line breaks are ignored. A boundary is only trusted when the next
    sentence visibly starts (capital, digit, quote or parenthesis). If that
    finds no boundary at all, the text is re-split after every ".", "?" and
    "!", which over-splits abbreviations but recovers some granularity from
    text written without capitalisation cues.

    Args:
        text: Raw text; None and "" give an empty list

    Returns:
        Sentences in their original order
    """
    if not text:
        return []

    flat = collapse_line_breaks(text)
    sentences = _clean(_split_at_sentence_starts(flat))
    if len(sentences) == 1:
        return _clean(_split_after_every_mark(flat))
    return sentences
