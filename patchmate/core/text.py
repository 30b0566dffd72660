"""
Line splitting and joining that preserves the line-ending style of a buffer.
"""

import re
from dataclasses import dataclass
from typing import List

LF = '\n'
CRLF = '\r\n'

_LINE_BREAK = re.compile(r'\r?\n')


@dataclass
class SplitText:
    lines: List[str]
    eol: str
    ends_with_newline: bool


def split_lines(text: str) -> List[str]:
    """Split patch text on LF or CRLF. Used by both parsing passes."""
    return _LINE_BREAK.split(text)


def detect_line_ending(text: str) -> str:
    """CRLF if it occurs anywhere in the text, LF otherwise."""
    return CRLF if CRLF in text else LF


def split_text(text: str) -> SplitText:
    """
    Split a buffer into lines, remembering its terminator and final newline.

    An empty buffer has zero lines rather than one empty line, so that text
    inserted into a new file does not pick up a phantom leading line. When
    the buffer ends with a newline the split keeps a trailing empty element;
    joining with the same terminator restores the newline.
    """
    lines = split_lines(text) if text else []
    return SplitText(
        lines=lines,
        eol=detect_line_ending(text),
        ends_with_newline=text.endswith(LF),
    )


def join_text(lines: List[str], eol: str, ends_with_newline: bool) -> str:
    """Join lines with eol, dropping one trailing terminator the original lacked."""
    joined = eol.join(lines)
    if not ends_with_newline and joined.endswith(eol):
        joined = joined[:-len(eol)]
    return joined
