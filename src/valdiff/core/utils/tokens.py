"""Word tokenization used to keep diffs aligned on word boundaries"""

import re


# line terminator | horizontal whitespace run | word | any other single character
WORD_RE = re.compile(r'\r?\n|[^\S\r\n]+|\w+|.', re.DOTALL)
NEWLINE_RE = re.compile(r'\r?\n')


def split_words(text: str) -> list[str]:
    """Split text into word tokens. Joining the result reproduces text."""
    return WORD_RE.findall(text)


def split_lines(text: str) -> list[str]:
    """Split text on line terminators, keeping a trailing empty segment (like str.split)."""
    return NEWLINE_RE.split(text)
