from __future__ import annotations

from enum import Enum
from typing import Iterator, List


class Token(Enum):
    GT = '>'
    LT = '<'
    PLUS = '+'
    MINUS = '-'
    DOT = '.'
    COMMA = ','
    LSQUARE = '['
    RSQUARE = ']'


_SYMBOLS = {t.value: t for t in Token}


class Lexer:
    """
    Scanner over Brainfuck source text.

    Yields one Token per command character and skips everything else, so any
    non-command text acts as a comment. Line and column are tracked only so
    the parser can point at the offending bracket in error messages.
    """

    def __init__(self, src: str):
        self.src = src
        self.current = 0
        self.line = 1
        self.col = 1
        # position of the most recently emitted token
        self.token_line = 1
        self.token_col = 1

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        src = self.src
        while self.current < len(src):
            ch = src[self.current]
            self.current += 1

            if ch == '\n':
                self.line += 1
                self.col = 1
                continue

            col = self.col
            self.col += 1
            token = _SYMBOLS.get(ch)
            if token is None:
                continue

            self.token_line = self.line
            self.token_col = col
            return token

        raise StopIteration


def tokenize(src: str) -> List[Token]:
    return list(Lexer(src))
