from __future__ import annotations

from typing import Dict, List, Tuple

from .errors import make_unmatched_close, make_unmatched_open
from .lexer import Lexer, Token
from .nodes import DecPtr, DecVal, IncPtr, IncVal, Instruction, Loop, Program, Read, Write


# Tokens that map one-to-one onto an instruction.
_SIMPLE: Dict[Token, Instruction] = {
    Token.GT: IncPtr(),
    Token.LT: DecPtr(),
    Token.PLUS: IncVal(),
    Token.MINUS: DecVal(),
    Token.DOT: Write(),
    Token.COMMA: Read(),
}


class Parser:
    """
    Recursive descent parser building the nested instruction tree.

    `parse` handles the top level and `_parse_loop` the inside of an open
    loop. Each `[` recurses into `_parse_loop`, which consumes the matching
    `]` and hands back the finished body, so a Loop node can only ever be
    built from a complete, balanced sequence.
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        # (line, col) of every `[` whose body is still being parsed
        self._open: List[Tuple[int, int]] = []

    def parse(self) -> Program:
        bf: Program = []

        for token in self.lexer:
            if token is Token.LSQUARE:
                bf.append(Loop(self._parse_loop()))
            elif token is Token.RSQUARE:
                raise make_unmatched_close(
                    source=self.lexer.src,
                    line=self.lexer.token_line,
                    column=self.lexer.token_col,
                )
            else:
                bf.append(_SIMPLE[token])

        return bf

    def _parse_loop(self) -> Program:
        self._open.append((self.lexer.token_line, self.lexer.token_col))
        bf: Program = []

        for token in self.lexer:
            if token is Token.LSQUARE:
                bf.append(Loop(self._parse_loop()))
            elif token is Token.RSQUARE:
                self._open.pop()
                return bf
            else:
                bf.append(_SIMPLE[token])

        line, col = self._open[-1]
        raise make_unmatched_open(
            source=self.lexer.src,
            line=line,
            column=col,
            unclosed=len(self._open),
        )


def parse(src: str) -> Program:
    return Parser(Lexer(src)).parse()
