from __future__ import annotations

from dataclasses import dataclass
from typing import List


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


@dataclass
class BFTreeError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFTreeParseError(BFTreeError):
    line: int
    column: int
    context: str


@dataclass
class UnmatchedLoopClose(BFTreeParseError):
    """A `]` was found with no open loop to close."""


@dataclass
class UnmatchedLoopOpen(BFTreeParseError):
    """The source ended while one or more `[` were still open."""

    unclosed: int = 1


@dataclass
class BFTreeRuntimeError(BFTreeError):
    pass


@dataclass
class TapeIOError(BFTreeRuntimeError):
    """Reading from the input or writing to the output failed."""


@dataclass
class PointerOutOfBounds(BFTreeRuntimeError):
    ptr: int


def make_unmatched_close(*, source: str, line: int, column: int) -> UnmatchedLoopClose:
    ctx = _build_context(source.split('\n'), line)
    return UnmatchedLoopClose(
        message=f"ParseError: `]` at line {line}, column {column} does not have a matching `[`\n{ctx}",
        line=line,
        column=column,
        context=ctx,
    )


def make_unmatched_open(*, source: str, line: int, column: int, unclosed: int) -> UnmatchedLoopOpen:
    ctx = _build_context(source.split('\n'), line)
    return UnmatchedLoopOpen(
        message=(
            f"ParseError: found {unclosed} unclosed `[` "
            f"(innermost at line {line}, column {column})\n{ctx}"
        ),
        line=line,
        column=column,
        context=ctx,
        unclosed=unclosed,
    )
