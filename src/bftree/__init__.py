import logging

from .api import RunOptions, RunResult, compile_string, run_file, run_string
from .errors import (
    BFTreeError,
    BFTreeParseError,
    BFTreeRuntimeError,
    PointerOutOfBounds,
    TapeIOError,
    UnmatchedLoopClose,
    UnmatchedLoopOpen,
)
from .evaluator import TAPE_SIZE, BoundsPolicy, Evaluator
from .lexer import Lexer, Token, tokenize
from .optimizer import cancel, clearloop, emit, optimize
from .parser import Parser, parse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Lexer',
    'Token',
    'tokenize',
    'Parser',
    'parse',
    'cancel',
    'clearloop',
    'optimize',
    'emit',
    'Evaluator',
    'BoundsPolicy',
    'TAPE_SIZE',
    'RunOptions',
    'RunResult',
    'compile_string',
    'run_string',
    'run_file',
    'BFTreeError',
    'BFTreeParseError',
    'BFTreeRuntimeError',
    'UnmatchedLoopClose',
    'UnmatchedLoopOpen',
    'TapeIOError',
    'PointerOutOfBounds',
]
