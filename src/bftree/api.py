from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .evaluator import BoundsPolicy, Evaluator
from .nodes import Program
from .optimizer import count_instructions, optimize
from .parser import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    optimize: bool = True
    bounds: BoundsPolicy = BoundsPolicy.ERROR


@dataclass(frozen=True)
class RunResult:
    program: Program
    tape: bytes
    ptr: int


def compile_string(source: str, *, options: Optional[RunOptions] = None) -> Program:
    opts = RunOptions() if options is None else options
    bf = parse(source)
    logger.debug("parsed %d instructions", count_instructions(bf))
    if opts.optimize:
        bf = optimize(bf)
    return bf


def run_string(source: str, reader: BinaryIO, writer: BinaryIO, *, options: Optional[RunOptions] = None) -> RunResult:
    opts = RunOptions() if options is None else options
    bf = compile_string(source, options=opts)
    evaluator = Evaluator(reader, writer, bounds=opts.bounds)
    evaluator.run(bf)
    logger.debug("finished with pointer at cell %d", evaluator.ptr)
    return RunResult(program=bf, tape=evaluator.tape.tobytes(), ptr=evaluator.ptr)


def run_file(path: str | Path, reader: BinaryIO, writer: BinaryIO, *, options: Optional[RunOptions] = None, encoding: str = "utf-8") -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), reader, writer, options=options)
