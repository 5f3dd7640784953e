from __future__ import annotations

from enum import Enum
from typing import BinaryIO

import numpy as np

from .errors import PointerOutOfBounds, TapeIOError
from .nodes import ClearVal, DecPtr, DecVal, IncPtr, IncVal, Loop, Program, Read, Write

TAPE_SIZE = 64


class BoundsPolicy(Enum):
    """What happens when `>` or `<` would leave the tape."""

    ERROR = 'error'  # raise PointerOutOfBounds
    WRAP = 'wrap'    # continue from the other end
    CLAMP = 'clamp'  # stay on the edge cell


class Evaluator:
    """
    Tree-walking evaluator over a fixed 64-cell tape of unsigned bytes.

    Input is pulled one byte at a time from `reader` only when a Read
    instruction runs, and every Write pushes exactly one byte to `writer`.
    State is reset at the start of every `run`; it stays readable afterwards
    through `tape` and `ptr`.
    """

    def __init__(self, reader: BinaryIO, writer: BinaryIO, bounds: BoundsPolicy = BoundsPolicy.ERROR):
        self.reader = reader
        self.writer = writer
        self.bounds = bounds
        self.reset()

    def reset(self) -> None:
        self.tape = np.zeros(TAPE_SIZE, dtype=np.uint8)
        self.ptr = 0

    def run(self, bf: Program) -> None:
        self.reset()
        self._eval(bf)

    def _eval(self, bf: Program) -> None:
        tape = self.tape
        for instr in bf:
            if isinstance(instr, IncPtr):
                self._move(1)
            elif isinstance(instr, DecPtr):
                self._move(-1)
            elif isinstance(instr, IncVal):
                tape[self.ptr] = (int(tape[self.ptr]) + 1) & 0xFF
            elif isinstance(instr, DecVal):
                tape[self.ptr] = (int(tape[self.ptr]) - 1) & 0xFF
            elif isinstance(instr, ClearVal):
                tape[self.ptr] = 0
            elif isinstance(instr, Write):
                self._write(int(tape[self.ptr]))
            elif isinstance(instr, Read):
                tape[self.ptr] = self._read()
            elif isinstance(instr, Loop):
                while tape[self.ptr] != 0:
                    self._eval(instr.body)
            else:
                raise TypeError(f"Unknown instruction: {instr!r}")

    def _move(self, delta: int) -> None:
        ptr = self.ptr + delta
        if 0 <= ptr < TAPE_SIZE:
            self.ptr = ptr
        elif self.bounds is BoundsPolicy.WRAP:
            self.ptr = ptr % TAPE_SIZE
        elif self.bounds is BoundsPolicy.CLAMP:
            self.ptr = min(max(ptr, 0), TAPE_SIZE - 1)
        else:
            raise PointerOutOfBounds(
                message=f"RuntimeError: pointer moved to cell {ptr}, outside the tape [0, {TAPE_SIZE - 1}]",
                ptr=ptr,
            )

    def _read(self) -> int:
        try:
            data = self.reader.read(1)
        except OSError as e:
            raise TapeIOError(message=f"IOError: failed to read input: {e}") from e
        if not data:
            raise TapeIOError(message="IOError: unexpected end of input")
        return data[0]

    def _write(self, value: int) -> None:
        try:
            self.writer.write(bytes((value,)))
        except OSError as e:
            raise TapeIOError(message=f"IOError: failed to write output: {e}") from e
