from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from .nodes import ClearVal, DecPtr, DecVal, IncPtr, IncVal, Loop, Program, Read, Write

logger = logging.getLogger(__name__)

Pass = Callable[[Program], Program]

# Adjacent (left, right) node types that undo each other.
_INVERSE_PAIRS = {
    (IncPtr, DecPtr),
    (DecPtr, IncPtr),
    (IncVal, DecVal),
    (DecVal, IncVal),
}


# ---------------- Passes ----------------
def cancel(bf: Program) -> Program:
    """
    Cancel out adjacent increments and decrements, in place.

    `><` `<>` `+-` `-+`
    """
    # Go from back to front, to reduce the number of shifts when removing
    i = len(bf) - 1

    while i >= 0:
        cur = bf[i]
        if isinstance(cur, Loop):
            cancel(cur.body)
            i -= 1
        elif i > 0 and (type(bf[i - 1]), type(cur)) in _INVERSE_PAIRS:
            del bf[i - 1:i + 1]
            # the removal joins bf[i-2] and the old bf[i+1]; look at that pair next
            i = min(i - 1, len(bf) - 1)
        else:
            i -= 1

    return bf


def clearloop(bf: Program) -> Program:
    """Replace `[+]` and `[-]` by a single ClearVal, in place."""
    for idx, node in enumerate(bf):
        if not isinstance(node, Loop):
            continue
        if node.body == [IncVal()] or node.body == [DecVal()]:
            bf[idx] = ClearVal()
        else:
            clearloop(node.body)
    return bf


# cancellation first: it can shrink a body down to `[-]`
DEFAULT_PASSES: List[Pass] = [cancel, clearloop]


def optimize(bf: Program, passes: Iterable[Pass] = DEFAULT_PASSES) -> Program:
    for opt_pass in passes:
        before = count_instructions(bf)
        bf = opt_pass(bf)
        logger.debug("%s: %d -> %d instructions", opt_pass.__name__, before, count_instructions(bf))
    return bf


# ---------------- Emit + counts ----------------
_EMIT = {
    IncPtr: '>',
    DecPtr: '<',
    IncVal: '+',
    DecVal: '-',
    ClearVal: '[-]',
    Write: '.',
    Read: ',',
}


def emit(bf: Program) -> str:
    out: List[str] = []
    for n in bf:
        if isinstance(n, Loop):
            out.append("[" + emit(n.body) + "]")
        else:
            out.append(_EMIT[type(n)])
    return "".join(out)


def count_instructions(bf: Program) -> int:
    """Number of non-Loop nodes in the tree, loop bodies included."""
    c = 0
    for n in bf:
        if isinstance(n, Loop):
            c += count_instructions(n.body)
        else:
            c += 1
    return c
