from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class IncPtr:
    """`>` move the pointer one cell right."""


@dataclass(frozen=True)
class DecPtr:
    """`<` move the pointer one cell left."""


@dataclass(frozen=True)
class IncVal:
    """`+` add one to the current cell."""


@dataclass(frozen=True)
class DecVal:
    """`-` subtract one from the current cell."""


@dataclass(frozen=True)
class ClearVal:
    """`[-]` or `[+]`: reset the current cell to zero."""


@dataclass(frozen=True)
class Write:
    """`.` output the current cell."""


@dataclass(frozen=True)
class Read:
    """`,` store one input byte in the current cell."""


@dataclass(frozen=True)
class Loop:
    """`[ ... ]` repeat body while the current cell is non-zero."""

    body: List["Instruction"] = field(default_factory=list)


Instruction = Union[IncPtr, DecPtr, IncVal, DecVal, ClearVal, Write, Read, Loop]
Program = List[Instruction]
