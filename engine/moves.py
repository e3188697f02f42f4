"""Move value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet

from engine.rules import Position


class MoveKind(str, Enum):
    """How a move captures, if at all."""

    NO_CAPTURE = "no_capture"
    APPROACH = "approach"
    WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class Move:
    """A Fanorona move: one piece steps from ``start`` to ``end``."""

    start: Position
    end: Position
    kind: MoveKind = MoveKind.NO_CAPTURE
    captured: FrozenSet[Position] = field(default_factory=frozenset)

    @property
    def is_capture(self) -> bool:
        return self.kind is not MoveKind.NO_CAPTURE

    def __str__(self) -> str:
        start = f"({self.start[0]},{self.start[1]})"
        end = f"({self.end[0]},{self.end[1]})"
        if not self.is_capture:
            return f"{start}->{end}"
        taken = ",".join(f"({x},{y})" for x, y in sorted(self.captured))
        return f"{start}->{end} {self.kind.value} x[{taken}]"
