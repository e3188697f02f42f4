"""Board evaluation functions.

Every evaluation takes the cell mapping and the remaining search depth and
returns an integer score where higher favours player 1 (white).
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from ai.base_ai import Evaluation
from engine.pieces import EMPTY, Side
from engine.rules import Position


def count_cells(cells: Mapping[Position, int]) -> Tuple[int, int, int]:
    """Return (white pieces, black pieces, empty cells)."""
    white = black = empty = 0
    for value in cells.values():
        if value == Side.WHITE.value:
            white += 1
        elif value == Side.BLACK.value:
            black += 1
        elif value == EMPTY:
            empty += 1
    return white, black, empty


def terminal_only(cells: Mapping[Position, int], remaining_depth: int) -> int:
    """Give no information at the depth cutoff; only decided lines score."""
    if remaining_depth <= 0:
        return 0
    white, black, _ = count_cells(cells)
    return -100 if white < black else 100


def material_ratio(cells: Mapping[Position, int], remaining_depth: int) -> int:
    """Piece difference as a percentage of the board."""
    white, black, _ = count_cells(cells)
    return int(round((white - black) / len(cells) * 100))


def material_space(cells: Mapping[Position, int], remaining_depth: int) -> int:
    """Piece difference plus open space, which counts for whoever is ahead.

    Empty cells reward the side with more pieces, pushing the leader toward trades.
    """
    white, black, empty = count_cells(cells)
    total = len(cells)
    space = -empty if white < black else empty
    return int(round(((white - black) / total + space / total) * 100))


EVALUATIONS: Dict[str, Evaluation] = {
    "terminal_only": terminal_only,
    "material_ratio": material_ratio,
    "material_space": material_space,
}


def get_evaluation(name: str) -> Evaluation:
    """Look up an evaluation by its registered name."""
    try:
        return EVALUATIONS[name]
    except KeyError:
        raise ValueError(f"Unsupported evaluation: {name}") from None
