"""Player sides and cell values for Fanorona."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from engine.errors import InvalidArgument

EMPTY = 0


class Side(int, Enum):
    """Player side. The integer value is the cell value of the side's pieces."""

    WHITE = 1
    BLACK = 2

    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE


CELL_VALUES = frozenset((EMPTY, Side.WHITE.value, Side.BLACK.value))

CELL_SYMBOL: Dict[int, str] = {
    EMPTY: ".",
    Side.WHITE.value: "W",
    Side.BLACK.value: "B",
}


def side_from_id(player_id: object) -> Side:
    """Map a player identifier (1 or 2) to its side."""
    if isinstance(player_id, Side):
        return player_id
    if isinstance(player_id, bool) or not isinstance(player_id, int):
        raise InvalidArgument(f"player id must be 1 or 2, got {player_id!r}")
    if player_id not in (Side.WHITE.value, Side.BLACK.value):
        raise InvalidArgument(f"player id must be 1 or 2, got {player_id!r}")
    return Side(player_id)
