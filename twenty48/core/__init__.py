"""Module core - Moteur de plateau 2048 déterministe."""

from .state import GRID_SIZE, Direction, MoveResult, SpawnedTile, LineResult
from .sampler import Mt19937Stream, next_bounded
from .rules import slide_and_merge_line, apply_direction, is_game_over
from .engine import BoardEngine

__all__ = [
    "GRID_SIZE",
    "Direction",
    "MoveResult",
    "SpawnedTile",
    "LineResult",
    "Mt19937Stream",
    "next_bounded",
    "slide_and_merge_line",
    "apply_direction",
    "is_game_over",
    "BoardEngine",
]
