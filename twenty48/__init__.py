"""twenty48 - Moteur de plateau 2048 déterministe et tableau des meilleurs scores."""

from .core import BoardEngine, Direction, MoveResult, SpawnedTile
from .scores import LeaderboardStore, ScoreEntry
from .config import Settings, resolve_settings
from .session import GameSession

__all__ = [
    "BoardEngine",
    "Direction",
    "MoveResult",
    "SpawnedTile",
    "LeaderboardStore",
    "ScoreEntry",
    "Settings",
    "resolve_settings",
    "GameSession",
]
