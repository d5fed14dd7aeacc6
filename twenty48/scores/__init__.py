"""Module scores - Tableau des meilleurs scores persisté en JSON."""

from .models import DEFAULT_PLAYER_NAME, ScoreEntry, ScoreFile
from .leaderboard import LeaderboardStore, MAX_ENTRIES

__all__ = [
    "DEFAULT_PLAYER_NAME",
    "ScoreEntry",
    "ScoreFile",
    "LeaderboardStore",
    "MAX_ENTRIES",
]
