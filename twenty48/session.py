"""Session de jeu : un moteur, un joueur et le tableau des scores."""

from __future__ import annotations

import logging
from typing import Optional

from twenty48.core import BoardEngine, Direction, MoveResult
from twenty48.scores import DEFAULT_PLAYER_NAME, LeaderboardStore


logger = logging.getLogger(__name__)


class GameSession:
    """Pilote une partie et transmet le score final au tableau des scores."""

    def __init__(
        self,
        player_name: str = DEFAULT_PLAYER_NAME,
        leaderboard: Optional[LeaderboardStore] = None,
        seed: Optional[int] = None,
    ):
        self.engine = BoardEngine(seed)
        self.leaderboard = leaderboard
        self._player_name = DEFAULT_PLAYER_NAME
        self._recorded = False
        self.player_name = player_name

    @property
    def player_name(self) -> str:
        return self._player_name

    @player_name.setter
    def player_name(self, value: str) -> None:
        value = (value or "").strip()
        self._player_name = value or DEFAULT_PLAYER_NAME

    @property
    def recorded(self) -> bool:
        """Le score de la partie courante a déjà été enregistré."""
        return self._recorded

    def new_game(self, seed: Optional[int] = None) -> None:
        """Recommence une partie (graine aléatoire si ``seed`` est None)."""
        self.engine.reset(seed)
        self._recorded = False

    def apply_move(self, direction: Direction) -> MoveResult:
        return self.engine.apply_move(direction)

    def is_game_over(self) -> bool:
        return self.engine.is_game_over()

    def best_score(self) -> int:
        """Meilleur score connu, partie courante comprise."""
        stored = self.leaderboard.best_score() if self.leaderboard is not None else 0
        return max(stored, self.engine.get_score())

    def record_final_score(self, played_at: Optional[str] = None) -> bool:
        """Ajoute le score final au tableau et le sauvegarde, une seule fois par partie.

        Returns:
            Résultat de la sauvegarde ; False si la partie n'est pas terminée,
            si aucun tableau n'est attaché ou si le score est déjà enregistré
        """
        if self.leaderboard is None or self._recorded or not self.engine.is_game_over():
            return False

        self.leaderboard.add_score(self.engine.get_score(), self._player_name, played_at)
        self._recorded = True
        saved = self.leaderboard.save()
        if not saved:
            logger.warning(f"Score de {self._player_name} non sauvegardé")
        return saved
