"""BoardEngine - propriétaire unique de la grille, du score et du flux aléatoire.

Le moteur est synchrone et sans verrou : un seul appelant à la fois. L'état
"partie terminée" n'est pas stocké, il est recalculé à la demande.
"""

import logging
import secrets
from typing import List, Optional, Tuple

import numpy as np

from .rules import apply_direction, is_game_over
from .sampler import Mt19937Stream, next_bounded
from .state import (
    GRID_DTYPE,
    GRID_SIZE,
    SPAWN_HIGH_ODDS,
    SPAWN_VALUE_HIGH,
    SPAWN_VALUE_LOW,
    Direction,
    MoveResult,
    SpawnedTile,
    empty_grid,
)


logger = logging.getLogger(__name__)

INITIAL_TILES = 2


def random_seed() -> int:
    """Tire une graine 32 bits depuis l'entropie du système (non reproductible)."""
    return secrets.randbits(32)


class BoardEngine:
    """Moteur 2048 sur une grille 4x4."""

    def __init__(self, seed: Optional[int] = None):
        self._grid = empty_grid(GRID_SIZE)
        self._score = 0
        self._rng: Optional[Mt19937Stream] = None
        self.reset(seed)

    @property
    def seed(self) -> int:
        """Graine utilisée au dernier ``reset``."""
        return self._rng.seed

    @property
    def grid(self) -> np.ndarray:
        return self.get_grid()

    @property
    def score(self) -> int:
        return self._score

    def reset(self, seed: Optional[int] = None) -> None:
        """Vide la grille, remet le score à zéro, réensemence puis pose deux tuiles.

        Sans graine, une graine fraîche est tirée de l'entropie du système :
        ce chemin n'est pas reproductible.
        """
        if seed is None:
            seed = random_seed()
        self._rng = Mt19937Stream(seed)
        self._grid = empty_grid(GRID_SIZE)
        self._score = 0
        for _ in range(INITIAL_TILES):
            self._spawn_tile()
        logger.debug(f"Nouvelle partie (seed={seed})")

    def load_state(self, grid, score: int = 0) -> None:
        """Écrase la grille et le score (fixtures de test / débogage).

        Aucune validation n'est faite et le flux aléatoire n'est pas touché.
        """
        self._grid = np.array(grid, dtype=GRID_DTYPE, copy=True)
        self._score = int(score)

    def get_grid(self) -> np.ndarray:
        """Retourne une copie en lecture seule de la grille."""
        snapshot = self._grid.copy()
        snapshot.setflags(write=False)
        return snapshot

    def get_score(self) -> int:
        return self._score

    def is_game_over(self) -> bool:
        return is_game_over(self._grid)

    def apply_move(self, direction: Direction, spawn_on_move: bool = True) -> MoveResult:
        """Applique un coup.

        Un coup qui ne déplace rien est un résultat valide : grille, score et
        flux aléatoire restent intacts et aucune tuile n'apparaît.

        Args:
            direction: Direction du glissement
            spawn_on_move: Faire apparaître une tuile si le coup a bougé

        Returns:
            MoveResult du coup
        """
        new_grid, moved, score_delta = apply_direction(self._grid, Direction(direction))
        if not moved:
            return MoveResult()

        self._grid = new_grid
        self._score += score_delta

        spawned = self._spawn_tile() if spawn_on_move else None
        return MoveResult(moved=True, score_delta=score_delta, spawned_tile=spawned)

    def _empty_cells(self) -> List[Tuple[int, int]]:
        """Coordonnées des cases vides, en ordre ligne par ligne."""
        rows, cols = self._grid.shape
        return [(r, c) for r in range(rows) for c in range(cols) if self._grid[r, c] == 0]

    def _spawn_tile(self) -> Optional[SpawnedTile]:
        """Pose un 2 (ou un 4, une fois sur dix) sur une case vide tirée au hasard."""
        empty_cells = self._empty_cells()
        if not empty_cells:
            return None

        row, col = empty_cells[next_bounded(self._rng, len(empty_cells))]
        value = SPAWN_VALUE_HIGH if next_bounded(self._rng, SPAWN_HIGH_ODDS) == 0 else SPAWN_VALUE_LOW

        self._grid[row, col] = value
        return SpawnedTile(row=row, col=col, value=value)
