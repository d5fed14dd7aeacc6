"""Types de base du moteur 2048 : directions, tuiles apparues, résultats de coup.

La grille elle-même est un ``numpy.ndarray`` de forme ``[GRID_SIZE, GRID_SIZE]``
(``0`` = case vide, sinon une puissance de deux). Les objets résultat sont des
valeurs immuables : le moteur ne les conserve pas après les avoir renvoyés.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

import numpy as np


GRID_SIZE = 4
GRID_DTYPE = np.int64

# Valeurs des tuiles apparues
SPAWN_VALUE_LOW = 2
SPAWN_VALUE_HIGH = 4
# Une chance sur SPAWN_HIGH_ODDS d'obtenir un 4
SPAWN_HIGH_ODDS = 10


class Direction(IntEnum):
    """Directions de glissement."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_reversed(self) -> bool:
        """RIGHT et DOWN se lisent depuis le bord opposé."""
        return self in (Direction.RIGHT, Direction.DOWN)


@dataclass(frozen=True)
class SpawnedTile:
    """Tuile ajoutée après un coup."""
    row: int
    col: int
    value: int


@dataclass(frozen=True)
class MoveResult:
    """Résultat d'un appel à ``BoardEngine.apply_move``."""
    moved: bool = False
    score_delta: int = 0
    spawned_tile: Optional[SpawnedTile] = None


@dataclass(frozen=True)
class LineResult:
    """Résultat du glissement d'une seule ligne (ou colonne)."""
    values: Tuple[int, ...]
    moved: bool
    score_delta: int


def empty_grid(size: int = GRID_SIZE) -> np.ndarray:
    """Crée une grille vide."""
    return np.zeros((size, size), dtype=GRID_DTYPE)
