"""Règles pures du plateau : glissement, fusion et détection de fin de partie.

Un seul algorithme de fusion opère sur une séquence abstraite. Les quatre
directions s'y ramènent en lisant les lignes (LEFT/RIGHT) ou les colonnes
(UP/DOWN), dans l'ordre inverse pour RIGHT et DOWN.
"""

from typing import Sequence, Tuple

import numpy as np

from .state import Direction, LineResult


def slide_and_merge_line(line: Sequence[int]) -> LineResult:
    """Fait glisser une ligne vers son bord de tête et fusionne les paires.

    Les zéros sont d'abord retirés (ordre relatif conservé), puis deux
    valeurs voisines égales fusionnent en une seule. Une tuile née d'une
    fusion ne fusionne plus pendant le même coup : ``[2, 2, 4, 4]`` donne
    ``[4, 8, 0, 0]``.

    Args:
        line: Valeurs de la ligne, lues depuis le bord de tête

    Returns:
        LineResult avec les nouvelles valeurs (même longueur), ``moved`` si
        une position a changé et le score gagné
    """
    original = tuple(int(value) for value in line)
    compact = [value for value in original if value != 0]

    values = []
    score_delta = 0
    i = 0
    while i < len(compact):
        if i + 1 < len(compact) and compact[i] == compact[i + 1]:
            merged = compact[i] * 2
            values.append(merged)
            score_delta += merged
            i += 2
            continue
        values.append(compact[i])
        i += 1

    values.extend([0] * (len(original) - len(values)))
    values = tuple(values)

    return LineResult(values=values, moved=values != original, score_delta=score_delta)


def _line_indices(grid: np.ndarray, index: int, direction: Direction):
    """Retourne l'index numpy sélectionnant la ligne dans l'ordre de lecture."""
    size = grid.shape[0]
    positions = list(range(size))
    if direction.is_reversed:
        positions.reverse()
    if direction.is_horizontal:
        return index, positions
    return positions, index


def read_line(grid: np.ndarray, index: int, direction: Direction) -> Tuple[int, ...]:
    """Lit la ligne (ou colonne) ``index`` en partant du bord vers lequel on glisse."""
    return tuple(int(value) for value in grid[_line_indices(grid, index, direction)])


def write_line(grid: np.ndarray, index: int, direction: Direction, values: Sequence[int]) -> None:
    """Inverse de ``read_line`` : écrit ``values`` en place dans ``grid``."""
    grid[_line_indices(grid, index, direction)] = values


def apply_direction(grid: np.ndarray, direction: Direction) -> Tuple[np.ndarray, bool, int]:
    """Applique un coup complet sans faire apparaître de tuile.

    Args:
        grid: Grille de départ (non modifiée)
        direction: Direction du glissement

    Returns:
        (nouvelle grille, au moins une ligne a bougé, score gagné)
    """
    direction = Direction(direction)
    new_grid = np.array(grid, copy=True)
    moved = False
    score_delta = 0

    for index in range(new_grid.shape[0]):
        result = slide_and_merge_line(read_line(new_grid, index, direction))
        if result.moved:
            moved = True
        score_delta += result.score_delta
        write_line(new_grid, index, direction, result.values)

    return new_grid, moved, score_delta


def is_game_over(grid: np.ndarray) -> bool:
    """Vrai si aucune case n'est vide et qu'aucune paire voisine n'est égale."""
    rows, cols = grid.shape
    for r in range(rows):
        for c in range(cols):
            if grid[r, c] == 0:
                return False

    for r in range(rows):
        for c in range(cols):
            if c < cols - 1 and grid[r, c] == grid[r, c + 1]:
                return False
            if r < rows - 1 and grid[r, c] == grid[r + 1, c]:
                return False

    return True
