"""Rejeu d'une séquence de coups à partir d'une graine."""

from __future__ import annotations

from typing import Dict, Iterable, List

from twenty48.core import BoardEngine, Direction


MOVE_LETTERS = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}
IGNORED_CHARACTERS = {" ", ",", "\t", "\n"}


def parse_moves(text: str) -> List[Direction]:
    """Convertit une chaîne ``"ULDR..."`` en directions.

    Raises:
        ValueError: Si une lettre ne correspond à aucune direction
    """
    directions = []
    for position, letter in enumerate(text):
        if letter in IGNORED_CHARACTERS:
            continue
        try:
            directions.append(MOVE_LETTERS[letter.upper()])
        except KeyError:
            raise ValueError(f"coup inconnu '{letter}' en position {position} (attendu: U, D, L, R)")
    return directions


def format_moves(directions: Iterable[Direction]) -> str:
    """Inverse de ``parse_moves``."""
    return "".join(Direction(direction).name[0] for direction in directions)


def snapshot(engine: BoardEngine) -> Dict:
    """Sérialise l'état visible du moteur (compatible JSON)."""
    return {
        "grid": engine.get_grid().tolist(),
        "score": engine.get_score(),
        "game_over": engine.is_game_over(),
    }


def play_sequence(seed: int, directions: Iterable[Direction], spawn_on_move: bool = True) -> Dict:
    """Rejoue ``directions`` sur un moteur initialisé avec ``seed``.

    Returns:
        Dictionnaire avec 'seed', 'moves', 'moved' et 'states' ; ``states[0]``
        est l'état initial et ``states[i + 1]`` suit le coup ``i``
    """
    engine = BoardEngine(seed)
    directions = [Direction(direction) for direction in directions]

    moved = []
    states = [snapshot(engine)]
    for direction in directions:
        result = engine.apply_move(direction, spawn_on_move=spawn_on_move)
        moved.append(result.moved)
        states.append(snapshot(engine))

    return {
        "seed": seed,
        "moves": format_moves(directions),
        "moved": moved,
        "states": states,
    }
