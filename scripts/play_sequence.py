#!/usr/bin/env python3
"""Script pour jouer une partie sans interface à partir d'une graine."""

import argparse
import json
import logging
import sys
from itertools import cycle
from pathlib import Path

from twenty48.config import resolve_settings
from twenty48.core.sampler import SEED_MAX
from twenty48.replay import format_moves, parse_moves, snapshot
from twenty48.scores import LeaderboardStore
from twenty48.session import GameSession


DEFAULT_CYCLE = "ULDR"


def _seed(text: str) -> int:
    """Valide une graine entière non signée 32 bits."""
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"graine invalide: {text!r}")
    if value < 0 or value > SEED_MAX:
        raise argparse.ArgumentTypeError(f"graine hors limites: {value} (0-{SEED_MAX})")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Joue une partie 2048 reproductible (sans interface)"
    )
    parser.add_argument(
        "--seed",
        type=_seed,
        default=None,
        help="Graine 32 bits non signée (défaut: entropie du système)"
    )
    parser.add_argument(
        "--moves",
        type=str,
        default=None,
        help="Coups à jouer, ex: 'ULDR' (défaut: répète ULDR jusqu'à la fin de partie)"
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=10000,
        help="Nombre maximum de coups quand --moves est absent (défaut: 10000)"
    )
    parser.add_argument(
        "--player",
        type=str,
        default=None,
        help="Nom du joueur (défaut: $TWENTY48_PLAYER_NAME)"
    )
    parser.add_argument(
        "--scores-file",
        type=str,
        default=None,
        help="Fichier des scores (défaut: $TWENTY48_SCORES_PATH ou ./scores.json)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Fichier JSON où écrire le rejeu complet"
    )
    parser.add_argument(
        "--no-record",
        action="store_true",
        help="Ne pas enregistrer le score final"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Journalisation détaillée"
    )
    return parser


def format_grid(grid) -> str:
    """Rendu texte de la grille."""
    return "\n".join(
        " ".join(f"{int(value):>5}" if value else "    ." for value in row)
        for row in grid
    )


def main(argv=None) -> int:
    """Fonction principale."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("twenty48.play_sequence")

    if args.moves is not None:
        try:
            directions = parse_moves(args.moves)
        except ValueError as e:
            parser.error(str(e))
    else:
        directions = None

    settings = resolve_settings(scores_path=args.scores_file, player_name=args.player)

    leaderboard = None
    if not args.no_record:
        leaderboard = LeaderboardStore(settings.scores_path)
        if not leaderboard.load():
            logger.warning(f"Fichier de scores ignoré: {settings.scores_path}")

    session = GameSession(settings.player_name, leaderboard=leaderboard, seed=args.seed)
    engine = session.engine

    print(f"Partie initialisée (seed={engine.seed}, joueur={session.player_name})")

    played = []
    moved = []
    states = [snapshot(engine)]

    if directions is None:
        planned = cycle(parse_moves(DEFAULT_CYCLE))
        limit = args.max_moves
    else:
        planned = iter(directions)
        limit = len(directions)

    for direction in planned:
        if len(played) >= limit or engine.is_game_over():
            break
        result = session.apply_move(direction)
        played.append(direction)
        moved.append(result.moved)
        states.append(snapshot(engine))

    print(format_grid(engine.get_grid()))
    print(f"Score: {engine.get_score()} ({len(played)} coup(s), fin de partie: {engine.is_game_over()})")

    if session.record_final_score():
        print(f"Score enregistré dans {settings.scores_path} (meilleur: {leaderboard.best_score()})")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        replay = {
            "seed": engine.seed,
            "player_name": session.player_name,
            "moves": format_moves(played),
            "moved": moved,
            "states": states,
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(replay, f, indent=2)
        print(f"Rejeu écrit dans {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
