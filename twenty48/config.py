"""Configuration issue des variables d'environnement."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from twenty48.scores.models import DEFAULT_PLAYER_NAME


SCORES_FILENAME = "scores.json"


def _env_str(name: str, default: str) -> str:
    """Lit une variable d'environnement texte (vide = valeur par défaut)."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def default_scores_path() -> Path:
    """Fichier de scores dans le répertoire courant."""
    try:
        return Path.cwd() / SCORES_FILENAME
    except OSError:
        return Path(SCORES_FILENAME)


@dataclass(frozen=True)
class Settings:
    """Réglages d'une session de jeu."""

    scores_path: Path
    player_name: str = DEFAULT_PLAYER_NAME


def resolve_settings(
    scores_path: Optional[Union[str, Path]] = None,
    player_name: Optional[str] = None,
) -> Settings:
    """Fusionne les overrides éventuels avec la configuration par défaut.

    Les valeurs par défaut proviennent des variables d'environnement :
    - ``TWENTY48_SCORES_PATH`` (defaut = ``./scores.json``)
    - ``TWENTY48_PLAYER_NAME`` (defaut = ``Oyuncu``)
    """
    if scores_path is None:
        env_path = os.getenv("TWENTY48_SCORES_PATH")
        resolved_path = Path(env_path) if env_path else default_scores_path()
    else:
        resolved_path = Path(scores_path)

    if player_name is None:
        player_name = _env_str("TWENTY48_PLAYER_NAME", DEFAULT_PLAYER_NAME)

    return Settings(
        scores_path=resolved_path,
        player_name=player_name.strip() or DEFAULT_PLAYER_NAME,
    )
