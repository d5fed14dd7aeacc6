"""Stockage du tableau des 5 meilleurs scores dans un fichier JSON.

Les échecs (fichier illisible, JSON invalide, disque en lecture seule...) sont
journalisés et rendus sous forme de booléen : rien ne remonte à l'appelant
sous forme d'exception. Pas de verrou ni de renommage atomique : le dernier
écrivain gagne.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import ValidationError

from .models import DEFAULT_PLAYER_NAME, ScoreEntry, ScoreFile


logger = logging.getLogger(__name__)

MAX_ENTRIES = 5


class ScoreFileError(Exception):
    """Exception levée quand le fichier des scores ne peut pas être lu."""
    pass


def format_utc_iso8601(moment: datetime) -> str:
    """Formate une date en UTC, à la seconde (``YYYY-MM-DDTHH:MM:SSZ``).

    Une date naïve est considérée comme déjà exprimée en UTC.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def current_utc_iso8601() -> str:
    """Horodatage UTC courant."""
    return format_utc_iso8601(datetime.now(timezone.utc))


def sort_and_trim(entries: List[ScoreEntry], limit: int = MAX_ENTRIES) -> List[ScoreEntry]:
    """Trie par score décroissant puis date décroissante et garde les ``limit`` premiers."""
    ordered = sorted(entries, key=lambda entry: (entry.score, entry.played_at), reverse=True)
    return ordered[:limit]


def _read_score_file(path: Path) -> List[ScoreEntry]:
    """Lit et valide le fichier des scores.

    Les entrées sans score ou sans date valides sont ignorées une à une.

    Raises:
        ScoreFileError: Si le fichier est illisible ou si sa structure est invalide
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScoreFileError(f"Erreur de lecture de {path}: {e}")

    try:
        document = ScoreFile.model_validate_json(raw)
    except ValidationError as e:
        raise ScoreFileError(f"Format de fichier de scores invalide pour {path}: {e}")

    entries = []
    for index, item in enumerate(document.scores):
        try:
            entries.append(ScoreEntry.model_validate(item))
        except ValidationError as e:
            logger.debug(f"Entrée {index} ignorée dans {path}: {e.errors()}")
    return entries


class LeaderboardStore:
    """Tableau ordonné d'au plus ``MAX_ENTRIES`` scores."""

    def __init__(self, score_file_path: Union[str, Path]):
        self._score_file_path = Path(score_file_path)
        self._entries: List[ScoreEntry] = []

    @property
    def score_file_path(self) -> Path:
        return self._score_file_path

    def load(self) -> bool:
        """Recharge le tableau depuis le disque.

        Returns:
            True si le fichier est absent (aucun score) ou lu correctement,
            False si le fichier existe mais est invalide (le tableau reste vide)
        """
        self._entries = []

        try:
            if not self._score_file_path.exists():
                return True
            entries = _read_score_file(self._score_file_path)
        except OSError as e:
            logger.warning(f"Impossible d'accéder à {self._score_file_path}: {e}")
            return False
        except ScoreFileError as e:
            logger.warning(str(e))
            return False

        self._entries = sort_and_trim(entries)
        logger.info(f"Chargement de {len(self._entries)} score(s) depuis {self._score_file_path}")
        return True

    def save(self) -> bool:
        """Écrase le fichier avec le tableau courant, dans l'ordre trié.

        Returns:
            True si l'écriture a réussi
        """
        document = {"scores": [entry.model_dump() for entry in self._entries]}
        try:
            self._score_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._score_file_path, "w", encoding="utf-8") as f:
                f.write(json.dumps(document, indent=2, ensure_ascii=False))
                f.write("\n")
        except OSError as e:
            logger.warning(f"Erreur lors de la sauvegarde des scores dans {self._score_file_path}: {e}")
            return False
        return True

    def add_score(
        self,
        score: int,
        player_name: str = DEFAULT_PLAYER_NAME,
        played_at: Optional[Union[str, datetime]] = None,
    ) -> ScoreEntry:
        """Ajoute un score puis retrie et tronque le tableau.

        Args:
            score: Score final
            player_name: Nom du joueur (vide = nom par défaut)
            played_at: Date ISO-8601 UTC ou ``datetime`` (défaut: maintenant)

        Returns:
            L'entrée créée (elle peut avoir été aussitôt écartée par la troncature)
        """
        if played_at is None:
            played_at = current_utc_iso8601()
        elif isinstance(played_at, datetime):
            played_at = format_utc_iso8601(played_at)
        else:
            played_at = str(played_at)

        entry = ScoreEntry(
            score=int(score),
            played_at=played_at,
            player_name=player_name or DEFAULT_PLAYER_NAME,
        )
        self._entries = sort_and_trim(self._entries + [entry])
        return entry

    def top_scores(self) -> Tuple[ScoreEntry, ...]:
        return tuple(self._entries)

    def best_score(self) -> int:
        if not self._entries:
            return 0
        return self._entries[0].score
