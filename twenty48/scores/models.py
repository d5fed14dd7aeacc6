"""Modèles Pydantic du fichier des meilleurs scores."""

from typing import Any, List

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


DEFAULT_PLAYER_NAME = "Oyuncu"


class ScoreEntry(BaseModel):
    """Une partie terminée du tableau des scores.

    Les fichiers écrits avant l'ajout des noms de joueurs n'ont pas de champ
    ``player_name`` : le nom par défaut est alors substitué. Les champs
    inconnus sont ignorés.
    """

    score: StrictInt = Field(..., description="Score final de la partie")
    played_at: StrictStr = Field(..., description="Date de fin de partie (ISO-8601 UTC)")
    player_name: str = Field(DEFAULT_PLAYER_NAME, description="Nom du joueur")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "score": 2048,
                "played_at": "2024-01-01T12:00:00Z",
                "player_name": "Oyuncu",
            }
        }

    @field_validator("player_name", mode="before")
    @classmethod
    def _default_player_name(cls, value: Any) -> str:
        if not isinstance(value, str) or not value:
            return DEFAULT_PLAYER_NAME
        return value


class ScoreFile(BaseModel):
    """Document racine : ``{"scores": [...]}``.

    Les entrées restent brutes ici, chacune est validée séparément pour
    qu'une entrée invalide n'invalide pas tout le fichier.
    """

    scores: List[Any] = Field(..., description="Entrées du tableau des scores")
