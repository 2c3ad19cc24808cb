"""Data models for the football squad builder."""

from .player import Player, Position, SquadEntry
from .squad import (
    DEFAULT_LIMITS,
    MAX_PER_COUNTRY,
    MAX_SQUAD_SIZE,
    POSITION_LIMITS,
    Squad,
    SquadLimits,
)

__all__ = [
    # Player
    "Player",
    "Position",
    "SquadEntry",
    # Squad
    "DEFAULT_LIMITS",
    "MAX_PER_COUNTRY",
    "MAX_SQUAD_SIZE",
    "POSITION_LIMITS",
    "Squad",
    "SquadLimits",
]
