"""Player data model for the squad builder."""

from dataclasses import dataclass
from enum import Enum


class Position(Enum):
    """Playing position used for the per-position quota."""

    GOALKEEPER = "Goalkeeper"
    DEFENDER = "Defender"
    MIDFIELDER = "Midfielder"
    FORWARD = "Forward"

    @property
    def plural(self) -> str:
        """Display name in plural form (e.g. "Goalkeepers")."""
        return f"{self.value}s"


@dataclass(frozen=True)
class Player:
    """
    Represents a selectable player.

    A player does not carry its country; the country is attached when the
    player is selected into the squad (see SquadEntry).

    Attributes:
        id: Unique identifier for the player.
        name: Player's display name.
        position: Playing position.
    """

    id: int
    name: str
    position: Position

    def __post_init__(self) -> None:
        """Validate player data after initialization."""
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError("id must be an integer")
        if self.id < 0:
            raise ValueError("id cannot be negative")
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        if not isinstance(self.position, Position):
            raise ValueError(f"Unknown position: {self.position!r}")


@dataclass(frozen=True)
class SquadEntry:
    """A selected player together with the country it was picked from."""

    player: Player
    country: str

    @property
    def id(self) -> int:
        return self.player.id

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def position(self) -> Position:
        return self.player.position
