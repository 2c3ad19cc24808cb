"""Squad state container and selection limits."""

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .player import Position, SquadEntry


# Game constants
MAX_SQUAD_SIZE = 15
MAX_PER_COUNTRY = 4
POSITION_LIMITS: Mapping[Position, int] = MappingProxyType(
    {
        Position.GOALKEEPER: 2,
        Position.DEFENDER: 5,
        Position.MIDFIELDER: 5,
        Position.FORWARD: 5,
    }
)


@dataclass(frozen=True)
class SquadLimits:
    """
    Static quota configuration for a squad.

    Attributes:
        max_squad_size: Maximum number of players in the squad.
        max_per_country: Maximum number of players from any one country.
        position_limits: Maximum number of players per position.
    """

    max_squad_size: int = MAX_SQUAD_SIZE
    max_per_country: int = MAX_PER_COUNTRY
    position_limits: Mapping[Position, int] = field(
        default_factory=lambda: POSITION_LIMITS
    )

    def __post_init__(self) -> None:
        """Validate that the limits describe a squad that can be filled."""
        if self.max_squad_size <= 0:
            raise ValueError("max_squad_size must be positive")
        if self.max_per_country <= 0:
            raise ValueError("max_per_country must be positive")

        missing = [p.value for p in Position if p not in self.position_limits]
        if missing:
            raise ValueError(f"position_limits missing: {', '.join(missing)}")
        for position, limit in self.position_limits.items():
            if limit <= 0:
                raise ValueError(f"{position.value} limit must be positive")

        if sum(self.position_limits.values()) < self.max_squad_size:
            raise ValueError(
                f"Position limits ({sum(self.position_limits.values())}) "
                f"cannot fill a squad of {self.max_squad_size}"
            )

        object.__setattr__(
            self, "position_limits", MappingProxyType(dict(self.position_limits))
        )

    def position_limit(self, position: Position) -> int:
        """Get the quota for a position."""
        return self.position_limits[position]


DEFAULT_LIMITS = SquadLimits()


class Squad:
    """
    Ordered selection of players, unique by player id.

    Entries keep insertion order; removal does not reorder the rest.
    Counts are always derived from the entries, never stored.
    """

    def __init__(self, entries: Optional[list[SquadEntry]] = None) -> None:
        self._entries: list[SquadEntry] = []
        for entry in entries or []:
            self.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def __contains__(self, player_id: object) -> bool:
        return self.get_entry(player_id) is not None

    @property
    def entries(self) -> tuple[SquadEntry, ...]:
        """Snapshot of the entries in selection order."""
        return tuple(self._entries)

    @property
    def size(self) -> int:
        """Return number of players in squad."""
        return len(self._entries)

    @property
    def player_ids(self) -> set[int]:
        """IDs of all selected players."""
        return {e.id for e in self._entries}

    @property
    def country_counts(self) -> dict[str, int]:
        """Count players per country (only countries present)."""
        return dict(Counter(e.country for e in self._entries))

    @property
    def position_counts(self) -> dict[Position, int]:
        """Count players per position, zero-filled for every position."""
        counts = Counter(e.position for e in self._entries)
        return {position: counts.get(position, 0) for position in Position}

    def count_for_country(self, country: str) -> int:
        return sum(1 for e in self._entries if e.country == country)

    def count_for_position(self, position: Position) -> int:
        return sum(1 for e in self._entries if e.position == position)

    def get_entry(self, player_id: object) -> Optional[SquadEntry]:
        """Get an entry by player ID."""
        return next((e for e in self._entries if e.id == player_id), None)

    def append(self, entry: SquadEntry) -> None:
        """Append an entry to the end of the squad."""
        if self.get_entry(entry.id) is not None:
            raise ValueError(f"Player {entry.id} already in squad")
        self._entries.append(entry)

    def remove(self, player_id: int) -> SquadEntry:
        """Remove and return the entry for a player."""
        entry = self.get_entry(player_id)
        if entry is None:
            raise ValueError(f"Player {player_id} not in squad")
        self._entries.remove(entry)
        return entry

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
