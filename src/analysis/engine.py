"""Squad engine: owns the squad and applies the selection rules."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..data.pool import Pool, create_sample_pool, freeze_pool
from ..models import DEFAULT_LIMITS, Player, Position, Squad, SquadEntry, SquadLimits
from .validator import (
    RejectionReason,
    ValidationResult,
    can_add_player,
    can_remove_player,
    check_eligibility,
    get_available_slots_for_country,
    get_available_slots_for_position,
    get_squad_slots_remaining,
    is_eligible,
    validate_squad,
)


logger = logging.getLogger(__name__)


class OutcomeLevel(Enum):
    """Notification level for an outcome."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


# Reasons that are reported as information rather than errors
_INFO_REASONS = {RejectionReason.DUPLICATE_PLAYER, RejectionReason.NOT_FOUND}


@dataclass(frozen=True)
class Outcome:
    """
    Result of an add or remove call.

    Attributes:
        success: Whether the squad was changed.
        message: Human-readable notification text.
        level: How the notification should be shown.
        reason: Why the call was refused (None on success).
    """

    success: bool
    message: str
    level: OutcomeLevel
    reason: Optional[RejectionReason] = None

    @classmethod
    def rejected(cls, result: ValidationResult) -> "Outcome":
        error = result.errors[0]
        level = OutcomeLevel.INFO if error.code in _INFO_REASONS else OutcomeLevel.ERROR
        return cls(success=False, message=error.message, level=level, reason=error.code)


@dataclass(frozen=True)
class Candidate:
    """A pool player with its current selection state."""

    player: Player
    country: str
    selected: bool
    eligible: bool
    reasons: tuple[RejectionReason, ...] = ()
    blocked_message: Optional[str] = None


class SquadEngine:
    """
    Session-scoped squad selection engine.

    The squad is private; callers change it only through ``add``,
    ``remove`` and ``reset`` and read it through the view properties.
    """

    def __init__(
        self,
        pool: Optional[Pool] = None,
        limits: SquadLimits = DEFAULT_LIMITS,
    ) -> None:
        """
        Initialize the engine with an empty squad.

        Args:
            pool: Candidate pool (country -> players). Defaults to the
                built-in sample pool.
            limits: Quota configuration.

        Raises:
            PoolError: If the pool is malformed.
        """
        self._pool = freeze_pool(pool if pool is not None else create_sample_pool())
        self._limits = limits
        self._squad = Squad()

    # Views

    @property
    def limits(self) -> SquadLimits:
        return self._limits

    @property
    def pool(self) -> dict[str, tuple[Player, ...]]:
        """Candidate pool (copy; the engine's pool is never mutated)."""
        return dict(self._pool)

    @property
    def countries(self) -> list[str]:
        """Pool countries in pool order."""
        return list(self._pool)

    @property
    def squad(self) -> tuple[SquadEntry, ...]:
        """Selected entries in selection order."""
        return self._squad.entries

    @property
    def size(self) -> int:
        return self._squad.size

    @property
    def selected_ids(self) -> set[int]:
        return self._squad.player_ids

    @property
    def is_full(self) -> bool:
        return self._squad.size >= self._limits.max_squad_size

    @property
    def country_counts(self) -> dict[str, int]:
        """Players per country, zero-filled for every pool country."""
        counts = {country: 0 for country in self._pool}
        counts.update(self._squad.country_counts)
        return counts

    @property
    def position_counts(self) -> dict[Position, int]:
        """Players per position, zero-filled for every position."""
        return self._squad.position_counts

    @property
    def slots_remaining(self) -> int:
        """Number of players that can still be added."""
        return get_squad_slots_remaining(self._squad, self._limits)

    def country_slots(self, country: str) -> int:
        """Number of additional players that can come from a country."""
        return get_available_slots_for_country(self._squad, country, self._limits)

    def position_slots(self, position: Position) -> int:
        """Number of additional players that can fill a position."""
        return get_available_slots_for_position(self._squad, position, self._limits)

    def is_selected(self, player_id: int) -> bool:
        return player_id in self._squad

    def is_eligible(self, player: Player, country: str) -> bool:
        """Check whether an add of this player would currently succeed."""
        return is_eligible(self._squad, player, country, self._limits)

    def check_eligibility(self, player: Player, country: str) -> ValidationResult:
        """Every rule that would block adding this player, in rule order."""
        return check_eligibility(self._squad, player, country, self._limits)

    def validate(self) -> ValidationResult:
        """Validate the current squad as a whole (errors and warnings)."""
        return validate_squad(self._squad, self._limits)

    def find_candidate(self, player_id: int) -> Optional[tuple[Player, str]]:
        """Look a player up in the pool, returning it with its country."""
        for country, players in self._pool.items():
            for player in players:
                if player.id == player_id:
                    return player, country
        return None

    def candidates(self) -> list[Candidate]:
        """All pool players, in pool order, with their selection state."""
        result: list[Candidate] = []
        for country, players in self._pool.items():
            for player in players:
                eligibility = self.check_eligibility(player, country)
                first = eligibility.first_error
                result.append(
                    Candidate(
                        player=player,
                        country=country,
                        selected=self.is_selected(player.id),
                        eligible=eligibility.is_valid,
                        reasons=tuple(eligibility.reasons),
                        blocked_message=first.message if first else None,
                    )
                )
        return result

    # Operations

    def add(self, player: Player, country: str) -> Outcome:
        """
        Add a player to the end of the squad.

        Rules are checked in order (squad size, country quota, position
        quota, duplicate); the first failure is reported and nothing changes.

        Args:
            player: The player to add.
            country: Country the player is selected from.

        Returns:
            Outcome describing the result.
        """
        result = can_add_player(self._squad, player, country, self._limits)
        if not result.is_valid:
            outcome = Outcome.rejected(result)
            logger.debug("Rejected %s (%s): %s", player.name, country, outcome.reason.value)
            return outcome

        self._squad.append(SquadEntry(player=player, country=country))
        logger.info(
            "Added %s (%s, %s): squad size %d",
            player.name,
            player.position.value,
            country,
            self._squad.size,
        )
        return Outcome(
            success=True,
            message=f"{player.name} has been added to your squad!",
            level=OutcomeLevel.SUCCESS,
        )

    def add_by_id(self, player_id: int) -> Outcome:
        """Add a pool player by ID, using the country it is listed under."""
        found = self.find_candidate(player_id)
        if found is None:
            return Outcome(
                success=False,
                message=f"Player {player_id} is not in the player pool.",
                level=OutcomeLevel.INFO,
                reason=RejectionReason.NOT_FOUND,
            )
        player, country = found
        return self.add(player, country)

    def remove(self, player_id: int) -> Outcome:
        """
        Remove a player from the squad.

        Removal only lowers counts, so no quota applies. An absent ID is
        reported as NOT_FOUND and changes nothing.
        """
        result = can_remove_player(self._squad, player_id)
        if not result.is_valid:
            logger.debug("Remove of unknown player %s ignored", player_id)
            return Outcome.rejected(result)

        entry = self._squad.remove(player_id)
        logger.info("Removed %s: squad size %d", entry.name, self._squad.size)
        return Outcome(
            success=True,
            message=f"{entry.name} has been removed.",
            level=OutcomeLevel.INFO,
        )

    def reset(self) -> None:
        """Empty the squad."""
        self._squad.clear()
        logger.info("Squad cleared")
