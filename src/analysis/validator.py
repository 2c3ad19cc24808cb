"""Squad selection rules.

The add rules are kept as an ordered list. ``can_add_player`` reports the
first rule that fails, ``check_eligibility`` reports every rule that fails.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from ..models.player import Player, Position
from ..models.squad import DEFAULT_LIMITS, Squad, SquadLimits


class RejectionReason(Enum):
    """Why an add or remove was refused."""

    SQUAD_FULL = "squad_full"
    COUNTRY_QUOTA_EXCEEDED = "country_quota_exceeded"
    POSITION_QUOTA_EXCEEDED = "position_quota_exceeded"
    DUPLICATE_PLAYER = "duplicate_player"
    NOT_FOUND = "not_found"


@dataclass
class SquadValidationError:
    """Represents a rule violation for a squad."""

    code: RejectionReason
    message: str


@dataclass
class ValidationResult:
    """
    Result of a validation check.

    Attributes:
        is_valid: Whether the validation passed.
        errors: List of validation errors (empty if valid).
        warnings: Non-blocking issues (e.g., incomplete squad).
    """

    is_valid: bool
    errors: list[SquadValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def reasons(self) -> list[RejectionReason]:
        """Codes of all errors, in the order they were found."""
        return [e.code for e in self.errors]

    @property
    def first_error(self) -> Optional[SquadValidationError]:
        """The highest-precedence error, or None when valid."""
        return self.errors[0] if self.errors else None


@dataclass(frozen=True)
class AddRule:
    """
    A single add precondition.

    Attributes:
        reason: Code reported when the rule blocks the add.
        blocks: Predicate returning True when the add must be refused.
        describe: Builds the user-facing message for a refusal.
    """

    reason: RejectionReason
    blocks: Callable[[Squad, Player, str, SquadLimits], bool]
    describe: Callable[[Player, str, SquadLimits], str]


ADD_RULES: tuple[AddRule, ...] = (
    AddRule(
        reason=RejectionReason.SQUAD_FULL,
        blocks=lambda squad, player, country, limits: (
            squad.size >= limits.max_squad_size
        ),
        describe=lambda player, country, limits: (
            f"Your squad is full! ({limits.max_squad_size} players maximum)"
        ),
    ),
    AddRule(
        reason=RejectionReason.COUNTRY_QUOTA_EXCEEDED,
        blocks=lambda squad, player, country, limits: (
            squad.count_for_country(country) >= limits.max_per_country
        ),
        describe=lambda player, country, limits: (
            f"You can't select more than {limits.max_per_country} players "
            f"from {country}."
        ),
    ),
    AddRule(
        reason=RejectionReason.POSITION_QUOTA_EXCEEDED,
        blocks=lambda squad, player, country, limits: (
            squad.count_for_position(player.position)
            >= limits.position_limit(player.position)
        ),
        describe=lambda player, country, limits: (
            f"You can't select more than "
            f"{limits.position_limit(player.position)} {player.position.plural}."
        ),
    ),
    AddRule(
        reason=RejectionReason.DUPLICATE_PLAYER,
        blocks=lambda squad, player, country, limits: player.id in squad,
        describe=lambda player, country, limits: (
            f"{player.name} is already in your squad."
        ),
    ),
)


def _failing_rules(
    squad: Squad,
    player: Player,
    country: str,
    limits: SquadLimits,
    stop_at_first: bool,
) -> list[SquadValidationError]:
    errors: list[SquadValidationError] = []
    for rule in ADD_RULES:
        if rule.blocks(squad, player, country, limits):
            errors.append(
                SquadValidationError(
                    code=rule.reason,
                    message=rule.describe(player, country, limits),
                )
            )
            if stop_at_first:
                break
    return errors


def can_add_player(
    squad: Squad,
    player: Player,
    country: str,
    limits: SquadLimits = DEFAULT_LIMITS,
) -> ValidationResult:
    """
    Check if a player can be added to the squad.

    Rules are checked in order (squad size, country quota, position quota,
    duplicate) and the first failing rule is reported.

    Args:
        squad: The current squad.
        player: The player to potentially add.
        country: Country the player is selected from.
        limits: Quota configuration.

    Returns:
        ValidationResult with at most one error.
    """
    errors = _failing_rules(squad, player, country, limits, stop_at_first=True)
    return ValidationResult(is_valid=len(errors) == 0, errors=errors)


def check_eligibility(
    squad: Squad,
    player: Player,
    country: str,
    limits: SquadLimits = DEFAULT_LIMITS,
) -> ValidationResult:
    """
    Check every add rule for a candidate without adding it.

    Args:
        squad: The current squad.
        player: The candidate player.
        country: Country the candidate belongs to.
        limits: Quota configuration.

    Returns:
        ValidationResult listing all failing rules in rule order. The first
        error is the one ``can_add_player`` would report.
    """
    errors = _failing_rules(squad, player, country, limits, stop_at_first=False)
    return ValidationResult(is_valid=len(errors) == 0, errors=errors)


def is_eligible(
    squad: Squad,
    player: Player,
    country: str,
    limits: SquadLimits = DEFAULT_LIMITS,
) -> bool:
    """Check if a candidate could currently be added."""
    return not any(
        rule.blocks(squad, player, country, limits) for rule in ADD_RULES
    )


def can_remove_player(squad: Squad, player_id: int) -> ValidationResult:
    """
    Check if a player can be removed from the squad.

    Args:
        squad: The current squad.
        player_id: ID of the player to remove.

    Returns:
        ValidationResult indicating if the removal is valid.
    """
    if squad.get_entry(player_id) is None:
        return ValidationResult(
            is_valid=False,
            errors=[
                SquadValidationError(
                    code=RejectionReason.NOT_FOUND,
                    message=f"Player {player_id} is not in your squad.",
                )
            ],
        )
    return ValidationResult(is_valid=True)


def get_squad_slots_remaining(
    squad: Squad, limits: SquadLimits = DEFAULT_LIMITS
) -> int:
    """Get the number of players that can still be added."""
    return max(0, limits.max_squad_size - squad.size)


def get_available_slots_for_country(
    squad: Squad, country: str, limits: SquadLimits = DEFAULT_LIMITS
) -> int:
    """Get the number of additional players that can come from a country."""
    return max(0, limits.max_per_country - squad.count_for_country(country))


def get_available_slots_for_position(
    squad: Squad, position: Position, limits: SquadLimits = DEFAULT_LIMITS
) -> int:
    """Get the number of additional players that can fill a position."""
    return max(0, limits.position_limit(position) - squad.count_for_position(position))


def validate_squad(
    squad: Squad, limits: SquadLimits = DEFAULT_LIMITS
) -> ValidationResult:
    """
    Validate a whole squad against the quotas.

    A squad built only through the engine always passes; this is used to
    report on squads assembled some other way and in tests.

    Args:
        squad: The squad to validate.
        limits: Quota configuration.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[SquadValidationError] = []
    warnings: list[str] = []

    if squad.size > limits.max_squad_size:
        errors.append(
            SquadValidationError(
                code=RejectionReason.SQUAD_FULL,
                message=f"Squad size ({squad.size}) exceeds maximum "
                f"({limits.max_squad_size})",
            )
        )

    for country, count in squad.country_counts.items():
        if count > limits.max_per_country:
            errors.append(
                SquadValidationError(
                    code=RejectionReason.COUNTRY_QUOTA_EXCEEDED,
                    message=f"Too many players from {country} "
                    f"({count}/{limits.max_per_country})",
                )
            )

    for position, count in squad.position_counts.items():
        if count > limits.position_limit(position):
            errors.append(
                SquadValidationError(
                    code=RejectionReason.POSITION_QUOTA_EXCEEDED,
                    message=f"Too many {position.plural} "
                    f"({count}/{limits.position_limit(position)})",
                )
            )

    if squad.size < limits.max_squad_size:
        warnings.append(f"Incomplete squad ({squad.size}/{limits.max_squad_size})")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
