"""Selection rules and the squad engine."""

from .validator import (
    ADD_RULES,
    AddRule,
    RejectionReason,
    SquadValidationError,
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
from .engine import Candidate, Outcome, OutcomeLevel, SquadEngine

__all__ = [
    # Validator
    "ADD_RULES",
    "AddRule",
    "RejectionReason",
    "SquadValidationError",
    "ValidationResult",
    "can_add_player",
    "can_remove_player",
    "check_eligibility",
    "get_available_slots_for_country",
    "get_available_slots_for_position",
    "get_squad_slots_remaining",
    "is_eligible",
    "validate_squad",
    # Engine
    "Candidate",
    "Outcome",
    "OutcomeLevel",
    "SquadEngine",
]
