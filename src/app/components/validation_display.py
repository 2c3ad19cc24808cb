"""Display components for outcomes and validation results."""

import streamlit as st

from ...analysis import Outcome, OutcomeLevel, ValidationResult


OUTCOME_ICONS = {
    OutcomeLevel.SUCCESS: "✅",
    OutcomeLevel.INFO: "ℹ️",
    OutcomeLevel.ERROR: "❌",
}


def render_outcome(outcome: Outcome) -> None:
    """
    Show an add/remove outcome as a transient toast.

    Args:
        outcome: Outcome returned by the engine.
    """
    st.toast(outcome.message, icon=OUTCOME_ICONS[outcome.level])


def render_validation(result: ValidationResult) -> None:
    """
    Render validation results with errors and warnings.

    Args:
        result: Validation result to display.
    """
    if result.is_valid and not result.warnings:
        st.success("Squad complete!")
        return

    for error in result.errors:
        st.error(f"❌ {error.message}")

    for warning in result.warnings:
        st.info(warning)
