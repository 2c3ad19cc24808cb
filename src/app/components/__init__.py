"""Reusable UI components for the squad builder."""

from .player_table import render_player_table, render_squad_table
from .squad_status import render_country_badge, render_squad_status
from .validation_display import render_outcome, render_validation

__all__ = [
    "render_country_badge",
    "render_outcome",
    "render_player_table",
    "render_squad_status",
    "render_squad_table",
    "render_validation",
]
