"""Squad status component showing size and quota usage."""

import streamlit as st

from ...analysis import SquadEngine
from ...models import Position


def render_squad_status(engine: SquadEngine) -> None:
    """
    Render squad size and the position breakdown.

    Args:
        engine: The engine whose squad is displayed.
    """
    limits = engine.limits
    slots_remaining = engine.slots_remaining

    st.metric(
        label="Squad Size",
        value=f"{engine.size} / {limits.max_squad_size}",
        delta=f"{slots_remaining} slots" if slots_remaining > 0 else "Full",
        delta_color="off",
    )

    position_counts = engine.position_counts
    cols = st.columns(2)
    for i, position in enumerate(Position):
        limit = limits.position_limit(position)
        slots = engine.position_slots(position)
        with cols[i % 2]:
            st.metric(
                label=position.plural,
                value=f"{position_counts[position]} / {limit}",
                delta=f"{slots} left" if slots > 0 else "Full",
                delta_color="off",
            )


def render_country_badge(engine: SquadEngine, country: str) -> None:
    """Render the "n / max selected" counter for a country."""
    max_per_country = engine.limits.max_per_country
    count = engine.country_counts.get(country, 0)
    if engine.country_slots(country) == 0:
        st.caption(f"{count} / {max_per_country} selected · Full")
    else:
        st.caption(f"{count} / {max_per_country} selected")
