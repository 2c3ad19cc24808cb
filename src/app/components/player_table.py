"""Player list components for candidates and squad members."""

from typing import Callable, Optional

import streamlit as st

from ...analysis import Candidate
from ...models import Player, SquadEntry


def render_player_table(
    candidates: list[Candidate],
    on_add: Optional[Callable[[Player, str], None]] = None,
) -> None:
    """
    Render candidate players with add buttons.

    The add button is disabled for ineligible candidates and its tooltip
    shows the first rule that blocks the add.

    Args:
        candidates: Candidates to display, with eligibility already computed.
        on_add: Callback when player is added.
    """
    if not candidates:
        st.info("No players to display.")
        return

    for candidate in candidates:
        _render_candidate_row(candidate, on_add)


def _render_candidate_row(
    candidate: Candidate,
    on_add: Optional[Callable[[Player, str], None]] = None,
) -> None:
    """Render a single candidate row."""
    player = candidate.player
    cols = st.columns([4, 1])

    with cols[0]:
        label = f"**{player.name}**"
        if candidate.selected:
            label += " ✅"
        st.markdown(label)
        st.caption(f"{player.position.value} ({candidate.country})")

    with cols[1]:
        if on_add is not None:
            st.button(
                "+ Add",
                key=f"add_{player.id}",
                disabled=not candidate.eligible,
                help=candidate.blocked_message,
                on_click=on_add,
                args=(player, candidate.country),
            )


def render_squad_table(
    entries: tuple[SquadEntry, ...],
    on_remove: Optional[Callable[[int], None]] = None,
) -> None:
    """
    Render squad members with remove buttons.

    Args:
        entries: Squad entries in selection order.
        on_remove: Callback receiving the player ID to remove.
    """
    if not entries:
        st.info("Your squad is empty. Start by adding players from the list.")
        return

    for entry in entries:
        cols = st.columns([4, 1])
        with cols[0]:
            st.markdown(f"**{entry.name}**")
            st.caption(f"{entry.position.value} ({entry.country})")
        with cols[1]:
            if on_remove is not None:
                st.button(
                    "− Remove",
                    key=f"remove_{entry.id}",
                    on_click=on_remove,
                    args=(entry.id,),
                )
