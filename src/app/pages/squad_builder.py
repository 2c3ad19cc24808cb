"""Squad builder page for selecting and managing the squad."""

import logging

import streamlit as st

from ...analysis import Outcome, SquadEngine
from ...data import POOL_CSV_PATH, PoolError, create_sample_pool, flag_url, load_pool_from_csv
from ...models import Player
from ..components import (
    render_country_badge,
    render_outcome,
    render_player_table,
    render_squad_status,
    render_squad_table,
    render_validation,
)


logger = logging.getLogger(__name__)


def _init_session_state() -> None:
    """Initialize session state variables."""
    if "engine" not in st.session_state:
        st.session_state.engine = SquadEngine(pool=_get_pool())
    if "notification" not in st.session_state:
        st.session_state.notification = None


def _get_pool() -> dict[str, list[Player]]:
    """
    Get the candidate pool from the CSV file with fallback to sample data.

    Returns:
        Mapping of country name to players.
    """
    if not POOL_CSV_PATH.exists():
        return create_sample_pool()
    try:
        return load_pool_from_csv(POOL_CSV_PATH)
    except PoolError as e:
        logger.warning("Falling back to sample pool: %s", e)
        return create_sample_pool()


def _notify(outcome: Outcome) -> None:
    st.session_state.notification = outcome


def _add_player(player: Player, country: str) -> None:
    """Add player to squad and queue the outcome notification."""
    _notify(st.session_state.engine.add(player, country))


def _remove_player(player_id: int) -> None:
    """Remove player from squad and queue the outcome notification."""
    _notify(st.session_state.engine.remove(player_id))


def _clear_squad() -> None:
    st.session_state.engine.reset()


def render() -> None:
    """Render the squad builder page."""
    _init_session_state()
    engine: SquadEngine = st.session_state.engine

    if st.session_state.notification is not None:
        render_outcome(st.session_state.notification)
        st.session_state.notification = None

    st.title("Football Squad Builder")
    st.caption(
        f"Build a {engine.limits.max_squad_size}-player squad "
        "with positional and national limits."
    )

    players_col, squad_col = st.columns(2)

    with players_col:
        st.header("Available Players")
        candidates = engine.candidates()
        for country in engine.countries:
            title_col, badge_col = st.columns([3, 1])
            with title_col:
                url = flag_url(country)
                if url:
                    st.markdown(f"### ![{country} flag]({url}) {country}")
                else:
                    st.markdown(f"### {country}")
            with badge_col:
                render_country_badge(engine, country)
            render_player_table(
                [c for c in candidates if c.country == country],
                on_add=_add_player,
            )

    with squad_col:
        st.header("My Squad")
        render_squad_status(engine)
        st.divider()
        render_squad_table(engine.squad, on_remove=_remove_player)

        if engine.size > 0:
            st.button("Clear squad", on_click=_clear_squad)

        st.divider()
        render_validation(engine.validate())
