"""Shared fixtures for squad builder tests."""

import pytest

from src.analysis import SquadEngine
from src.data import create_sample_pool
from src.models import Player


@pytest.fixture
def pool() -> dict[str, list[Player]]:
    """The built-in four-nation pool."""
    return create_sample_pool()


@pytest.fixture
def engine(pool: dict[str, list[Player]]) -> SquadEngine:
    """Engine with an empty squad over the sample pool."""
    return SquadEngine(pool=pool)


@pytest.fixture
def by_id(pool: dict[str, list[Player]]) -> dict[int, tuple[Player, str]]:
    """Lookup of pool players by id, with their country."""
    return {
        player.id: (player, country)
        for country, players in pool.items()
        for player in players
    }


@pytest.fixture
def full_squad_ids() -> list[int]:
    """
    Ids of a 15-player squad that satisfies every quota.

    2 goalkeepers, 5 defenders, 5 midfielders and 3 forwards;
    4 Brazil, 4 Argentina, 4 France, 3 Germany.
    """
    return [1, 2, 3, 4, 7, 8, 9, 10, 14, 16, 17, 18, 22, 23, 24]
