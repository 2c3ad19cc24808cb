"""Tests for data models."""

import pytest

from src.models import (
    DEFAULT_LIMITS,
    MAX_PER_COUNTRY,
    MAX_SQUAD_SIZE,
    POSITION_LIMITS,
    Player,
    Position,
    Squad,
    SquadEntry,
    SquadLimits,
)


def make_entry(
    id: int,
    country: str = "Brazil",
    position: Position = Position.DEFENDER,
) -> SquadEntry:
    """Helper to create squad entries."""
    return SquadEntry(
        player=Player(id=id, name=f"Player {id}", position=position),
        country=country,
    )


class TestPosition:
    """Tests for Position enum."""

    def test_values_are_display_names(self) -> None:
        """Position values should be the display strings."""
        assert [p.value for p in Position] == [
            "Goalkeeper",
            "Defender",
            "Midfielder",
            "Forward",
        ]

    def test_plural(self) -> None:
        """Test plural display name."""
        assert Position.GOALKEEPER.plural == "Goalkeepers"
        assert Position.FORWARD.plural == "Forwards"


class TestPlayer:
    """Tests for Player model."""

    def test_create_player(self) -> None:
        """Test basic player creation."""
        player = Player(id=11, name="Lionel Messi", position=Position.FORWARD)
        assert player.id == 11
        assert player.name == "Lionel Messi"
        assert player.position == Position.FORWARD

    def test_player_is_immutable(self) -> None:
        """Players cannot be changed after creation."""
        player = Player(id=1, name="Alisson", position=Position.GOALKEEPER)
        with pytest.raises(AttributeError):
            player.name = "Ederson"  # type: ignore[misc]

    def test_identity_by_value(self) -> None:
        """Players with the same fields compare equal."""
        a = Player(id=1, name="Alisson", position=Position.GOALKEEPER)
        b = Player(id=1, name="Alisson", position=Position.GOALKEEPER)
        assert a == b

    def test_negative_id_raises(self) -> None:
        """Test that negative id raises error."""
        with pytest.raises(ValueError, match="id cannot be negative"):
            Player(id=-1, name="Test", position=Position.DEFENDER)

    def test_non_integer_id_raises(self) -> None:
        """Test that a string id raises error."""
        with pytest.raises(ValueError, match="id must be an integer"):
            Player(id="1", name="Test", position=Position.DEFENDER)  # type: ignore[arg-type]

    def test_bool_id_raises(self) -> None:
        """Booleans are not accepted as ids."""
        with pytest.raises(ValueError, match="id must be an integer"):
            Player(id=True, name="Test", position=Position.DEFENDER)

    def test_empty_name_raises(self) -> None:
        """Test that an empty name raises error."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            Player(id=1, name="  ", position=Position.DEFENDER)

    def test_invalid_position_raises(self) -> None:
        """Test that a raw string position raises error."""
        with pytest.raises(ValueError, match="Unknown position"):
            Player(id=1, name="Test", position="Defender")  # type: ignore[arg-type]


class TestSquadEntry:
    """Tests for SquadEntry model."""

    def test_delegates_to_player(self) -> None:
        """Entry exposes the player's id, name and position."""
        entry = make_entry(5, country="Argentina", position=Position.FORWARD)
        assert entry.id == 5
        assert entry.name == "Player 5"
        assert entry.position == Position.FORWARD
        assert entry.country == "Argentina"


class TestSquadLimits:
    """Tests for SquadLimits configuration."""

    def test_defaults(self) -> None:
        """Default limits match the game constants."""
        assert DEFAULT_LIMITS.max_squad_size == MAX_SQUAD_SIZE == 15
        assert DEFAULT_LIMITS.max_per_country == MAX_PER_COUNTRY == 4
        assert DEFAULT_LIMITS.position_limit(Position.GOALKEEPER) == 2
        assert DEFAULT_LIMITS.position_limit(Position.DEFENDER) == 5
        assert DEFAULT_LIMITS.position_limit(Position.MIDFIELDER) == 5
        assert DEFAULT_LIMITS.position_limit(Position.FORWARD) == 5

    def test_default_positions_can_fill_squad(self) -> None:
        """Position quotas add up to at least the squad size."""
        assert sum(POSITION_LIMITS.values()) >= MAX_SQUAD_SIZE

    def test_custom_limits(self) -> None:
        """Smaller custom limits are accepted."""
        limits = SquadLimits(max_squad_size=3, max_per_country=2)
        assert limits.max_squad_size == 3
        assert limits.max_per_country == 2

    def test_unfillable_squad_raises(self) -> None:
        """Position quotas below the squad size are rejected."""
        with pytest.raises(ValueError, match="cannot fill a squad of 30"):
            SquadLimits(max_squad_size=30)

    def test_missing_position_raises(self) -> None:
        """Every position needs a quota."""
        with pytest.raises(ValueError, match="position_limits missing: Forward"):
            SquadLimits(
                position_limits={
                    Position.GOALKEEPER: 5,
                    Position.DEFENDER: 5,
                    Position.MIDFIELDER: 5,
                }
            )

    def test_non_positive_sizes_raise(self) -> None:
        """Squad size and country quota must be positive."""
        with pytest.raises(ValueError, match="max_squad_size"):
            SquadLimits(max_squad_size=0)
        with pytest.raises(ValueError, match="max_per_country"):
            SquadLimits(max_per_country=0)

    def test_zero_position_limit_raises(self) -> None:
        """Every position needs room for at least one player."""
        with pytest.raises(ValueError, match="Goalkeeper limit must be positive"):
            SquadLimits(
                position_limits={
                    Position.GOALKEEPER: 0,
                    Position.DEFENDER: 5,
                    Position.MIDFIELDER: 5,
                    Position.FORWARD: 5,
                }
            )

    def test_negative_position_limit_raises(self) -> None:
        """Negative position quotas are rejected."""
        with pytest.raises(ValueError, match="Forward limit must be positive"):
            SquadLimits(
                position_limits={
                    Position.GOALKEEPER: 2,
                    Position.DEFENDER: 10,
                    Position.MIDFIELDER: 10,
                    Position.FORWARD: -1,
                }
            )

    def test_position_limits_read_only(self) -> None:
        """Limits cannot be changed through the mapping."""
        with pytest.raises(TypeError):
            DEFAULT_LIMITS.position_limits[Position.GOALKEEPER] = 3  # type: ignore[index]


class TestSquad:
    """Tests for Squad state container."""

    def test_empty_squad(self) -> None:
        """Test empty squad."""
        squad = Squad()
        assert squad.size == 0
        assert len(squad) == 0
        assert squad.entries == ()
        assert squad.country_counts == {}
        assert squad.position_counts == {p: 0 for p in Position}

    def test_append_keeps_order(self) -> None:
        """Entries keep selection order."""
        squad = Squad()
        for i in (3, 1, 2):
            squad.append(make_entry(i))
        assert [e.id for e in squad.entries] == [3, 1, 2]
        assert [e.id for e in squad] == [3, 1, 2]

    def test_append_duplicate_raises(self) -> None:
        """Test adding an id already in squad."""
        squad = Squad([make_entry(1)])
        with pytest.raises(ValueError, match="already in squad"):
            squad.append(make_entry(1, country="France"))

    def test_remove_keeps_remaining_order(self) -> None:
        """Removal does not reorder the other entries."""
        squad = Squad([make_entry(i) for i in (1, 2, 3, 4)])
        removed = squad.remove(2)
        assert removed.id == 2
        assert [e.id for e in squad.entries] == [1, 3, 4]

    def test_remove_missing_raises(self) -> None:
        """Test removing an id not in squad."""
        with pytest.raises(ValueError, match="not in squad"):
            Squad().remove(99)

    def test_contains_and_get_entry(self) -> None:
        """Membership is by player id."""
        squad = Squad([make_entry(7)])
        assert 7 in squad
        assert 8 not in squad
        assert squad.get_entry(7).id == 7
        assert squad.get_entry(8) is None
        assert squad.player_ids == {7}

    def test_counts(self) -> None:
        """Country and position counts are derived from the entries."""
        squad = Squad(
            [
                make_entry(1, "Brazil", Position.GOALKEEPER),
                make_entry(2, "Brazil", Position.DEFENDER),
                make_entry(11, "Argentina", Position.FORWARD),
            ]
        )
        assert squad.country_counts == {"Brazil": 2, "Argentina": 1}
        assert squad.position_counts[Position.GOALKEEPER] == 1
        assert squad.position_counts[Position.DEFENDER] == 1
        assert squad.position_counts[Position.MIDFIELDER] == 0
        assert squad.position_counts[Position.FORWARD] == 1
        assert squad.count_for_country("Brazil") == 2
        assert squad.count_for_country("Germany") == 0
        assert squad.count_for_position(Position.FORWARD) == 1

    def test_entries_snapshot_is_detached(self) -> None:
        """Changing the squad does not change an earlier snapshot."""
        squad = Squad([make_entry(1)])
        snapshot = squad.entries
        squad.append(make_entry(2))
        assert len(snapshot) == 1

    def test_clear(self) -> None:
        """Test clearing the squad."""
        squad = Squad([make_entry(1), make_entry(2)])
        squad.clear()
        assert squad.size == 0
