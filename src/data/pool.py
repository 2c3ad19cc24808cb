"""Candidate pool data: built-in sample pool, parsing and CSV loading."""

import csv
import logging
from pathlib import Path
from typing import Mapping, Sequence

from ..models import Player, Position


logger = logging.getLogger(__name__)

# Type alias for a candidate pool (country -> ordered players)
Pool = Mapping[str, Sequence[Player]]

# Default pool file location
POOL_CSV_PATH = Path(__file__).parent.parent.parent / "data" / "players.csv"

# ISO codes used for flag images
COUNTRY_FLAGS = {
    "Brazil": "br",
    "Argentina": "ar",
    "France": "fr",
    "Germany": "de",
}

# Position name variations mapping
POSITION_MAP = {
    "goalkeeper": Position.GOALKEEPER,
    "goalkeepers": Position.GOALKEEPER,
    "gk": Position.GOALKEEPER,
    "gkp": Position.GOALKEEPER,
    "keeper": Position.GOALKEEPER,
    "defender": Position.DEFENDER,
    "defenders": Position.DEFENDER,
    "def": Position.DEFENDER,
    "midfielder": Position.MIDFIELDER,
    "midfielders": Position.MIDFIELDER,
    "mid": Position.MIDFIELDER,
    "forward": Position.FORWARD,
    "forwards": Position.FORWARD,
    "fwd": Position.FORWARD,
    "striker": Position.FORWARD,
}

CSV_COLUMNS = ("id", "name", "position", "country")


class PoolError(ValueError):
    """Raised when candidate pool data is malformed."""

    pass


def parse_position(position_str: str) -> Position:
    """
    Parse a position string to Position enum.

    Args:
        position_str: Position name, plural or abbreviation.

    Returns:
        Position enum value.

    Raises:
        PoolError: If position cannot be parsed.
    """
    normalized = position_str.lower().strip()
    if normalized in POSITION_MAP:
        return POSITION_MAP[normalized]
    raise PoolError(f"Unknown position: {position_str}")


def flag_url(country: str, width: int = 40) -> str:
    """Flag image URL for a country, empty string if the country is unknown."""
    code = COUNTRY_FLAGS.get(country)
    if code is None:
        return ""
    return f"https://flagcdn.com/w{width}/{code}.png"


def validate_pool(pool: Pool) -> None:
    """
    Check a candidate pool for structural problems.

    Args:
        pool: Mapping of country name to players.

    Raises:
        PoolError: On an empty country name, a non-Player member, or a player
            id that appears more than once anywhere in the pool.
    """
    seen: dict[int, str] = {}
    for country, players in pool.items():
        if not isinstance(country, str) or not country.strip():
            raise PoolError(f"Invalid country name: {country!r}")
        for player in players:
            if not isinstance(player, Player):
                raise PoolError(f"{country} contains a non-player: {player!r}")
            if player.id in seen:
                raise PoolError(
                    f"Duplicate player id {player.id} "
                    f"({seen[player.id]} and {country})"
                )
            seen[player.id] = country


def freeze_pool(pool: Pool) -> dict[str, tuple[Player, ...]]:
    """Validate a pool and return a copy with tuples for player lists."""
    validate_pool(pool)
    return {country: tuple(players) for country, players in pool.items()}


def create_sample_pool() -> dict[str, list[Player]]:
    """
    Create the built-in candidate pool.

    Returns:
        Four national pools of six players each, ids 1-24.
    """
    gk, df, mf, fw = (
        Position.GOALKEEPER,
        Position.DEFENDER,
        Position.MIDFIELDER,
        Position.FORWARD,
    )
    return {
        "Brazil": [
            Player(id=1, name="Alisson", position=gk),
            Player(id=2, name="Marquinhos", position=df),
            Player(id=3, name="Éder Militão", position=df),
            Player(id=4, name="Casemiro", position=mf),
            Player(id=5, name="Neymar Jr.", position=fw),
            Player(id=6, name="Vinícius Jr.", position=fw),
        ],
        "Argentina": [
            Player(id=7, name="E. Martínez", position=gk),
            Player(id=8, name="C. Romero", position=df),
            Player(id=9, name="L. Martínez", position=df),
            Player(id=10, name="R. De Paul", position=mf),
            Player(id=11, name="Lionel Messi", position=fw),
            Player(id=12, name="J. Álvarez", position=fw),
        ],
        "France": [
            Player(id=13, name="Mike Maignan", position=gk),
            Player(id=14, name="W. Saliba", position=df),
            Player(id=15, name="J. Koundé", position=df),
            Player(id=16, name="A. Tchouaméni", position=mf),
            Player(id=17, name="K. Mbappé", position=fw),
            Player(id=18, name="A. Griezmann", position=fw),
        ],
        "Germany": [
            Player(id=19, name="M. ter Stegen", position=gk),
            Player(id=20, name="A. Rüdiger", position=df),
            Player(id=21, name="J. Tah", position=df),
            Player(id=22, name="Joshua Kimmich", position=mf),
            Player(id=23, name="Jamal Musiala", position=mf),
            Player(id=24, name="Kai Havertz", position=fw),
        ],
    }


def load_pool_from_csv(csv_path: Path = POOL_CSV_PATH) -> dict[str, list[Player]]:
    """
    Load a candidate pool from a CSV file.

    The file needs the columns ``id,name,position,country``. Players keep
    the file order within their country.

    Args:
        csv_path: Path to CSV file. Defaults to data/players.csv.

    Returns:
        Dictionary mapping country name to players.

    Raises:
        PoolError: If the file is not valid UTF-8 CSV, is missing columns,
            or a row is malformed.
        FileNotFoundError: If the file does not exist.
    """
    pool: dict[str, list[Player]] = {}

    try:
        with open(csv_path, "r", newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = [c for c in CSV_COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise PoolError(f"{csv_path}: missing columns {', '.join(missing)}")

            for row in reader:
                line = reader.line_num
                country = (row.get("country") or "").strip()
                if not country:
                    raise PoolError(f"{csv_path}:{line}: missing country")
                try:
                    player = Player(
                        id=int(row["id"]),
                        name=(row.get("name") or "").strip(),
                        position=parse_position(row.get("position") or ""),
                    )
                except (TypeError, ValueError) as e:
                    raise PoolError(f"{csv_path}:{line}: {e}") from e
                pool.setdefault(country, []).append(player)
    except (UnicodeDecodeError, csv.Error) as e:
        raise PoolError(f"{csv_path}: {e}") from e

    validate_pool(pool)
    logger.info(
        "Loaded %d players from %d countries (%s)",
        sum(len(p) for p in pool.values()),
        len(pool),
        csv_path,
    )
    return pool
