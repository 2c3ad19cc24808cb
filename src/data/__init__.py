"""Candidate pool data for the squad builder."""

from .pool import (
    COUNTRY_FLAGS,
    POOL_CSV_PATH,
    Pool,
    PoolError,
    create_sample_pool,
    flag_url,
    freeze_pool,
    load_pool_from_csv,
    parse_position,
    validate_pool,
)

__all__ = [
    "COUNTRY_FLAGS",
    "POOL_CSV_PATH",
    "Pool",
    "PoolError",
    "create_sample_pool",
    "flag_url",
    "freeze_pool",
    "load_pool_from_csv",
    "parse_position",
    "validate_pool",
]
