"""Input adapters that normalize raw player pools."""

from .players import (
    DEFAULT_HEIGHT_INCHES,
    PoolReport,
    RawPlayerSources,
    load_player_pool,
    load_raw_records,
    normalize_player,
    normalize_player_pool,
    normalize_with_report,
    parse_height_inches,
    select_pool_records,
)

__all__ = [
    "DEFAULT_HEIGHT_INCHES",
    "PoolReport",
    "RawPlayerSources",
    "load_player_pool",
    "load_raw_records",
    "normalize_player",
    "normalize_player_pool",
    "normalize_with_report",
    "parse_height_inches",
    "select_pool_records",
]
