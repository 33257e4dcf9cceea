"""Server configuration loaded from environment variables and defaults."""

import os

from holdemsync.core.rules import (
    TableConfig, DEFAULT_BUY_IN, DEFAULT_SMALL_BLIND, DEFAULT_BIG_BLIND,
)

# Table defaults for rooms created without overrides
BUY_IN_ENV = "HOLDEMSYNC_BUY_IN"
SMALL_BLIND_ENV = "HOLDEMSYNC_SMALL_BLIND"
BIG_BLIND_ENV = "HOLDEMSYNC_BIG_BLIND"

# Player id the relay uses when it stamps NEW_HAND messages
HOST_PLAYER_ID = os.getenv("HOLDEMSYNC_HOST_ID", "host")


def table_config_from_env() -> TableConfig:
    """
    Build the default TableConfig from the environment.

    Raises:
        ValueError: If a variable is not an integer or the blinds are invalid
    """
    return TableConfig(
        buy_in=int(os.getenv(BUY_IN_ENV, str(DEFAULT_BUY_IN))),
        small_blind=int(os.getenv(SMALL_BLIND_ENV, str(DEFAULT_SMALL_BLIND))),
        big_blind=int(os.getenv(BIG_BLIND_ENV, str(DEFAULT_BIG_BLIND))),
    )
