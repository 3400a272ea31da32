"""Election workflow configuration.

This module defines configuration for election behavior with environment
variable overrides.

Environment Variables:
- ELECTION_ALLOW_STATUS_OVERRIDE: Enable the direct workflow status
  override used for recovery and test harnesses (default: false)
- ELECTION_SEED_GENESIS_PROPOSAL: Seed a "GENESIS" proposal at index 0
  when proposal registration starts (default: false)
- ELECTION_MAX_DESCRIPTION_LENGTH: Max proposal description length in
  characters (default: 10000)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from election_workflow.domain.models.proposal import DEFAULT_MAX_DESCRIPTION_LENGTH

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive). Any other
    value falls back to the default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class ElectionConfig:
    """Configuration for election services.

    Attributes:
        allow_status_override: Whether set_workflow_status may bypass the
            forward-only state machine. Default: False.
        seed_genesis_proposal: Whether start_proposals_registering appends a
            "GENESIS" placeholder at index 0. Default: False.
        max_description_length: Longest accepted proposal description.
            Default: 10,000 characters.
    """

    allow_status_override: bool = False
    seed_genesis_proposal: bool = False
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_description_length < 1:
            raise ValueError(
                f"max_description_length must be positive, got {self.max_description_length}"
            )

    @classmethod
    def from_environment(cls) -> ElectionConfig:
        """Create config from environment variables with defaults.

        Environment Variables:
            ELECTION_ALLOW_STATUS_OVERRIDE: Enable status override (default: false)
            ELECTION_SEED_GENESIS_PROPOSAL: Seed GENESIS proposal (default: false)
            ELECTION_MAX_DESCRIPTION_LENGTH: Description limit (default: 10000)

        Returns:
            ElectionConfig with values from environment or defaults.
        """
        return cls(
            allow_status_override=_get_bool_env(
                "ELECTION_ALLOW_STATUS_OVERRIDE", cls.allow_status_override
            ),
            seed_genesis_proposal=_get_bool_env(
                "ELECTION_SEED_GENESIS_PROPOSAL", cls.seed_genesis_proposal
            ),
            max_description_length=_get_int_env(
                "ELECTION_MAX_DESCRIPTION_LENGTH", cls.max_description_length
            ),
        )


# Default configuration instance
DEFAULT_ELECTION_CONFIG = ElectionConfig()

# Test harness configuration: status override enabled
TEST_ELECTION_CONFIG = ElectionConfig(allow_status_override=True)
