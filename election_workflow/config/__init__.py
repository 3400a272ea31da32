"""Configuration module for the election workflow.

Available Configurations:
- ElectionConfig: Status override, GENESIS seeding, description limit
"""

from election_workflow.config.election_config import (
    DEFAULT_ELECTION_CONFIG,
    TEST_ELECTION_CONFIG,
    ElectionConfig,
)

__all__ = [
    "ElectionConfig",
    "DEFAULT_ELECTION_CONFIG",
    "TEST_ELECTION_CONFIG",
]
