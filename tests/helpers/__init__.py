"""Test helpers for election workflow tests.

Helpers:
    ADMIN, VOTER_1..VOTER_4, OUTSIDER: Stable test identities
    make_service: Build an ElectionService wired to an emitter stub
    advance_to: Drive an election forward through the normal transitions

Usage:
    from tests.helpers import ADMIN, VOTER_1, advance_to, make_service
"""

from tests.helpers.election_builder import (
    ADMIN,
    OUTSIDER,
    VOTER_1,
    VOTER_2,
    VOTER_3,
    VOTER_4,
    advance_to,
    make_service,
)

__all__ = [
    "ADMIN",
    "OUTSIDER",
    "VOTER_1",
    "VOTER_2",
    "VOTER_3",
    "VOTER_4",
    "advance_to",
    "make_service",
]
