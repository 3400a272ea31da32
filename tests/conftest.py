"""
Pytest configuration and shared fixtures for election workflow tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from collections.abc import Iterator

import pytest
import structlog

from election_workflow.application.services.election_service import ElectionService
from election_workflow.infrastructure.stubs import ElectionEventEmitterStub
from tests.helpers import make_service


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after tests that reconfigure it."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def emitter() -> ElectionEventEmitterStub:
    """Create a fresh event emitter stub."""
    return ElectionEventEmitterStub()


@pytest.fixture
def service(emitter: ElectionEventEmitterStub) -> ElectionService:
    """Create a fresh election in RegisteringVoters, administered by ADMIN."""
    election_service, _ = make_service(emitter=emitter)
    return election_service
