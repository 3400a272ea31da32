"""Election directory service.

Holds one ElectionService per election identifier. There is no
process-wide election singleton: callers create elections here and look
them up by id for every subsequent operation.
"""

from __future__ import annotations

import asyncio
from uuid import UUID

from election_workflow.application.ports.election_event_emitter import (
    ElectionEventEmitterPort,
)
from election_workflow.application.services.base import LoggingMixin
from election_workflow.application.services.election_service import ElectionService
from election_workflow.config.election_config import (
    DEFAULT_ELECTION_CONFIG,
    ElectionConfig,
)
from election_workflow.domain.exceptions import ElectionError
from election_workflow.domain.errors.registry import (
    ElectionAlreadyExistsError,
    ElectionNotFoundError,
)
from election_workflow.domain.models.election import Election


class ElectionDirectoryService(LoggingMixin):
    """Registry of elections keyed by election id.

    All elections created here share the directory's event emitter and
    configuration.

    Attributes:
        _elections: Election services in creation order.
        _lock: Guards creation so ids stay unique.
    """

    def __init__(
        self,
        event_emitter: ElectionEventEmitterPort,
        config: ElectionConfig | None = None,
    ) -> None:
        self._event_emitter = event_emitter
        self._config = config or DEFAULT_ELECTION_CONFIG
        self._elections: dict[UUID, ElectionService] = {}
        self._lock = asyncio.Lock()
        self._init_logger()

    async def create_election(
        self, admin_id: str, election_id: UUID | None = None
    ) -> ElectionService:
        """Create a new election administered by admin_id.

        Args:
            admin_id: Administrator identity, fixed for the election's lifetime.
            election_id: Identifier to use; generated when omitted.

        Returns:
            The ElectionService for the new election, in RegisteringVoters.

        Raises:
            InvalidArgumentError: If admin_id is the zero/empty identity.
            ElectionAlreadyExistsError: If election_id is already in use.
        """
        log = self._log_operation("create_election", admin_id=admin_id)
        async with self._lock:
            if election_id is not None and election_id in self._elections:
                log.warning("create_election_rejected", election_id=str(election_id))
                raise ElectionAlreadyExistsError(election_id)
            try:
                election = Election.create(admin_id, election_id=election_id)
            except ElectionError as exc:
                log.warning(
                    "create_election_rejected",
                    error_type=type(exc).__name__,
                    reason=str(exc),
                )
                raise
            service = ElectionService(
                election,
                event_emitter=self._event_emitter,
                config=self._config,
            )
            self._elections[election.election_id] = service

        log.info("election_created", election_id=str(election.election_id))
        return service

    def get_election(self, election_id: UUID) -> ElectionService:
        """Look up the service for an election.

        Raises:
            ElectionNotFoundError: If no election has this id.
        """
        service = self._elections.get(election_id)
        if service is None:
            raise ElectionNotFoundError(election_id)
        return service

    def list_election_ids(self) -> list[UUID]:
        """Return election ids in creation order."""
        return list(self._elections)
