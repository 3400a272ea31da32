"""Election service - the phase-gated voting workflow for one election.

Every mutating call follows the same pipeline:

    access gate -> workflow phase check -> registry mutation -> emit event -> commit

The election is held as an immutable snapshot. A call builds the next
snapshot, emits its event, and only then swaps the snapshot in. A call
that fails at any step (including event emission) leaves the election
exactly as it was.

Mutating calls are serialized by a single asyncio.Lock per election.
Read calls use the last committed snapshot and never take the lock.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from uuid import UUID

from election_workflow.application.ports.election_event_emitter import (
    ElectionEventEmitterPort,
)
from election_workflow.application.services.access_gate import AccessGate
from election_workflow.application.services.base import LoggingMixin
from election_workflow.config.election_config import (
    DEFAULT_ELECTION_CONFIG,
    ElectionConfig,
)
from election_workflow.domain.errors.event_emission import EventEmissionError
from election_workflow.domain.errors.registry import InvalidArgumentError
from election_workflow.domain.errors.workflow import StatusOverrideDisabledError
from election_workflow.domain.events.election import (
    ElectionEvent,
    ProposalRegisteredEvent,
    VotedEvent,
    VoterRegisteredEvent,
    WorkflowStatusChangeEvent,
)
from election_workflow.domain.exceptions import ElectionError
from election_workflow.domain.models.election import Election
from election_workflow.domain.models.proposal import Proposal
from election_workflow.domain.models.voter import Voter
from election_workflow.domain.models.workflow_status import WorkflowStatus
from election_workflow.infrastructure.observability.context import election_scope

Transform = Callable[[Election], tuple[Election, ElectionEvent]]


class ElectionService(LoggingMixin):
    """Administrator- and voter-facing operations on one election.

    Attributes:
        _election: Last committed election snapshot.
        _event_emitter: Observer receiving one event per successful mutation.
        _config: Election behavior configuration.
        _gate: Caller identity checks.
        _lock: Serialization point for mutating calls.
    """

    def __init__(
        self,
        election: Election,
        event_emitter: ElectionEventEmitterPort,
        config: ElectionConfig | None = None,
        access_gate: AccessGate | None = None,
    ) -> None:
        """Initialize the service around an existing election snapshot.

        Args:
            election: Initial election state.
            event_emitter: Port receiving election events.
            config: Behavior configuration (defaults to DEFAULT_ELECTION_CONFIG).
            access_gate: Caller checks (defaults to a new AccessGate).
        """
        self._election = election
        self._event_emitter = event_emitter
        self._config = config or DEFAULT_ELECTION_CONFIG
        self._gate = access_gate or AccessGate()
        self._lock = asyncio.Lock()
        self._init_logger()

    @property
    def election(self) -> Election:
        """Last committed election snapshot."""
        return self._election

    @property
    def election_id(self) -> UUID:
        return self._election.election_id

    @property
    def admin_id(self) -> str:
        return self._election.admin_id

    # =========================================================================
    # Voter registry
    # =========================================================================

    async def add_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Whitelist a voter (administrator only, RegisteringVoters only).

        Args:
            caller_id: Identity performing the call.
            voter_id: Identity to register.

        Returns:
            The new voter record.

        Raises:
            UnauthorizedError: If caller_id is not the administrator.
            InvalidPhaseError: Outside RegisteringVoters.
            InvalidArgumentError: If voter_id is the zero/empty identity.
            VoterAlreadyRegisteredError: If voter_id is already registered.
            EventEmissionError: If the VoterRegistered event could not be emitted.
        """

        def transform(election: Election) -> tuple[Election, ElectionEvent]:
            self._gate.require_admin(election, caller_id)
            updated = election.with_voter(voter_id)
            return updated, VoterRegisteredEvent(
                election_id=election.election_id, voter_id=voter_id
            )

        updated, _ = await self._apply("add_voter", caller_id, transform, voter_id=voter_id)
        return updated.voters.voters[voter_id]

    async def get_voter(self, caller_id: str, voter_id: str) -> Voter | None:
        """Look up any voter's record (registered voters only).

        Returns:
            The voter record, or None if voter_id is not registered.

        Raises:
            UnauthorizedError: If caller_id is not a registered voter.
        """
        election = self._election
        self._gate.require_registered_voter(election, caller_id)
        return election.voters.get(voter_id)

    # =========================================================================
    # Proposal registry
    # =========================================================================

    async def add_proposal(self, caller_id: str, description: str) -> Proposal:
        """Submit a proposal (registered voters, ProposalsRegistrationStarted only).

        Args:
            caller_id: Identity of the submitting voter.
            description: Proposal text, non-empty.

        Returns:
            The new proposal, whose id is its index in the registry.

        Raises:
            UnauthorizedError: If caller_id is not a registered voter.
            InvalidPhaseError: Outside ProposalsRegistrationStarted.
            InvalidArgumentError: If description is empty or too long.
            EventEmissionError: If the ProposalRegistered event could not be emitted.
        """

        def transform(election: Election) -> tuple[Election, ElectionEvent]:
            self._gate.require_registered_voter(election, caller_id)
            proposal_id = election.proposals.next_id
            updated = election.with_proposal(
                description,
                submitted_by=caller_id,
                max_description_length=self._config.max_description_length,
            )
            return updated, ProposalRegisteredEvent(
                election_id=election.election_id, proposal_id=proposal_id
            )

        updated, _ = await self._apply(
            "add_proposal", caller_id, transform, description_length=len(description)
        )
        return updated.proposals.proposals[-1]

    async def get_one_proposal(self, caller_id: str, proposal_id: int) -> Proposal:
        """Read one proposal (registered voters only).

        Raises:
            UnauthorizedError: If caller_id is not a registered voter.
            ProposalNotFoundError: If proposal_id is out of range.
        """
        election = self._election
        self._gate.require_registered_voter(election, caller_id)
        return election.proposals.get(proposal_id)

    async def get_proposals(self, caller_id: str) -> list[Proposal]:
        """Read all proposals in index order (registered voters only)."""
        election = self._election
        self._gate.require_registered_voter(election, caller_id)
        return list(election.proposals)

    # =========================================================================
    # Voting and tally
    # =========================================================================

    async def set_vote(self, caller_id: str, proposal_id: int) -> Voter:
        """Cast the caller's single vote (VotingSessionStarted only).

        Returns:
            The caller's updated voter record.

        Raises:
            UnauthorizedError: If caller_id is not a registered voter.
            AlreadyVotedError: If the caller has already voted.
            InvalidPhaseError: Outside VotingSessionStarted.
            ProposalNotFoundError: If proposal_id is out of range.
            EventEmissionError: If the Voted event could not be emitted.
        """

        def transform(election: Election) -> tuple[Election, ElectionEvent]:
            self._gate.require_registered_voter(election, caller_id)
            updated = election.with_vote(caller_id, proposal_id)
            return updated, VotedEvent(
                election_id=election.election_id,
                voter_id=caller_id,
                proposal_id=proposal_id,
            )

        updated, _ = await self._apply(
            "set_vote", caller_id, transform, proposal_id=proposal_id
        )
        return updated.voters.voters[caller_id]

    async def tally_votes(self, caller_id: str) -> int | None:
        """Tally votes and move to VotesTallied (administrator only).

        The proposal with the most votes wins; on a tie the lowest index wins.

        Returns:
            The winning proposal id, None if no proposal was submitted.

        Raises:
            UnauthorizedError: If caller_id is not the administrator.
            InvalidPhaseError: Outside VotingSessionEnded.
            EventEmissionError: If the WorkflowStatusChange event could not be emitted.
        """

        def transform(election: Election) -> tuple[Election, ElectionEvent]:
            self._gate.require_admin(election, caller_id)
            updated = election.with_tally()
            return updated, WorkflowStatusChangeEvent(
                election_id=election.election_id,
                previous_status=election.status,
                new_status=updated.status,
            )

        updated, _ = await self._apply("tally_votes", caller_id, transform)
        self._log_operation(
            "tally_votes", caller_id=caller_id, election_id=str(updated.election_id)
        ).info(
            "winner_selected",
            winning_proposal_id=updated.winning_proposal_id,
            proposal_count=len(updated.proposals),
        )
        return updated.winning_proposal_id

    async def get_winner_id(self) -> int:
        """Return the winning proposal id (any caller).

        Raises:
            InvalidPhaseError: Before VotesTallied is reached.
            ProposalNotFoundError: If the tally found no proposals.
        """
        return self._election.winner_id()

    async def get_winning_proposal(self) -> Proposal:
        """Return the winning proposal record (any caller)."""
        return self._election.winning_proposal()

    # =========================================================================
    # Workflow state machine
    # =========================================================================

    async def get_workflow_status(self) -> WorkflowStatus:
        return self._election.status

    async def start_proposals_registering(self, caller_id: str) -> WorkflowStatus:
        """RegisteringVoters -> ProposalsRegistrationStarted.

        When GENESIS seeding is configured, the placeholder proposal is
        appended at index 0 in the same commit.
        """
        return await self._transition(
            "start_proposals_registering",
            caller_id,
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
        )

    async def end_proposals_registering(self, caller_id: str) -> WorkflowStatus:
        """ProposalsRegistrationStarted -> ProposalsRegistrationEnded."""
        return await self._transition(
            "end_proposals_registering",
            caller_id,
            WorkflowStatus.PROPOSALS_REGISTRATION_ENDED,
        )

    async def start_voting_session(self, caller_id: str) -> WorkflowStatus:
        """ProposalsRegistrationEnded -> VotingSessionStarted."""
        return await self._transition(
            "start_voting_session",
            caller_id,
            WorkflowStatus.VOTING_SESSION_STARTED,
        )

    async def end_voting_session(self, caller_id: str) -> WorkflowStatus:
        """VotingSessionStarted -> VotingSessionEnded."""
        return await self._transition(
            "end_voting_session",
            caller_id,
            WorkflowStatus.VOTING_SESSION_ENDED,
        )

    async def set_workflow_status(
        self, caller_id: str, new_status: WorkflowStatus
    ) -> WorkflowStatus:
        """Set the workflow status directly, bypassing the transition matrix.

        Recovery and test-harness entry point. Refused unless the config
        enables it. Emits WorkflowStatusChange like a regular transition.

        Raises:
            UnauthorizedError: If caller_id is not the administrator.
            InvalidArgumentError: If new_status is not a WorkflowStatus.
            StatusOverrideDisabledError: If the override is not enabled.
            EventEmissionError: If the WorkflowStatusChange event could not be emitted.
        """

        def transform(election: Election) -> tuple[Election, ElectionEvent]:
            self._gate.require_admin(election, caller_id)
            if not isinstance(new_status, WorkflowStatus):
                raise InvalidArgumentError(f"Unknown workflow status: {new_status!r}")
            if not self._config.allow_status_override:
                raise StatusOverrideDisabledError(election.status, new_status)
            updated = election.with_forced_status(new_status)
            return updated, WorkflowStatusChangeEvent(
                election_id=election.election_id,
                previous_status=election.status,
                new_status=new_status,
            )

        updated, event = await self._apply("set_workflow_status", caller_id, transform)
        self._log_operation(
            "set_workflow_status",
            caller_id=caller_id,
            election_id=str(updated.election_id),
        ).warning(
            "workflow_status_overridden",
            previous_status=event.previous_status.value,
            new_status=updated.status.value,
        )
        return updated.status

    async def _transition(
        self, operation: str, caller_id: str, target: WorkflowStatus
    ) -> WorkflowStatus:
        def transform(election: Election) -> tuple[Election, ElectionEvent]:
            self._gate.require_admin(election, caller_id)
            updated = election.with_status(target)
            if (
                target is WorkflowStatus.PROPOSALS_REGISTRATION_STARTED
                and self._config.seed_genesis_proposal
            ):
                updated = updated.with_genesis_proposal()
            return updated, WorkflowStatusChangeEvent(
                election_id=election.election_id,
                previous_status=election.status,
                new_status=target,
            )

        updated, _ = await self._apply(operation, caller_id, transform)
        return updated.status

    # =========================================================================
    # Commit pipeline
    # =========================================================================

    async def _apply(
        self,
        operation: str,
        caller_id: str,
        transform: Transform,
        **context: object,
    ) -> tuple[Election, ElectionEvent]:
        """Run transform under the lock, emit its event, then commit.

        Args:
            operation: Operation name for logging.
            caller_id: Identity performing the call.
            transform: Builds (next snapshot, event) from the current snapshot,
                       raising an ElectionError when the call is illegal.
            **context: Additional log context.

        Returns:
            The committed election snapshot and the event emitted for it.

        Raises:
            ElectionError: Whatever transform raised, unchanged.
            EventEmissionError: If the emitter failed; nothing is committed.
        """
        with election_scope(self._election.election_id):
            log = self._log_operation(operation, caller_id=caller_id, **context)
            async with self._lock:
                current = self._election
                try:
                    updated, event = transform(current)
                except ElectionError as exc:
                    log.warning(
                        f"{operation}_rejected",
                        error_type=type(exc).__name__,
                        reason=str(exc),
                        status=current.status.value,
                    )
                    raise

                try:
                    await self._event_emitter.emit(event)
                except Exception as exc:
                    log.error(
                        f"{operation}_event_emission_failed",
                        event_type=event.event_type,
                        error=str(exc),
                        error_type=type(exc).__name__,
                    )
                    raise EventEmissionError(
                        election_id=current.election_id,
                        event_type=event.event_type,
                        cause=exc,
                    ) from exc

                self._election = updated

            log.info(
                f"{operation}_completed",
                event_type=event.event_type,
                status=updated.status.value,
            )
            return updated, event
