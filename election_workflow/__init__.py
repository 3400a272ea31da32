"""
Election Workflow - Permissioned Voting Lifecycle

A single administrator drives an election through a fixed sequence of
phases while whitelisted voters submit proposals and cast one vote each.

Lifecycle:
- RegisteringVoters
- ProposalsRegistrationStarted
- ProposalsRegistrationEnded
- VotingSessionStarted
- VotingSessionEnded
- VotesTallied
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
