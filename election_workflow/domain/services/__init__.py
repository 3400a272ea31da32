"""Domain services - pure functions over election models."""

from election_workflow.domain.services.tally import select_winning_proposal

__all__: list[str] = ["select_winning_proposal"]
