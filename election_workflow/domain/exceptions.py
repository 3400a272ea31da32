"""Base exception classes for the election domain layer."""


class ElectionError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Subclasses:
    - UnauthorizedError
    - InvalidPhaseError
    - InvalidArgumentError
    - AlreadyExistsError
    - AlreadyVotedError
    - NotFoundError
    - EventEmissionError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
