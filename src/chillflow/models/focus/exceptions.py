"""Custom exceptions for ChillFlow."""


class ChillFlowError(Exception):
    """Base exception for all ChillFlow errors."""


class InvalidPhaseOperationError(ChillFlowError):
    """Raised when an operation is not allowed in the current phase."""

    def __init__(self, operation: str, phase: object):
        super().__init__(f"Cannot {operation} while in {phase}")
        self.operation = operation
        self.phase = phase


class StorageError(ChillFlowError):
    """Raised when persisted focus data cannot be written."""
