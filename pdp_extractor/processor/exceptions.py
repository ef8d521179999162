class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ProcessingCancelledError(ProcessorError):
    """Raised when the caller cancels a file between two attachments."""


class InvalidTransitionError(ProcessorError):
    """Raised when a file would move backwards or revisit a processing state."""
