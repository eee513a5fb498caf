"""
Exception types shared by the labtools search and permutation components.
"""


class LabToolsError(Exception):
    """Base class for all labtools errors."""
    pass


class InvalidArgumentError(LabToolsError, ValueError):
    """Raised when a required input is missing or malformed."""
    pass


class NotFoundError(LabToolsError, FileNotFoundError):
    """Raised when the search root does not exist."""
    pass
