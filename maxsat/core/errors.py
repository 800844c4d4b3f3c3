class MaxSATError(Exception):
    """Base exception for all maxsat related errors."""
    pass

class ValidationError(MaxSATError):
    """Raised when constraint input validation fails."""
    pass

class UnknownVariableError(MaxSATError, KeyError):
    """Raised when an index or name is not known to the variable registry."""
    pass

class InvariantViolation(MaxSATError):
    """
    Raised when the encoder and decoder disagree on an internal convention.
    This is a structural bug, not a data problem, and must never be swallowed.
    """
    pass

class AdapterError(MaxSATError):
    """Raised when a solver adapter cannot be selected or configured."""
    pass

class ConfigError(MaxSATError):
    """Raised when solver configuration cannot be loaded."""
    pass
