"""
Core module for maxsat.
Provides error handling, logging and the input constraint types.
"""
from maxsat.core.errors import (
    MaxSATError, ValidationError, UnknownVariableError, InvariantViolation,
    AdapterError, ConfigError
)
from maxsat.core.logging import get_logger
from maxsat.core.types import (
    Lit, Hard, Soft, Strength, Constraint, strength_from_weight, parse_constraints,
    var, hard_clause, soft_clause, weighted_clause, hard_pb, soft_pb, weighted_pb, at_least
)

__all__ = [
    "MaxSATError", "ValidationError", "UnknownVariableError", "InvariantViolation",
    "AdapterError", "ConfigError",
    "get_logger",
    "Lit", "Hard", "Soft", "Strength", "Constraint", "strength_from_weight", "parse_constraints",
    "var", "hard_clause", "soft_clause", "weighted_clause", "hard_pb", "soft_pb", "weighted_pb", "at_least"
]
