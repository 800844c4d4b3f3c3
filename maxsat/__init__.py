"""
maxsat: weighted partial MaxSAT over a pseudo-Boolean solver.
"""
from typing import TYPE_CHECKING

from maxsat.core.types import (
    Lit, Hard, Soft, Constraint, strength_from_weight,
    var, hard_clause, soft_clause, weighted_clause, hard_pb, soft_pb, weighted_pb, at_least
)
from maxsat.solution.types import Model, SolveResult

# Lazy import
if TYPE_CHECKING:
    from maxsat.problem import Problem

def __getattr__(name: str):
    if name == "Problem":
        try:
            from maxsat.problem import Problem
            return Problem
        except ImportError as e:
            raise ImportError(f"Failed to import Problem. Ensure dependencies (e.g., python-sat) are installed: {e}")
    raise AttributeError(f"module {__name__} has no attribute {name}")

__all__ = [
    "Problem", "Model", "SolveResult",
    "Lit", "Hard", "Soft", "Constraint", "strength_from_weight",
    "var", "hard_clause", "soft_clause", "weighted_clause", "hard_pb", "soft_pb", "weighted_pb", "at_least",
]
