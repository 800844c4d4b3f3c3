from enum import Enum
from dataclasses import dataclass
from typing import List, Mapping, NamedTuple, Optional

# Read-only snapshot: domain variable name -> value
Model = Mapping[str, bool]

INFEASIBLE_COST = -1

class SolverStatus(str, Enum):
    OPTIMUM = "OPTIMUM"
    UNSATISFIABLE = "UNSATISFIABLE"

@dataclass
class SolverOutput:
    """
    Raw answer from a solver adapter.
    assignment[i] is the value of variable i + 1 and covers every registered variable.
    """
    status: SolverStatus
    assignment: Optional[List[bool]] = None
    cost: int = INFEASIBLE_COST
    time_taken: float = 0.0

    @classmethod
    def infeasible(cls, time_taken: float = 0.0) -> "SolverOutput":
        return cls(status=SolverStatus.UNSATISFIABLE, time_taken=time_taken)

class SolveResult(NamedTuple):
    """Decoded solve result; unpacks as (model, cost, broken)."""
    model: Optional[Model]
    cost: int
    broken: List[int]

    @property
    def is_feasible(self) -> bool:
        return self.model is not None
