from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

@dataclass
class PBConstraint:
    """
    One compiled inequality: sum(coeffs[i] * lits[i]) >= at_least.
    coeffs is None for clause/cardinality form (all coefficients 1).
    """
    constraint_id: int
    lits: List[int]
    coeffs: Optional[List[int]]
    at_least: int

    @property
    def is_clause(self) -> bool:
        return self.coeffs is None and self.at_least == 1

    def coefficient_list(self) -> List[int]:
        if self.coeffs is None:
            return [1] * len(self.lits)
        return list(self.coeffs)

@dataclass
class CompilationArtifact:
    """
    Result of compiling the input constraints.
    Holds the PB inequalities plus the blocking metadata the cost model needs.
    """
    constraints: List[PBConstraint]

    # blocking var id -> weight of the associated soft constraint
    block_weights: Dict[int, int]
    # blocking var id -> constraint id
    block_to_constraint: Dict[int, int]
    # Sum of all block weights
    max_weight: int

    num_vars: int

    # Soft constraints whose blocking literal cannot disable them
    flagged_constraints: List[int] = field(default_factory=list)

    stats: Dict[str, Any] = field(default_factory=dict)
