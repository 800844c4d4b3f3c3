from dataclasses import dataclass, field
from typing import Dict, List, Sequence
from maxsat.core.errors import InvariantViolation

@dataclass
class Objective:
    """
    Minimization objective: sum of weights of the literals assigned true.
    Each literal is a blocking variable; the parallel weight is its soft constraint's weight.
    """
    lits: List[int] = field(default_factory=list)
    weights: List[int] = field(default_factory=list)

    @property
    def capacity(self) -> int:
        return sum(self.weights)

    def cost_of(self, assignment: Sequence[bool]) -> int:
        """assignment[i] is the value of variable i + 1."""
        return sum(w for lit, w in zip(self.lits, self.weights) if assignment[lit - 1])

    def __len__(self) -> int:
        return len(self.lits)

def build_objective(block_weights: Dict[int, int], max_weight: int) -> Objective:
    """
    Collects (blocking variable, weight) pairs ordered by variable id.
    The weights must add up to the declared capacity.
    """
    obj = Objective()
    for vid in sorted(block_weights):
        obj.lits.append(vid)
        obj.weights.append(block_weights[vid])

    if obj.capacity != max_weight:
        raise InvariantViolation(
            f"Objective capacity {obj.capacity} does not match declared total weight {max_weight}"
        )
    return obj
