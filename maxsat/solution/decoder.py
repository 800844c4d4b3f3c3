from types import MappingProxyType
from maxsat.core.errors import InvariantViolation
from maxsat.core.logging import get_logger
from maxsat.vars import VarRegistry
from maxsat.compilation.naming import parse_name
from maxsat.solution.types import INFEASIBLE_COST, SolveResult, SolverOutput, SolverStatus

logger = get_logger(__name__)

def decode(output: SolverOutput, registry: VarRegistry) -> SolveResult:
    """
    Maps a raw assignment back to domain variables.

    Blocking variables assigned true are reported as broken constraint ids,
    in ascending id order. Any registered name that is neither a domain
    variable nor a blocking variable raises InvariantViolation.
    """
    if output.status == SolverStatus.UNSATISFIABLE:
        return SolveResult(model=None, cost=INFEASIBLE_COST, broken=[])

    assignment = output.assignment
    if assignment is None or len(assignment) < registry.max_id:
        raise InvariantViolation(
            f"Solver returned {0 if assignment is None else len(assignment)} values "
            f"for {registry.max_id} registered variables"
        )

    values = {}
    broken = []
    for vid in range(1, registry.max_id + 1):
        name = registry.name_of(vid)
        binding = assignment[vid - 1]
        parsed = parse_name(name)
        if parsed is None:
            raise InvariantViolation(f"An unknown variable entered the model: {name}")
        kind, payload = parsed
        if kind == "block":
            if binding:
                broken.append(payload)
        else:
            values[payload] = binding

    broken.sort()
    logger.debug(f"Decoded {len(values)} variables, broken constraints: {broken}")
    return SolveResult(model=MappingProxyType(values), cost=output.cost, broken=broken)
