from typing import List, Optional, Sequence, Tuple
from maxsat.core.logging import get_logger
from maxsat.core.types import Constraint
from maxsat.vars import VarRegistry
from maxsat.compilation.artifact import CompilationArtifact, PBConstraint
from maxsat.compilation.naming import blocking_name, domain_name

logger = get_logger(__name__)

def attach_blocking_literal(
    lits: List[int],
    coeffs: Optional[List[int]],
    at_least: int,
    block_var: int,
) -> Tuple[List[int], Optional[List[int]], bool]:
    """
    Adds the blocking literal of a soft constraint to its inequality.

    With explicit coefficients the blocking literal gets at_least as its
    coefficient, so setting it true satisfies the threshold on its own.
    That only disables the constraint when no coefficient is negative:
    a true negative term can still pull the sum below at_least.
    Without coefficients the literal counts 1, which only disables the
    constraint when at_least == 1.

    Returns (lits, coeffs, disables) where disables is False when the
    blocking literal cannot always satisfy the constraint.
    """
    new_lits = lits + [block_var]
    if coeffs is None:
        return new_lits, None, at_least == 1
    return new_lits, coeffs + [at_least], at_least + sum(c for c in coeffs if c < 0) >= at_least

def compile_literals(constraint: Constraint, registry: VarRegistry) -> List[int]:
    out = []
    for lit in constraint.literals:
        vid = registry.register(domain_name(lit.var))
        out.append(-vid if lit.neg else vid)
    return out

def compile_constraints(constraints: Sequence[Constraint], registry: VarRegistry) -> CompilationArtifact:
    """
    Compiles constraints, in order, into PB inequalities.
    Constraint ids are positions in the input sequence.
    Soft constraints get a blocking variable registered right after their own literals.
    """
    compiled: List[PBConstraint] = []
    block_weights = {}
    block_to_constraint = {}
    flagged = []
    max_weight = 0

    for cid, constr in enumerate(constraints):
        lits = compile_literals(constr, registry)
        coeffs = list(constr.coefficients) if constr.coefficients is not None else None

        if constr.is_soft:
            bl = registry.register(blocking_name(cid))
            lits, coeffs, disables = attach_blocking_literal(lits, coeffs, constr.at_least, bl)
            if not disables:
                # TODO: weight the blocking literal by at_least minus the most negative reachable sum
                logger.warning(
                    f"Soft constraint {cid} (at_least={constr.at_least}, coefficients={constr.coefficients}) "
                    f"cannot be disabled by its blocking literal"
                )
                flagged.append(cid)
            block_weights[bl] = constr.weight
            block_to_constraint[bl] = cid
            max_weight += constr.weight

        compiled.append(PBConstraint(constraint_id=cid, lits=lits, coeffs=coeffs, at_least=constr.at_least))
        logger.debug(f"Compiled constraint {cid}: lits={lits} coeffs={coeffs} >= {constr.at_least}")

    stats = {
        "num_constraints": len(compiled),
        "num_soft": len(block_weights),
        "num_hard": len(compiled) - len(block_weights),
        "num_vars": registry.max_id,
        "num_blocking_vars": len(block_weights),
    }
    logger.debug(
        f"Compiled {stats['num_constraints']} constraints "
        f"({stats['num_hard']} hard, {stats['num_soft']} soft) over {stats['num_vars']} variables"
    )

    return CompilationArtifact(
        constraints=compiled,
        block_weights=block_weights,
        block_to_constraint=block_to_constraint,
        max_weight=max_weight,
        num_vars=registry.max_id,
        flagged_constraints=flagged,
        stats=stats,
    )
