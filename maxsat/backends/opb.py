from typing import List
from maxsat.compilation.artifact import CompilationArtifact
from maxsat.compilation.objective import Objective

def format_term(coeff: int, lit: int) -> str:
    sign = '+' if coeff >= 0 else ''
    atom = f"~x{-lit}" if lit < 0 else f"x{lit}"
    return f"{sign}{coeff} {atom}"

def format_opb(artifact: CompilationArtifact, objective: Objective) -> str:
    """Renders the compiled problem in OPB format."""
    lines: List[str] = []
    lines.append(f"* #variable= {artifact.num_vars} #constraint= {len(artifact.constraints)}")

    if len(objective) > 0:
        goal = " ".join(format_term(w, lit) for lit, w in zip(objective.lits, objective.weights))
        lines.append(f"min: {goal} ;")

    for pbc in artifact.constraints:
        terms = " ".join(format_term(c, lit) for lit, c in zip(pbc.lits, pbc.coefficient_list()))
        lines.append(f"{terms} >= {pbc.at_least} ;")

    return "\n".join(lines)
