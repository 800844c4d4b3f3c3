import time
from typing import Optional
from pysat.formula import WCNF
from pysat.card import CardEnc, EncType as CardEncType
from pysat.pb import PBEnc, EncType as PBEncType
from pysat.examples.rc2 import RC2, RC2Stratified

from maxsat.backends.base import SolverAdapter
from maxsat.config import SolverConfig
from maxsat.core.errors import AdapterError
from maxsat.core.logging import get_logger
from maxsat.compilation.artifact import CompilationArtifact
from maxsat.compilation.objective import Objective
from maxsat.solution.types import SolverOutput, SolverStatus

logger = get_logger(__name__)

def _encoding(enum_cls, name: str) -> int:
    value = getattr(enum_cls, name, None)
    if not isinstance(value, int) or isinstance(value, bool) or name.startswith('_'):
        raise AdapterError(f"Unknown encoding '{name}' for {enum_cls.__module__}")
    return value

class RC2Adapter(SolverAdapter):
    """
    Solves the compiled problem with PySAT's RC2 MaxSAT engine.

    Hard PB inequalities become hard CNF (clauses directly, cardinality via
    CardEnc, weighted via PBEnc). Every objective literal b with weight w
    becomes the soft unit clause [-b] with weight w, so RC2's cost equals
    the sum of weights of blocking literals assigned true.
    """
    def __init__(self, config: Optional[SolverConfig] = None, stratified: bool = False):
        super().__init__(config)
        self.stratified = stratified
        self.card_encoding = _encoding(CardEncType, self.config.card_encoding)
        self.pb_encoding = _encoding(PBEncType, self.config.pb_encoding)

    @property
    def name(self) -> str:
        return "rc2-stratified" if self.stratified else "rc2"

    def to_wcnf(self, artifact: CompilationArtifact, objective: Objective) -> Optional[WCNF]:
        """
        Builds the WCNF handed to RC2.
        Returns None when some inequality can never hold.
        """
        wcnf = WCNF()
        top_id = artifact.num_vars

        for pbc in artifact.constraints:
            coeffs = pbc.coefficient_list()
            upper = sum(c for c in coeffs if c > 0)
            lower = sum(c for c in coeffs if c < 0)

            if lower >= pbc.at_least:
                # Holds under every assignment
                continue
            if upper < pbc.at_least:
                logger.debug(f"Constraint {pbc.constraint_id} can never reach {pbc.at_least}")
                return None

            if pbc.is_clause:
                wcnf.append(list(pbc.lits))
                continue

            if pbc.coeffs is None:
                enc = CardEnc.atleast(lits=pbc.lits, bound=pbc.at_least, top_id=top_id,
                                      encoding=self.card_encoding)
            else:
                enc = PBEnc.atleast(lits=pbc.lits, weights=pbc.coeffs, bound=pbc.at_least,
                                    top_id=top_id, encoding=self.pb_encoding)

            for cl in enc.clauses:
                wcnf.append(cl)
            top_id = max(top_id, enc.nv)

        for lit, w in zip(objective.lits, objective.weights):
            wcnf.append([-lit], weight=w)

        return wcnf

    def minimize(self, artifact: CompilationArtifact, objective: Objective) -> SolverOutput:
        start_time = time.time()

        wcnf = self.to_wcnf(artifact, objective)
        if wcnf is None:
            return SolverOutput.infeasible(time_taken=time.time() - start_time)

        # Stratification needs at least one soft clause
        engine = RC2Stratified if self.stratified and len(objective) > 0 else RC2
        with engine(wcnf, solver=self.config.solver_name, verbose=1 if self.verbose else 0) as rc2:
            model = rc2.compute()
            cost = rc2.cost

        elapsed = time.time() - start_time
        if model is None:
            logger.debug(f"{self.name}: hard constraints are unsatisfiable ({elapsed:.3f}s)")
            return SolverOutput.infeasible(time_taken=elapsed)

        true_vars = {l for l in model if l > 0}
        assignment = [vid in true_vars for vid in range(1, artifact.num_vars + 1)]
        logger.debug(f"{self.name}: optimum cost {cost} ({elapsed:.3f}s)")
        return SolverOutput(status=SolverStatus.OPTIMUM, assignment=assignment, cost=cost, time_taken=elapsed)
