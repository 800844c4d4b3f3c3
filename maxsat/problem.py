import sys
from typing import Any, Dict, Iterable, Optional, TextIO, Union

from maxsat.backends.base import SolverAdapter
from maxsat.backends.registry import AdapterRegistry
from maxsat.config import SolverConfig
from maxsat.core.logging import get_logger
from maxsat.core.types import Constraint, parse_constraints
from maxsat.vars import VarRegistry
from maxsat.compilation.artifact import CompilationArtifact
from maxsat.compilation.compiler import compile_constraints
from maxsat.compilation.objective import Objective, build_objective
from maxsat.solution.decoder import decode
from maxsat.solution.types import SolveResult

logger = get_logger(__name__)

class Problem:
    """
    A weighted partial MaxSAT problem compiled to pseudo-Boolean form.

    Built once from its constraints; each Problem owns its registry, compiled
    constraints and objective. Only the verbosity toggle can change afterwards.
    Solve calls are blocking and must not run concurrently on the same Problem.
    """
    def __init__(self,
                 constraints: Iterable[Union[Constraint, Dict[str, Any]]],
                 config: Optional[SolverConfig] = None,
                 adapter: Optional[SolverAdapter] = None):
        self._constraints = parse_constraints(constraints)
        self._registry = VarRegistry()
        self._artifact = compile_constraints(self._constraints, self._registry)
        self._objective = build_objective(self._artifact.block_weights, self._artifact.max_weight)

        if adapter is None:
            config = config if config else SolverConfig.from_env_or_file()
            adapter = AdapterRegistry().create(config.adapter, config)
        self._adapter = adapter

    @property
    def registry(self) -> VarRegistry:
        return self._registry

    @property
    def compiled(self) -> CompilationArtifact:
        return self._artifact

    @property
    def objective(self) -> Objective:
        return self._objective

    @property
    def max_weight(self) -> int:
        """Sum of the weights of all soft constraints."""
        return self._artifact.max_weight

    @property
    def num_constraints(self) -> int:
        return len(self._constraints)

    @property
    def adapter(self) -> SolverAdapter:
        """
        The solver adapter bound to this problem.
        Usually not needed: call solve() instead.
        """
        return self._adapter

    @property
    def verbose(self) -> bool:
        return self._adapter.verbose

    def set_verbose(self, verbose: bool):
        self._adapter.verbose = verbose

    def to_opb(self) -> str:
        return self._adapter.format(self._artifact, self._objective)

    def output(self, stream: Optional[TextIO] = None):
        """Writes the problem in OPB format to stream (stdout by default)."""
        stream = stream if stream is not None else sys.stdout
        print(self.to_opb(), file=stream)

    def solve(self) -> SolveResult:
        """
        Returns (model, cost, broken): an optimal model, its cost and the ids of
        the soft constraints it violates. When the hard constraints cannot all
        hold, returns (None, -1, []).
        """
        output = self._adapter.minimize(self._artifact, self._objective)
        result = decode(output, self._registry)
        if result.is_feasible:
            logger.debug(f"Solved: cost={result.cost}, broken={result.broken}")
        else:
            logger.debug("Hard constraints are unsatisfiable")
        return result
