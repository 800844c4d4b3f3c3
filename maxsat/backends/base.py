import abc
from typing import Optional
from maxsat.config import SolverConfig
from maxsat.compilation.artifact import CompilationArtifact
from maxsat.compilation.objective import Objective
from maxsat.solution.types import SolverOutput
from maxsat.backends.opb import format_opb

class SolverAdapter(abc.ABC):
    """
    Bridge to an external optimization engine.
    The adapter owns all search; callers only see the raw assignment and its cost.
    """
    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config if config else SolverConfig()
        self.verbose = self.config.verbose

    @property
    @abc.abstractmethod
    def name(self) -> str:
        pass

    @abc.abstractmethod
    def minimize(self, artifact: CompilationArtifact, objective: Objective) -> SolverOutput:
        """
        Returns an infeasible output, or a complete assignment over
        variables 1..artifact.num_vars with the achieved objective cost.
        """
        pass

    def format(self, artifact: CompilationArtifact, objective: Objective) -> str:
        """Return the problem in the textual form the engine would read (OPB)."""
        return format_opb(artifact, objective)
