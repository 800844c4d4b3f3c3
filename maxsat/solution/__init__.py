from maxsat.solution.types import INFEASIBLE_COST, Model, SolveResult, SolverOutput, SolverStatus
from maxsat.solution.decoder import decode

__all__ = ["INFEASIBLE_COST", "Model", "SolveResult", "SolverOutput", "SolverStatus", "decode"]
