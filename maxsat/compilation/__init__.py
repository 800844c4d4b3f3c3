from maxsat.compilation.artifact import CompilationArtifact, PBConstraint
from maxsat.compilation.compiler import attach_blocking_literal, compile_constraints
from maxsat.compilation.objective import Objective, build_objective

__all__ = [
    "CompilationArtifact", "PBConstraint",
    "attach_blocking_literal", "compile_constraints",
    "Objective", "build_objective",
]
