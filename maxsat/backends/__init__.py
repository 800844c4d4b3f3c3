from maxsat.backends.base import SolverAdapter
from maxsat.backends.opb import format_opb
from maxsat.backends.rc2 import RC2Adapter
from maxsat.backends.registry import AdapterRegistry

__all__ = ["SolverAdapter", "format_opb", "RC2Adapter", "AdapterRegistry"]
