from typing import Callable, Dict, List, Optional
from maxsat.backends.base import SolverAdapter
from maxsat.backends.rc2 import RC2Adapter
from maxsat.config import SolverConfig
from maxsat.core.errors import AdapterError

AdapterFactory = Callable[[SolverConfig], SolverAdapter]

class AdapterRegistry:
    def __init__(self):
        self._factories: Dict[str, AdapterFactory] = {}
        self.register("rc2", lambda cfg: RC2Adapter(cfg))
        self.register("rc2-stratified", lambda cfg: RC2Adapter(cfg, stratified=True))

    def register(self, name: str, factory: AdapterFactory):
        self._factories[name] = factory

    def create(self, name: str, config: Optional[SolverConfig] = None) -> SolverAdapter:
        if name not in self._factories:
            raise AdapterError(f"Solver adapter '{name}' not found.")
        return self._factories[name](config if config else SolverConfig(adapter=name))

    def list_adapters(self) -> List[str]:
        return list(self._factories.keys())
