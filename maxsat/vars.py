from typing import Dict, List
from maxsat.core.errors import UnknownVariableError

class VarRegistry:
    """
    Assigns dense, stable, positive integer ids to variable names.
    Ids follow the insertion order of first reference, which the decoder
    relies on to read a raw assignment positionally.
    """
    def __init__(self):
        self._var_map: Dict[str, int] = {}
        self._id_to_name: List[str] = []

    @property
    def next_var_id(self) -> int:
        return len(self._id_to_name) + 1

    @property
    def max_id(self) -> int:
        return len(self._id_to_name)

    def register(self, name: str) -> int:
        """
        Register a variable. Returns the existing id if already registered.
        """
        vid = self._var_map.get(name)
        if vid is not None:
            return vid

        self._id_to_name.append(name)
        vid = len(self._id_to_name)
        self._var_map[name] = vid
        return vid

    def name_of(self, vid: int) -> str:
        if not 1 <= vid <= len(self._id_to_name):
            raise UnknownVariableError(f"Variable id {vid} was never registered")
        return self._id_to_name[vid - 1]

    def index_of(self, name: str) -> int:
        try:
            return self._var_map[name]
        except KeyError:
            raise UnknownVariableError(f"Variable {name!r} was never registered") from None

    def names(self) -> List[str]:
        """Registered names, ordered by id."""
        return list(self._id_to_name)

    def get_var_map(self) -> Dict[str, int]:
        return self._var_map.copy()

    def __contains__(self, name: object) -> bool:
        return name in self._var_map

    def __len__(self) -> int:
        return len(self._id_to_name)
