import os
import json
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from maxsat.core.errors import ConfigError
from maxsat.core.logging import get_logger

logger = get_logger(__name__)

class SolverConfig(BaseModel):
    """Selects and tunes the solver adapter a Problem is bound to."""
    adapter: str = "rc2"
    solver_name: str = "g3"  # PySAT oracle used inside RC2
    card_encoding: str = "seqcounter"  # pysat.card.EncType member
    pb_encoding: str = "best"  # pysat.pb.EncType member
    verbose: bool = False

    @staticmethod
    def from_env_or_file() -> 'SolverConfig':
        # 1. Try Env Var
        env_adapter = os.environ.get("MAXSAT_ADAPTER")
        if env_adapter:
            return SolverConfig(adapter=env_adapter)

        # 2. Try Config Path
        config_path = os.environ.get("MAXSAT_CONFIG_PATH")
        if config_path:
            if not os.path.exists(config_path):
                raise ConfigError(f"Config file not found: {config_path}")
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
                return SolverConfig.model_validate(data)
            except (json.JSONDecodeError, PydanticValidationError) as e:
                raise ConfigError(f"Invalid solver config {config_path}: {e}")

        # Default
        logger.debug("No solver configuration found, using defaults")
        return SolverConfig()
