"""
Naming convention shared by the compiler and the decoder.
Domain variables are registered as VAR_<name>, blocking variables as BLOCK_<id>.
"""
from typing import Optional, Tuple

DOMAIN_PREFIX = "VAR_"
BLOCK_PREFIX = "BLOCK_"

def domain_name(name: str) -> str:
    return f"{DOMAIN_PREFIX}{name}"

def blocking_name(constraint_id: int) -> str:
    return f"{BLOCK_PREFIX}{constraint_id}"

def parse_name(registered: str) -> Optional[Tuple[str, object]]:
    """
    Splits a registered name into ("block", constraint_id) or ("var", domain_name).
    Returns None when the name follows neither convention.
    """
    if registered.startswith(BLOCK_PREFIX):
        suffix = registered[len(BLOCK_PREFIX):]
        if suffix.isdigit():
            return "block", int(suffix)
        return None
    if registered.startswith(DOMAIN_PREFIX):
        return "var", registered[len(DOMAIN_PREFIX):]
    return None
