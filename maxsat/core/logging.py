import logging
import os
import sys

LIBRARY_LOGGER = "maxsat"

def _configure_library_logger() -> logging.Logger:
    """
    The library logger is silent by default and propagates to the caller's
    logging configuration. Setting MAXSAT_LOG_LEVEL opts in to a stderr handler.
    """
    root = logging.getLogger(LIBRARY_LOGGER)
    if not root.handlers:
        root.addHandler(logging.NullHandler())

    log_level_str = os.getenv("MAXSAT_LOG_LEVEL")
    if log_level_str:
        root.setLevel(getattr(logging, log_level_str.upper(), logging.WARNING))
        if not any(getattr(h, "name", None) == "maxsat-stderr" for h in root.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.set_name("maxsat-stderr")
            handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%SZ"
            ))
            root.addHandler(handler)
            # Avoid printing twice when the application also logs to stderr
            root.propagate = False
    return root

def get_logger(name: str) -> logging.Logger:
    """Returns a logger under the maxsat hierarchy."""
    if name != LIBRARY_LOGGER and not name.startswith(LIBRARY_LOGGER + "."):
        name = f"{LIBRARY_LOGGER}.{name}"
    return logging.getLogger(name)

logger = _configure_library_logger()
