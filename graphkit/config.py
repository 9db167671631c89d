"""
Configuration constants for graphkit.

All tunable behavior is defined here. Values can be overridden through
environment variables or a .env file at the project root.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphkit/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Graph Store Configuration
# =============================================================================

# Check vertex ids on add_edge / delete_edge / neighbors.
# Traversal loops never check; they trust the store.
VALIDATE_VERTICES = _env_flag("GRAPHKIT_VALIDATE_VERTICES", True)

# Default for Graph(multi_edges=None). When off, repeated add_edge(u, v)
# returns the existing edge instead of inserting a parallel one.
ALLOW_MULTI_EDGES = _env_flag("GRAPHKIT_ALLOW_MULTI_EDGES", True)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")


def configure_logging(level: str | None = None) -> None:
    """Attach a basic handler to the graphkit logger hierarchy."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def get_settings() -> dict[str, object]:
    """Return the effective configuration values."""
    return {
        "validate_vertices": VALIDATE_VERTICES,
        "allow_multi_edges": ALLOW_MULTI_EDGES,
        "log_level": LOG_LEVEL,
    }
