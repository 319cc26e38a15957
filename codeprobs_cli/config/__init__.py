"""Configuration management."""

from .global_config import DEFAULT_SERVER, GlobalConfig, resolve_server
from .local_config import MARKER_FILENAME, ProblemMarker

__all__ = [
    "DEFAULT_SERVER",
    "GlobalConfig",
    "resolve_server",
    "MARKER_FILENAME",
    "ProblemMarker",
]
