"""Agent Session Manager utilities."""

from .logging import setup_logging, setup_logging_from_dict

__all__ = [
    "setup_logging",
    "setup_logging_from_dict",
]
