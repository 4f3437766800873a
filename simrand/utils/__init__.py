"""
Utility modules for simrand.

Example:
    from simrand.utils.logging_config import get_logger
"""

from simrand.utils.logging_config import get_logger, setup_logger

__all__ = [
    "setup_logger",
    "get_logger",
]
