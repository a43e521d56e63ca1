"""
Core module initialization.
Exports logging helpers and the request context.
"""
from .logging import setup_logging, get_logger
from .request_context import request_id_var

__all__ = [
    "setup_logging",
    "get_logger",
    "request_id_var",
]
