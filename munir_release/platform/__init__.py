"""Platform abstraction layer."""

from .files import atomic_write_text
from .process import ProcessError, run_attached

__all__ = [
    # files
    "atomic_write_text",
    # process
    "ProcessError",
    "run_attached",
]
