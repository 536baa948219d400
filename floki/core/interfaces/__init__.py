"""
Interface definitions for floki's injectable services.

These define the contracts that implementations must follow, so the
resolver and dispatcher can be exercised with fakes.
"""

from .filesystem import IFileSystem
from .logger import ILogger
from .presenter import IPresenter
from .runner import IToolRunner

__all__ = [
    "IFileSystem",
    "ILogger",
    "IPresenter",
    "IToolRunner",
]
