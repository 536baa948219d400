"""
Output presenters for floki CLI.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
