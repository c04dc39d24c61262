"""Command module initialization."""

from .base import PlayerCommand
from .parser import COMMANDS, CommandParser  # noqa: F401

__all__ = ["PlayerCommand", "CommandParser", "COMMANDS"]
