"""Pylint plugin enforcing the shape of video player command classes."""

from typing import TYPE_CHECKING
from astroid import nodes
from pylint.checkers import BaseChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

BASE_COMMAND = "PlayerCommand"


def in_commands_package(module_name: str) -> bool:
    """Whether a module lives in the videoplayer.commands package."""
    parts = module_name.split(".")
    return "videoplayer" in parts and "commands" in parts


def _base_names(node: nodes.ClassDef) -> list:
    return [base.as_string().split(".")[-1] for base in node.bases]


class CommandChecker(BaseChecker):
    """Every *Command class under videoplayer.commands must be dispatchable."""

    name = "command-checker"
    priority = -1
    msgs = {
        "W5001": (
            "Command class %s should inherit from PlayerCommand",
            "invalid-command-inheritance",
            "CommandParser only runs subclasses of PlayerCommand.",
        ),
        "W5002": (
            "Command class %s is abstract; extend PlayerCommand instead",
            "new-command-base-class",
            "PlayerCommand is the only base class in the commands package.",
        ),
        "W5003": (
            "Command class %s does not set the command name",
            "command-missing-name",
            "Commands are registered and dispatched by their name attribute.",
        ),
    }

    def visit_classdef(self, node: nodes.ClassDef) -> None:
        if not in_commands_package(node.root().name) or not node.name.endswith("Command"):
            return
        if node.name == BASE_COMMAND:
            return

        bases = _base_names(node)
        if "ABC" in bases or any(method.is_abstract(pass_is_abstract=False) for method in node.mymethods()):
            self.add_message("new-command-base-class", node=node, args=node.name)

        if BASE_COMMAND not in bases:
            self.add_message("invalid-command-inheritance", node=node, args=node.name)
        elif "name" not in node.locals:
            self.add_message("command-missing-name", node=node, args=node.name)


def register(linter: "PyLinter") -> None:
    """Register the checker with pylint."""
    linter.register_checker(CommandChecker(linter))
