"""Turns lines of user input into player commands."""

from typing import Dict, List, Type

from ..errors import VideoPlayerError, log_error
from ..logging_config import get_logger
from ..player import VideoPlayer
from .base import PlayerCommand
from .library import (
    AllowVideoCommand,
    FlagVideoCommand,
    NumberOfVideosCommand,
    ShowAllVideosCommand,
)
from .playback import (
    ContinueCommand,
    PauseCommand,
    PlayCommand,
    PlayRandomCommand,
    ShowPlayingCommand,
    StopCommand,
)
from .playlist import (
    AddToPlaylistCommand,
    ClearPlaylistCommand,
    CreatePlaylistCommand,
    DeletePlaylistCommand,
    RemoveFromPlaylistCommand,
    ShowAllPlaylistsCommand,
    ShowPlaylistCommand,
)
from .search import SearchVideosCommand, SearchVideosWithTagCommand

logger = get_logger(__name__)

INVALID_COMMAND = "Please enter a valid command, type HELP for a list of available commands."

COMMANDS: Dict[str, Type[PlayerCommand]] = {
    command.name: command
    for command in (
        NumberOfVideosCommand,
        ShowAllVideosCommand,
        PlayCommand,
        PlayRandomCommand,
        StopCommand,
        PauseCommand,
        ContinueCommand,
        ShowPlayingCommand,
        CreatePlaylistCommand,
        AddToPlaylistCommand,
        ShowAllPlaylistsCommand,
        ShowPlaylistCommand,
        RemoveFromPlaylistCommand,
        ClearPlaylistCommand,
        DeletePlaylistCommand,
        SearchVideosCommand,
        SearchVideosWithTagCommand,
        FlagVideoCommand,
        AllowVideoCommand,
    )
}


class CommandParser:
    """Dispatches input lines to the matching command."""

    def __init__(self, player: VideoPlayer):
        """Initialize parser.

        Args:
            player: The session every command runs against
        """
        self.player = player

    def help(self) -> List[str]:
        """Describe every available command."""
        lines = ["Available commands:"]
        for command in COMMANDS.values():
            lines.append(f"    {command.usage()} - {command.help}")
        lines.append("    HELP - Displays help.")
        lines.append("    EXIT - Terminates the program execution.")
        return self.player.emit(*lines)

    def execute(self, line: str) -> List[str]:
        """Run one line of input.

        Args:
            line: Command name followed by its arguments

        Returns:
            The output lines of the command
        """
        words = line.split()
        if not words:
            return self.player.emit(INVALID_COMMAND)

        name = words[0].upper()
        if name == "HELP":
            return self.help()

        command_class = COMMANDS.get(name)
        if command_class is None:
            logger.debug("Unknown command %s", name)
            return self.player.emit(INVALID_COMMAND)

        args = words[1:]
        if command_class.greedy:
            # The last argument keeps the rest of the line as typed
            args = line.rstrip().split(maxsplit=len(command_class.arguments))[1:]
        command = command_class(self.player, args)
        try:
            return command.run()
        except ValueError as e:
            logger.debug("Invalid arguments for %s: %s", name, str(e))
            return self.player.emit(INVALID_COMMAND)
        except VideoPlayerError as e:
            log_error(e, f"Command {name} failed")
            return self.player.emit(f"Cannot run {name}: {e}")
