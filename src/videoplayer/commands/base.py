"""Base command class for video player operations."""

from typing import List, Optional, Sequence

from ..errors import VideoPlayerError
from ..logging_config import get_logger
from ..player import VideoPlayer

# Get logger for this module
logger = get_logger(__name__)


class PlayerCommand:
    """Base class for video player commands."""

    name = ""
    help = ""
    # Argument names shown in usage; optional ones are wrapped in []
    arguments: Sequence[str] = ()
    # Extra words after the last argument are joined into it
    greedy = False

    def __init__(self, player: VideoPlayer, args: Optional[Sequence[str]] = None):
        """Initialize command.

        Args:
            player: The video player session
            args: Command arguments, already split on whitespace
        """
        self.player = player
        self.args = list(args or [])
        self._logger = logger
        self._validated = False

    @classmethod
    def usage(cls) -> str:
        return " ".join([cls.name, *[f"<{a}>" if not a.startswith("[") else a for a in cls.arguments]])

    @classmethod
    def min_args(cls) -> int:
        return len([a for a in cls.arguments if not a.startswith("[")])

    @classmethod
    def max_args(cls) -> Optional[int]:
        return None if cls.greedy else len(cls.arguments)

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If parameters are invalid
        """
        if not self.player:
            raise ValueError("Video player is required")
        max_args = self.max_args()
        if len(self.args) < self.min_args() or (max_args is not None and len(self.args) > max_args):
            raise ValueError(f"Usage: {self.usage()}")
        self._validated = True

    def run(self) -> List[str]:
        """Run the command.

        Returns:
            The output lines of the command

        Raises:
            ValueError: If the arguments are invalid
            VideoPlayerError: If command fails unexpectedly
        """
        self.validate()
        try:
            return self._run()
        except VideoPlayerError:
            raise
        except Exception as e:
            raise VideoPlayerError(str(e)) from e

    def _run(self) -> List[str]:
        """Internal run implementation.

        Returns:
            The output lines of the command
        """
        return []

    def rest(self, start: int) -> Optional[str]:
        """Join the arguments from ``start`` on, or None if there are none."""
        words = self.args[start:]
        return " ".join(words) if words else None
