"""Video playback and playlist management session."""

__version__ = "0.1.0"

# Import all public components
from .cli import main
from .commands import CommandParser, PlayerCommand
from .errors import VideoPlayerError
from .library import Video, VideoLibrary, load_library
from .logging_config import configure_logging, get_logger
from .moderation import ModerationState
from .playback import PlaybackController
from .player import VideoPlayer
from .playlists import Playlist, PlaylistStore
from .search import QueryEngine, SearchResults

# Import config variables
from .config import (  # noqa: F401
    CATALOG_FILE,
    DATA_DIR,
    LOG_LEVEL,
    NO_REASON,
)

# Configure logging
configure_logging()

# Get logger for this module
logger = get_logger(__name__)
