"""Error handling utilities."""

from typing import Optional

from .config import NO_REASON
from .logging_config import get_logger

logger = get_logger(__name__)


def log_error(error: Exception, context: Optional[str] = None) -> None:
    """Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context about where/why the error occurred
    """
    if context:
        logger.error(f"{context}: {str(error)}")
    else:
        logger.error(str(error))


class VideoPlayerError(Exception):
    """Base class for video player errors.

    The message of every subclass is the user-facing reason shown after
    "Cannot <action>: ".
    """

    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        """Initialize error.

        Args:
            message: Optional message overriding the class default
        """
        super().__init__(message or self.default_message)


class CatalogError(VideoPlayerError):
    """Error raised when the video catalog cannot be loaded."""

    default_message = "Invalid video catalog"


class DuplicateVideoError(CatalogError):
    """Error raised when the catalog contains the same video ID twice."""

    def __init__(self, video_id: str):
        """Initialize error.

        Args:
            video_id: The repeated video ID
        """
        self.video_id = video_id
        super().__init__(f"Duplicate video ID in catalog: {video_id}")


class VideoNotFoundError(VideoPlayerError):
    """Error raised when a video ID is not in the catalog."""

    default_message = "Video does not exist"


class PlaylistNotFoundError(VideoPlayerError):
    """Error raised when a playlist is not found."""

    default_message = "Playlist does not exist"


class DuplicatePlaylistError(VideoPlayerError):
    """Error raised when a playlist name is already taken (ignoring case)."""

    default_message = "A playlist with the same name already exists"


class AlreadyFlaggedError(VideoPlayerError):
    """Error raised when flagging a video that is already flagged."""

    default_message = "Video is already flagged"


class NotFlaggedError(VideoPlayerError):
    """Error raised when allowing a video that is not flagged."""

    default_message = "Video is not flagged"


class VideoFlaggedError(VideoPlayerError):
    """Error raised when an action is blocked by moderation."""

    def __init__(self, reason: Optional[str] = None):
        """Initialize error.

        Args:
            reason: The reason the video was flagged, if one was given
        """
        self.reason = reason
        super().__init__(f"Video is currently flagged (reason: {reason or NO_REASON})")


class AlreadyInPlaylistError(VideoPlayerError):
    """Error raised when a video is added to a playlist twice."""

    default_message = "Video already added"


class NotInPlaylistError(VideoPlayerError):
    """Error raised when removing a video that is not in the playlist."""

    default_message = "Video is not in playlist"


class NothingPlayingError(VideoPlayerError):
    """Error raised when a playback action needs a current video."""

    default_message = "No video is currently playing"


class AlreadyPausedError(VideoPlayerError):
    """Error raised when pausing a video that is already paused."""

    default_message = "Video already paused"


class NotPausedError(VideoPlayerError):
    """Error raised when continuing a video that is not paused."""

    default_message = "Video is not paused"


class NoVideosAvailableError(VideoPlayerError):
    """Error raised when no unflagged videos are left to choose from."""

    default_message = "No videos available"
