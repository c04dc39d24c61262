"""Moderation state: which videos are flagged and why."""

from typing import Callable, Dict, List, Optional

from .errors import AlreadyFlaggedError, NotFlaggedError, VideoNotFoundError
from .library import Video, VideoLibrary
from .logging_config import get_logger

logger = get_logger(__name__)

FlagListener = Callable[[Video], None]


class ModerationState:
    """Tracks flagged videos and derives the eligible set."""

    def __init__(self, library: VideoLibrary) -> None:
        """Initialize moderation state.

        Args:
            library: Catalog the flags refer to
        """
        self.library = library
        # video_id -> reason; a reason of None means none was supplied
        self._flags: Dict[str, Optional[str]] = {}
        self._listeners: List[FlagListener] = []

    def add_flag_listener(self, listener: FlagListener) -> None:
        """Register a callback run after a video is flagged."""
        self._listeners.append(listener)

    def _require(self, video_id: str) -> Video:
        video = self.library.get_video(video_id)
        if video is None:
            raise VideoNotFoundError()
        return video

    def flag(self, video_id: str, reason: Optional[str] = None) -> Video:
        """Flag a video, removing it from the eligible set.

        Args:
            video_id: ID of the video to flag
            reason: Optional reason for the flag

        Returns:
            The flagged video

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            AlreadyFlaggedError: If the video is already flagged
        """
        video = self._require(video_id)
        if video_id in self._flags:
            raise AlreadyFlaggedError()

        self._flags[video_id] = reason or None
        logger.debug("Flagged video %s (reason: %s)", video_id, reason)
        for listener in self._listeners:
            listener(video)
        return video

    def allow(self, video_id: str) -> Video:
        """Remove the flag from a video, restoring it to the eligible set.

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            NotFlaggedError: If the video is not flagged
        """
        video = self._require(video_id)
        if video_id not in self._flags:
            raise NotFlaggedError()

        del self._flags[video_id]
        logger.debug("Allowed video %s", video_id)
        return video

    def is_flagged(self, video_id: str) -> bool:
        return video_id in self._flags

    def reason_for(self, video_id: str) -> Optional[str]:
        """Return the flag reason, or None if unflagged or flagged without one."""
        return self._flags.get(video_id)

    def eligible(self) -> List[Video]:
        """Return the unflagged videos in catalog order."""
        return [v for v in self.library.get_videos() if v.video_id not in self._flags]
