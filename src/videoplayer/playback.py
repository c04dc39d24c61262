"""Playback controller: the single "now playing" slot and its pause flag."""

import random
from typing import Callable, Optional, Tuple

from .errors import (
    AlreadyPausedError,
    NothingPlayingError,
    NotPausedError,
    NoVideosAvailableError,
    VideoFlaggedError,
    VideoNotFoundError,
)
from .library import Video
from .logging_config import get_logger
from .moderation import ModerationState

logger = get_logger(__name__)

STOPPED = "stopped"
PLAYING = "playing"
PAUSED = "paused"

# Picks an index in range(n), uniformly
Chooser = Callable[[int], int]


class PlaybackController:
    """State machine over STOPPED, PLAYING and PAUSED."""

    def __init__(self, moderation: ModerationState, chooser: Optional[Chooser] = None) -> None:
        """Initialize controller.

        Args:
            moderation: Moderation state consulted before playing
            chooser: Uniform index selector used by play_random,
                defaults to random.randrange
        """
        self.moderation = moderation
        self.library = moderation.library
        self.chooser = chooser or random.randrange
        self._now_playing: Optional[Video] = None
        self._paused = False
        moderation.add_flag_listener(self._on_flagged)

    @property
    def state(self) -> str:
        if self._now_playing is None:
            return STOPPED
        return PAUSED if self._paused else PLAYING

    @property
    def paused(self) -> bool:
        return self._paused

    def now_playing(self) -> Optional[Video]:
        return self._now_playing

    def play(self, video_id: str) -> Tuple[Optional[Video], Video]:
        """Play a video, stopping whatever is currently playing.

        Args:
            video_id: ID of the video to play

        Returns:
            Tuple of (stopped video or None, started video)

        Raises:
            VideoNotFoundError: If the video is not in the catalog
            VideoFlaggedError: If the video is flagged
        """
        video = self.library.get_video(video_id)
        if video is None:
            raise VideoNotFoundError()
        if self.moderation.is_flagged(video_id):
            raise VideoFlaggedError(self.moderation.reason_for(video_id))

        stopped = self.stop() if self._now_playing is not None else None
        self._now_playing = video
        self._paused = False
        logger.debug("Playing video %s", video_id)
        return stopped, video

    def stop(self) -> Video:
        """Stop the current video.

        Returns:
            The video that was stopped

        Raises:
            NothingPlayingError: If nothing is playing
        """
        video = self._require_playing()
        self._now_playing = None
        self._paused = False
        logger.debug("Stopped video %s", video.video_id)
        return video

    def pause(self) -> Video:
        """Pause the current video.

        Raises:
            NothingPlayingError: If nothing is playing
            AlreadyPausedError: If the video is already paused
        """
        video = self._require_playing()
        if self._paused:
            raise AlreadyPausedError()
        self._paused = True
        logger.debug("Paused video %s", video.video_id)
        return video

    def resume(self) -> Video:
        """Continue a paused video.

        Raises:
            NothingPlayingError: If nothing is playing
            NotPausedError: If the video is playing and not paused
        """
        video = self._require_playing()
        if not self._paused:
            raise NotPausedError()
        self._paused = False
        logger.debug("Resumed video %s", video.video_id)
        return video

    def play_random(self) -> Tuple[Optional[Video], Video]:
        """Play a uniformly chosen unflagged video.

        Raises:
            NoVideosAvailableError: If every video is flagged or the catalog is empty
        """
        eligible = self.moderation.eligible()
        if not eligible:
            raise NoVideosAvailableError()
        return self.play(eligible[self.chooser(len(eligible))].video_id)

    def _require_playing(self) -> Video:
        if self._now_playing is None:
            raise NothingPlayingError()
        return self._now_playing

    def _on_flagged(self, video: Video) -> None:
        if self._now_playing is not None and self._now_playing.video_id == video.video_id:
            self.stop()
