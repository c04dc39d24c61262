"""Playlist store: named, ordered, duplicate-free collections of videos."""

from typing import Dict, List, Optional

from .errors import (
    AlreadyInPlaylistError,
    DuplicatePlaylistError,
    NotInPlaylistError,
    PlaylistNotFoundError,
    VideoFlaggedError,
    VideoNotFoundError,
)
from .library import Video
from .logging_config import get_logger
from .moderation import ModerationState

logger = get_logger(__name__)


class Playlist:
    """A named playlist; names compare case-insensitively."""

    def __init__(self, name: str) -> None:
        """Initialize playlist.

        Args:
            name: Display name, kept in its original case
        """
        self.name = name
        self.video_ids: List[str] = []

    @property
    def key(self) -> str:
        return playlist_key(self.name)

    def __len__(self) -> int:
        return len(self.video_ids)

    def __contains__(self, video_id: object) -> bool:
        return video_id in self.video_ids


class PlaylistEntry:
    """A playlist video annotated with its current moderation state."""

    def __init__(self, video: Video, flagged: bool, flag_reason: Optional[str]) -> None:
        self.video = video
        self.flagged = flagged
        self.flag_reason = flag_reason


def playlist_key(name: str) -> str:
    """Canonical lookup key for a playlist name."""
    return name.lower()


class PlaylistStore:
    """Owns every playlist of the session."""

    def __init__(self, moderation: ModerationState) -> None:
        """Initialize store.

        Args:
            moderation: Moderation state consulted when adding videos
        """
        self.moderation = moderation
        self.library = moderation.library
        self._playlists: Dict[str, Playlist] = {}

    def get(self, name: str) -> Playlist:
        """Look up a playlist by name, ignoring case.

        Raises:
            PlaylistNotFoundError: If no playlist has this name
        """
        playlist = self._playlists.get(playlist_key(name))
        if playlist is None:
            raise PlaylistNotFoundError()
        return playlist

    def _require_video(self, video_id: str) -> Video:
        video = self.library.get_video(video_id)
        if video is None:
            raise VideoNotFoundError()
        return video

    def create(self, name: str) -> Playlist:
        """Create an empty playlist.

        Raises:
            DuplicatePlaylistError: If a playlist with this name exists in any case
        """
        key = playlist_key(name)
        if key in self._playlists:
            raise DuplicatePlaylistError()
        playlist = Playlist(name)
        self._playlists[key] = playlist
        logger.debug("Created playlist %s", name)
        return playlist

    def add_video(self, name: str, video_id: str) -> Video:
        """Append a video to a playlist.

        Args:
            name: Playlist name
            video_id: ID of the video to add

        Returns:
            The added video

        Raises:
            PlaylistNotFoundError: If the playlist does not exist
            VideoNotFoundError: If the video is not in the catalog
            VideoFlaggedError: If the video is flagged
            AlreadyInPlaylistError: If the video is already in the playlist
        """
        playlist = self.get(name)
        video = self._require_video(video_id)
        if self.moderation.is_flagged(video_id):
            raise VideoFlaggedError(self.moderation.reason_for(video_id))
        if video_id in playlist:
            raise AlreadyInPlaylistError()

        playlist.video_ids.append(video_id)
        logger.debug("Added %s to playlist %s", video_id, playlist.name)
        return video

    def remove_video(self, name: str, video_id: str) -> Video:
        """Remove a video from a playlist, keeping the order of the rest.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist
            VideoNotFoundError: If the video is not in the catalog
            NotInPlaylistError: If the video is not in the playlist
        """
        playlist = self.get(name)
        video = self._require_video(video_id)
        if video_id not in playlist:
            raise NotInPlaylistError()

        playlist.video_ids.remove(video_id)
        logger.debug("Removed %s from playlist %s", video_id, playlist.name)
        return video

    def clear(self, name: str) -> Playlist:
        """Remove every video from a playlist; the playlist itself is kept."""
        playlist = self.get(name)
        playlist.video_ids.clear()
        return playlist

    def delete(self, name: str) -> Playlist:
        """Delete a playlist entirely."""
        playlist = self.get(name)
        del self._playlists[playlist.key]
        logger.debug("Deleted playlist %s", playlist.name)
        return playlist

    def list(self) -> List[Playlist]:
        """Return all playlists sorted by name, ignoring case."""
        return sorted(self._playlists.values(), key=lambda p: p.key)

    def show(self, name: str) -> List[PlaylistEntry]:
        """Return a playlist's videos in order, flagged ones included."""
        playlist = self.get(name)
        entries = []
        for video_id in playlist.video_ids:
            entries.append(
                PlaylistEntry(
                    self.library.get_video(video_id),
                    self.moderation.is_flagged(video_id),
                    self.moderation.reason_for(video_id),
                )
            )
        return entries
