"""Video player session: every user command and the text it produces."""

from typing import Callable, List, Optional, Union

from .config import NO_REASON
from .errors import VideoPlayerError
from .library import Video, VideoLibrary
from .logging_config import get_logger
from .moderation import ModerationState
from .playback import Chooser, PlaybackController
from .playlists import PlaylistStore
from .search import INVALID_TERM_PATTERN, QueryEngine, SearchResults, parse_choice

logger = get_logger(__name__)

INDENT = "\t"
PLAY_QUESTION = (
    "Would you like to play any of the above? If yes, specify the number of the video.",
    "If your answer is not a valid number, we will assume it's a no.",
)

# Returns the user's answer to the play question; None means no answer
Prompt = Callable[[], Union[str, int, None]]
Output = Callable[[str], None]


def format_video(video: Video) -> str:
    """Render a video as ``title (id) [tags]``."""
    return f"{video.title} ({video.video_id}) [{' '.join(video.tags)}]"


def format_flag(reason: Optional[str]) -> str:
    return f" - FLAGGED (reason: {reason or NO_REASON})"


class VideoPlayer:
    """Owns all session state and turns each command into status lines.

    Every command returns the lines it wrote. User-facing failures are
    reported as a single "Cannot ..." line, never raised.
    """

    def __init__(
        self,
        library: VideoLibrary,
        chooser: Optional[Chooser] = None,
        prompt: Optional[Prompt] = None,
        output: Optional[Output] = None,
    ) -> None:
        """Initialize player.

        Args:
            library: The video catalog
            chooser: Uniform index selector for random play
            prompt: Asks the user which search result to play
            output: Receives each line of output, defaults to discarding it
        """
        self.library = library
        self.moderation = ModerationState(library)
        self.playback = PlaybackController(self.moderation, chooser)
        self.playlists = PlaylistStore(self.moderation)
        self.query = QueryEngine(self.moderation)
        self.prompt = prompt
        self.output = output

    def emit(self, *lines: str) -> List[str]:
        """Write lines to the output and return them."""
        if self.output is not None:
            for line in lines:
                self.output(line)
        return list(lines)

    # Library

    def number_of_videos(self) -> List[str]:
        return self.emit(f"{len(self.library)} videos in the library")

    def show_all_videos(self) -> List[str]:
        lines = ["Here's a list of all available videos:"]
        for video in sorted(self.library.get_videos(), key=lambda v: v.title):
            line = format_video(video)
            if self.moderation.is_flagged(video.video_id):
                line += format_flag(self.moderation.reason_for(video.video_id))
            lines.append(line)
        return self.emit(*lines)

    # Playback

    def _play_lines(self, stopped: Optional[Video], started: Video) -> List[str]:
        lines = []
        if stopped is not None:
            lines.append(f"Stopping video: {stopped.title}")
        lines.append(f"Playing video: {started.title}")
        return lines

    def play_video(self, video_id: str) -> List[str]:
        try:
            stopped, started = self.playback.play(video_id)
        except VideoPlayerError as e:
            return self.emit(f"Cannot play video: {e}")
        return self.emit(*self._play_lines(stopped, started))

    def stop_video(self) -> List[str]:
        try:
            video = self.playback.stop()
        except VideoPlayerError as e:
            return self.emit(f"Cannot stop video: {e}")
        return self.emit(f"Stopping video: {video.title}")

    def play_random_video(self) -> List[str]:
        try:
            stopped, started = self.playback.play_random()
        except VideoPlayerError as e:
            return self.emit(str(e))
        return self.emit(*self._play_lines(stopped, started))

    def pause_video(self) -> List[str]:
        current = self.playback.now_playing()
        try:
            video = self.playback.pause()
        except VideoPlayerError as e:
            if current is not None:
                return self.emit(f"{e}: {current.title}")
            return self.emit(f"Cannot pause video: {e}")
        return self.emit(f"Pausing video: {video.title}")

    def continue_video(self) -> List[str]:
        try:
            video = self.playback.resume()
        except VideoPlayerError as e:
            return self.emit(f"Cannot continue video: {e}")
        return self.emit(f"Continuing video: {video.title}")

    def show_playing(self) -> List[str]:
        video = self.playback.now_playing()
        if video is None:
            return self.emit("No video is currently playing")
        line = f"Currently playing: {format_video(video)}"
        if self.playback.paused:
            line += " - PAUSED"
        return self.emit(line)

    # Playlists

    def create_playlist(self, playlist_name: str) -> List[str]:
        try:
            self.playlists.create(playlist_name)
        except VideoPlayerError as e:
            return self.emit(f"Cannot create playlist: {e}")
        return self.emit(f"Successfully created new playlist: {playlist_name}")

    def add_to_playlist(self, playlist_name: str, video_id: str) -> List[str]:
        try:
            video = self.playlists.add_video(playlist_name, video_id)
        except VideoPlayerError as e:
            return self.emit(f"Cannot add video to {playlist_name}: {e}")
        return self.emit(f"Added video to {playlist_name}: {video.title}")

    def show_all_playlists(self) -> List[str]:
        playlists = self.playlists.list()
        if not playlists:
            return self.emit("No playlists exist yet")
        return self.emit("Showing all playlists:", *[INDENT + p.name for p in playlists])

    def show_playlist(self, playlist_name: str) -> List[str]:
        try:
            entries = self.playlists.show(playlist_name)
        except VideoPlayerError as e:
            return self.emit(f"Cannot show playlist {playlist_name}: {e}")

        lines = [f"Showing playlist: {playlist_name}"]
        if not entries:
            lines.append(INDENT + "No videos here yet")
        for entry in entries:
            line = INDENT + format_video(entry.video)
            if entry.flagged:
                line += format_flag(entry.flag_reason)
            lines.append(line)
        return self.emit(*lines)

    def remove_from_playlist(self, playlist_name: str, video_id: str) -> List[str]:
        try:
            video = self.playlists.remove_video(playlist_name, video_id)
        except VideoPlayerError as e:
            return self.emit(f"Cannot remove video from {playlist_name}: {e}")
        return self.emit(f"Removed video from {playlist_name}: {video.title}")

    def clear_playlist(self, playlist_name: str) -> List[str]:
        try:
            self.playlists.clear(playlist_name)
        except VideoPlayerError as e:
            return self.emit(f"Cannot clear playlist {playlist_name}: {e}")
        return self.emit(f"Successfully removed all videos from {playlist_name}")

    def delete_playlist(self, playlist_name: str) -> List[str]:
        try:
            self.playlists.delete(playlist_name)
        except VideoPlayerError as e:
            return self.emit(f"Cannot delete playlist {playlist_name}: {e}")
        return self.emit(f"Deleted playlist: {playlist_name}")

    # Search

    def search_videos(self, search_term: str) -> List[str]:
        # An invalid title query has no results even when nothing is eligible
        if INVALID_TERM_PATTERN.search(search_term):
            return self.emit(f"No search results for {search_term}")
        return self._present(self.query.search_by_title(search_term))

    def search_videos_with_tag(self, video_tag: str) -> List[str]:
        return self._present(self.query.search_by_tag(video_tag))

    def play_search_result(self, results: SearchResults, answer: Union[str, int, None]) -> List[str]:
        """Play the result the user picked; anything but a valid index is a no."""
        video = results.select(parse_choice(answer))
        if video is None:
            logger.debug("No search result selected for %r", results.term)
            return []
        return self.play_video(video.video_id)

    def _present(self, results: SearchResults) -> List[str]:
        if not self.moderation.eligible():
            return self.emit("No videos available")
        if not results:
            return self.emit(f"No search results for {results.term}")

        lines = self.emit(
            f"Here are the results for {results.term}:",
            *[f"{INDENT}{hit.index}) {format_video(hit.video)}" for hit in results],
            *PLAY_QUESTION,
        )
        answer = self.prompt() if self.prompt is not None else None
        return lines + self.play_search_result(results, answer)

    # Moderation

    def flag_video(self, video_id: str, flag_reason: Optional[str] = None) -> List[str]:
        playing = self.playback.now_playing()
        try:
            video = self.moderation.flag(video_id, flag_reason)
        except VideoPlayerError as e:
            return self.emit(f"Cannot flag video: {e}")

        lines = []
        if playing is not None and playing.video_id == video.video_id:
            lines.append(f"Stopping video: {video.title}")
        lines.append(f"Successfully flagged video: {video.title} (reason: {flag_reason or NO_REASON})")
        return self.emit(*lines)

    def allow_video(self, video_id: str) -> List[str]:
        try:
            video = self.moderation.allow(video_id)
        except VideoPlayerError as e:
            return self.emit(f"Cannot remove flag from video: {e}")
        return self.emit(f"Successfully removed flag from video: {video.title}")
