"""Commands that drive playback."""

from typing import List

from .base import PlayerCommand


class PlayCommand(PlayerCommand):
    """Play a video by ID."""

    name = "PLAY"
    help = "Plays specified video."
    arguments = ("video_id",)

    def _run(self) -> List[str]:
        return self.player.play_video(self.args[0])


class StopCommand(PlayerCommand):
    """Stop the current video."""

    name = "STOP"
    help = "Stops the current video."

    def _run(self) -> List[str]:
        return self.player.stop_video()


class PlayRandomCommand(PlayerCommand):
    """Play a random unflagged video."""

    name = "PLAY_RANDOM"
    help = "Plays a random video from the library."

    def _run(self) -> List[str]:
        return self.player.play_random_video()


class PauseCommand(PlayerCommand):
    """Pause the current video."""

    name = "PAUSE"
    help = "Pauses the current video."

    def _run(self) -> List[str]:
        return self.player.pause_video()


class ContinueCommand(PlayerCommand):
    """Continue a paused video."""

    name = "CONTINUE"
    help = "Resumes playing the current video."

    def _run(self) -> List[str]:
        return self.player.continue_video()


class ShowPlayingCommand(PlayerCommand):
    """Show what is playing."""

    name = "SHOW_PLAYING"
    help = "Displays the title, video_id, video tags and paused status of the video that is currently playing (or paused)."

    def _run(self) -> List[str]:
        return self.player.show_playing()
