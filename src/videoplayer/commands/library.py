"""Commands for the video catalog and moderation."""

from typing import List

from .base import PlayerCommand


class NumberOfVideosCommand(PlayerCommand):
    """Count the videos in the library."""

    name = "NUMBER_OF_VIDEOS"
    help = "Shows how many videos are in the library."

    def _run(self) -> List[str]:
        return self.player.number_of_videos()


class ShowAllVideosCommand(PlayerCommand):
    """List every video, flagged ones included."""

    name = "SHOW_ALL_VIDEOS"
    help = "Lists all videos from the library."

    def _run(self) -> List[str]:
        return self.player.show_all_videos()


class FlagVideoCommand(PlayerCommand):
    """Flag a video so it can no longer be played or found."""

    name = "FLAG_VIDEO"
    help = "Mark a video as flagged."
    arguments = ("video_id", "[flag_reason]")
    greedy = True

    def _run(self) -> List[str]:
        return self.player.flag_video(self.args[0], self.rest(1))


class AllowVideoCommand(PlayerCommand):
    """Remove a flag from a video."""

    name = "ALLOW_VIDEO"
    help = "Removes a flag from a video."
    arguments = ("video_id",)

    def _run(self) -> List[str]:
        return self.player.allow_video(self.args[0])
