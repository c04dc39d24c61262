"""Search commands."""

from typing import List

from .base import PlayerCommand


class SearchVideosCommand(PlayerCommand):
    """Search titles; multi-word terms are allowed."""

    name = "SEARCH_VIDEOS"
    help = "Display all the videos whose titles contain the search_term."
    arguments = ("[search_term]",)
    greedy = True

    def _run(self) -> List[str]:
        return self.player.search_videos(self.rest(0) or "")


class SearchVideosWithTagCommand(PlayerCommand):
    """Search tags."""

    name = "SEARCH_VIDEOS_WITH_TAG"
    help = "Display all videos whose tags contains the provided tag."
    arguments = ("tag_name",)

    def _run(self) -> List[str]:
        return self.player.search_videos_with_tag(self.args[0])
