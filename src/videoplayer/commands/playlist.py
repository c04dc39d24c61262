"""Commands for managing playlists."""

from typing import List

from .base import PlayerCommand


class CreatePlaylistCommand(PlayerCommand):
    """Create an empty playlist."""

    name = "CREATE_PLAYLIST"
    help = "Creates a new (empty) playlist with the provided name."
    arguments = ("playlist_name",)

    def _run(self) -> List[str]:
        return self.player.create_playlist(self.args[0])


class AddToPlaylistCommand(PlayerCommand):
    """Append a video to a playlist."""

    name = "ADD_TO_PLAYLIST"
    help = "Adds the requested video to the playlist."
    arguments = ("playlist_name", "video_id")

    def _run(self) -> List[str]:
        return self.player.add_to_playlist(self.args[0], self.args[1])


class RemoveFromPlaylistCommand(PlayerCommand):
    """Remove a video from a playlist."""

    name = "REMOVE_FROM_PLAYLIST"
    help = "Removes the specified video from the specified playlist."
    arguments = ("playlist_name", "video_id")

    def _run(self) -> List[str]:
        return self.player.remove_from_playlist(self.args[0], self.args[1])


class ClearPlaylistCommand(PlayerCommand):
    """Empty a playlist."""

    name = "CLEAR_PLAYLIST"
    help = "Removes all video from a playlist, but doesn't delete the playlist itself."
    arguments = ("playlist_name",)

    def _run(self) -> List[str]:
        return self.player.clear_playlist(self.args[0])


class DeletePlaylistCommand(PlayerCommand):
    """Delete a playlist."""

    name = "DELETE_PLAYLIST"
    help = "Deletes the playlist."
    arguments = ("playlist_name",)

    def _run(self) -> List[str]:
        return self.player.delete_playlist(self.args[0])


class ShowAllPlaylistsCommand(PlayerCommand):
    """List playlist names."""

    name = "SHOW_ALL_PLAYLISTS"
    help = "Display all the available playlists."

    def _run(self) -> List[str]:
        return self.player.show_all_playlists()


class ShowPlaylistCommand(PlayerCommand):
    """Show the videos of one playlist."""

    name = "SHOW_PLAYLIST"
    help = "Displays all the videos in the playlist."
    arguments = ("playlist_name",)

    def _run(self) -> List[str]:
        return self.player.show_playlist(self.args[0])
