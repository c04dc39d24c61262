from unittest.mock import patch

import pytest

from src.videoplayer.errors import (
    AlreadyFlaggedError,
    DuplicateVideoError,
    NothingPlayingError,
    PlaylistNotFoundError,
    VideoFlaggedError,
    VideoNotFoundError,
    VideoPlayerError,
    log_error,
)


class TestErrors:
    def test_default_messages(self):
        assert str(VideoNotFoundError()) == "Video does not exist"
        assert str(PlaylistNotFoundError()) == "Playlist does not exist"
        assert str(AlreadyFlaggedError()) == "Video is already flagged"
        assert str(NothingPlayingError()) == "No video is currently playing"

    def test_custom_message(self):
        error = VideoPlayerError("Test error message")
        assert str(error) == "Test error message"

    def test_video_flagged_error_with_reason(self):
        error = VideoFlaggedError("dont_like_cats")
        assert error.reason == "dont_like_cats"
        assert str(error) == "Video is currently flagged (reason: dont_like_cats)"

    def test_video_flagged_error_without_reason(self):
        error = VideoFlaggedError()
        assert error.reason is None
        assert str(error) == "Video is currently flagged (reason: Not supplied)"

    def test_duplicate_video_error(self):
        error = DuplicateVideoError("abc")
        assert error.video_id == "abc"
        assert str(error) == "Duplicate video ID in catalog: abc"

    @pytest.mark.parametrize("error_class", [VideoNotFoundError, VideoFlaggedError, DuplicateVideoError])
    def test_hierarchy(self, error_class):
        assert issubclass(error_class, VideoPlayerError)

    @patch("src.videoplayer.errors.logger")
    def test_log_error_with_context(self, mock_logger):
        log_error(VideoNotFoundError(), "Playing")
        mock_logger.error.assert_called_once_with("Playing: Video does not exist")

    @patch("src.videoplayer.errors.logger")
    def test_log_error_without_context(self, mock_logger):
        log_error(VideoNotFoundError())
        mock_logger.error.assert_called_once_with("Video does not exist")
