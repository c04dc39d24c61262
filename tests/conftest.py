"""Common test fixtures and utilities."""

import pytest

from src.videoplayer.library import Video, VideoLibrary
from src.videoplayer.player import VideoPlayer

SAMPLE_VIDEOS = [
    Video("funny_dogs_video_id", "Funny Dogs", ["#dog", "#animal"]),
    Video("amazing_cats_video_id", "Amazing Cats", ["#cat", "#animal"]),
    Video("another_cat_video_id", "Another Cat Video", ["#cat", "#animal"]),
    Video("life_at_google_video_id", "Life at Google", ["#google", "#career"]),
    Video("nothing_video_id", "Video about nothing", []),
]


@pytest.fixture
def library() -> VideoLibrary:
    """Create the five-video sample library.

    Returns:
        VideoLibrary: Library in catalog order
    """
    return VideoLibrary(SAMPLE_VIDEOS)


@pytest.fixture
def cat_library() -> VideoLibrary:
    """Create the two cat videos library."""
    return VideoLibrary(
        [
            ("A", "Amazing Cat Video", ["#cat", "#video"]),
            ("B", "Another Cat Video", ["#cat"]),
        ]
    )


@pytest.fixture
def answers():
    """Queue of answers handed to the search prompt, one per search."""
    return []


@pytest.fixture
def output():
    """Collects every line the player writes."""
    return []


@pytest.fixture
def player(library, answers, output) -> VideoPlayer:
    """Create a player over the sample library.

    Random play always picks the first eligible video and search prompts
    pop from ``answers`` (no answer when it is empty).
    """
    return VideoPlayer(
        library,
        chooser=lambda n: 0,
        prompt=lambda: answers.pop(0) if answers else None,
        output=output.append,
    )
