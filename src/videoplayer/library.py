"""Video catalog: the read-only collection of known videos."""

import os
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import CatalogError, DuplicateVideoError
from .logging_config import get_logger

logger = get_logger(__name__)

CatalogEntry = Union["Video", Tuple[str, str, Sequence[str]]]


class Video:
    """A single catalog video."""

    def __init__(self, video_id: str, title: str, tags: Sequence[str] = ()) -> None:
        """Initialize video.

        Args:
            video_id: Unique, case-sensitive video ID
            title: Display title
            tags: Ordered tags such as "#cat"
        """
        self.video_id = video_id
        self.title = title
        self.tags = tuple(tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Video):
            return NotImplemented
        return (self.video_id, self.title, self.tags) == (other.video_id, other.title, other.tags)

    def __hash__(self) -> int:
        return hash(self.video_id)

    def __repr__(self) -> str:
        return f"Video({self.video_id!r}, {self.title!r}, {list(self.tags)!r})"


class VideoLibrary:
    """Immutable mapping of video IDs to videos, in catalog order."""

    def __init__(self, videos: Iterable[CatalogEntry] = ()) -> None:
        """Initialize library.

        Args:
            videos: Videos or (video_id, title, tags) tuples

        Raises:
            DuplicateVideoError: If two entries share a video ID
        """
        self._videos: Dict[str, Video] = {}
        for entry in videos:
            video = entry if isinstance(entry, Video) else Video(*entry)
            if video.video_id in self._videos:
                raise DuplicateVideoError(video.video_id)
            self._videos[video.video_id] = video
        logger.debug("Loaded %d videos into the library", len(self._videos))

    def __len__(self) -> int:
        return len(self._videos)

    def __contains__(self, video_id: object) -> bool:
        return video_id in self._videos

    def get_video(self, video_id: str) -> Optional[Video]:
        """Look up a video by ID, returning None when it does not exist."""
        return self._videos.get(video_id)

    def get_videos(self) -> List[Video]:
        """Return a copy of all videos in catalog order."""
        return list(self._videos.values())


def parse_catalog_line(line: str) -> Tuple[str, str, List[str]]:
    """Parse one catalog line of the form ``title | id | #tag1,#tag2``.

    Args:
        line: A non-blank catalog line

    Returns:
        Tuple of (video_id, title, tags)

    Raises:
        ValueError: If the line does not have a title and an ID
    """
    parts = [part.strip() for part in line.split("|")]
    if len(parts) not in (2, 3) or not parts[0] or not parts[1]:
        raise ValueError(f"Expected 'title | id | tags', got: {line.strip()}")

    title, video_id = parts[0], parts[1]
    tags = []
    if len(parts) == 3 and parts[2]:
        tags = [tag.strip() for tag in parts[2].split(",") if tag.strip()]
    return video_id, title, tags


def load_library(path: str) -> VideoLibrary:
    """Load a video library from a catalog file.

    Args:
        path: Path to the catalog file

    Returns:
        The loaded VideoLibrary

    Raises:
        CatalogError: If the file is missing, unreadable or malformed
    """
    if not os.path.exists(path):
        raise CatalogError(f"Catalog file not found: {path}")

    entries = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    entries.append(parse_catalog_line(line))
                except ValueError as e:
                    raise CatalogError(f"{path}:{line_number}: {str(e)}") from e
    except OSError as e:
        raise CatalogError(f"Failed to read catalog {path}: {str(e)}") from e

    logger.info("Read %d catalog entries from %s", len(entries), path)
    return VideoLibrary(entries)
