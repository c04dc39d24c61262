"""Query engine: title and tag search over the eligible videos."""

import re
from typing import Iterator, List, Optional, Union

from .library import Video
from .logging_config import get_logger
from .moderation import ModerationState

logger = get_logger(__name__)

# Anything outside letters, digits and spaces makes a title query invalid
INVALID_TERM_PATTERN = re.compile(r"[^a-z0-9 ]", re.IGNORECASE)
TAG_PATTERN = re.compile(r"#[a-z]+", re.IGNORECASE)


class SearchHit:
    """One numbered search result."""

    def __init__(self, index: int, video: Video) -> None:
        self.index = index
        self.video = video

    def __repr__(self) -> str:
        return f"SearchHit({self.index}, {self.video!r})"


class SearchResults:
    """Ranked results of one search, numbered from 1."""

    def __init__(self, term: str, videos: List[Video]) -> None:
        """Initialize results.

        Args:
            term: The query as entered
            videos: Matching videos, already sorted
        """
        self.term = term
        self.hits = [SearchHit(i, video) for i, video in enumerate(videos, 1)]

    def __len__(self) -> int:
        return len(self.hits)

    def __bool__(self) -> bool:
        return bool(self.hits)

    def __iter__(self) -> Iterator[SearchHit]:
        return iter(self.hits)

    @property
    def videos(self) -> List[Video]:
        return [hit.video for hit in self.hits]

    def select(self, choice: Optional[int]) -> Optional[Video]:
        """Return the video at a 1-based index, or None for any invalid choice."""
        if choice is None or not 1 <= choice <= len(self.hits):
            return None
        return self.hits[choice - 1].video


def parse_choice(raw: Union[str, int, None]) -> Optional[int]:
    """Convert interactive input into a 1-based index or None.

    Anything that is not an integer counts as "no selection".
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def _sorted_by_title(videos: List[Video]) -> List[Video]:
    # sorted() is stable, so equal titles keep catalog order
    return sorted(videos, key=lambda v: v.title)


class QueryEngine:
    """Searches the videos moderation currently allows."""

    def __init__(self, moderation: ModerationState) -> None:
        self.moderation = moderation

    def search_by_title(self, term: str) -> SearchResults:
        """Case-insensitive substring search over titles.

        Args:
            term: Letters, digits and spaces only; the empty term matches everything

        Returns:
            SearchResults sorted by title, empty for an invalid term
        """
        if INVALID_TERM_PATTERN.search(term):
            logger.debug("Ignoring invalid title query %r", term)
            return SearchResults(term, [])

        needle = term.lower()
        matches = [v for v in self.moderation.eligible() if needle in v.title.lower()]
        return SearchResults(term, _sorted_by_title(matches))

    def search_by_tag(self, tag: str) -> SearchResults:
        """Case-insensitive substring search over each video's tags.

        Args:
            tag: A single '#' followed by one or more letters

        Returns:
            SearchResults sorted by title, empty for a malformed tag
        """
        if not TAG_PATTERN.fullmatch(tag):
            logger.debug("Ignoring malformed tag query %r", tag)
            return SearchResults(tag, [])

        needle = tag.lower()
        matches = [
            v
            for v in self.moderation.eligible()
            if any(needle in video_tag.lower() for video_tag in v.tags)
        ]
        return SearchResults(tag, _sorted_by_title(matches))
