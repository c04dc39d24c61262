"""Tests for the query engine."""

import pytest

from src.videoplayer.library import VideoLibrary
from src.videoplayer.moderation import ModerationState
from src.videoplayer.search import QueryEngine, SearchResults, parse_choice


@pytest.fixture
def moderation(library):
    return ModerationState(library)


@pytest.fixture
def engine(moderation):
    return QueryEngine(moderation)


def titles(results):
    return [video.title for video in results.videos]


def test_search_by_title_case_insensitive(engine):
    results = engine.search_by_title("CAT")
    assert titles(results) == ["Amazing Cats", "Another Cat Video"]
    assert [hit.index for hit in results] == [1, 2]


def test_search_by_title_empty_term_matches_all(engine):
    """Test the empty term matches every eligible video, sorted by title."""
    assert titles(engine.search_by_title("")) == [
        "Amazing Cats",
        "Another Cat Video",
        "Funny Dogs",
        "Life at Google",
        "Video about nothing",
    ]


def test_search_by_title_spaces_allowed(engine):
    assert titles(engine.search_by_title("cat video")) == ["Another Cat Video"]


@pytest.mark.parametrize("term", ["cat!", "#cat", "dogs?", "a-b"])
def test_search_by_title_invalid_term(engine, term):
    """Test terms with symbols give no results rather than an error."""
    results = engine.search_by_title(term)
    assert not results
    assert len(results) == 0
    assert results.term == term


def test_search_by_title_skips_flagged(engine, moderation):
    moderation.flag("amazing_cats_video_id")
    assert titles(engine.search_by_title("cat")) == ["Another Cat Video"]


def test_search_equal_titles_keep_catalog_order():
    """Test equal titles are listed in catalog order."""
    library = VideoLibrary([("z", "Same", []), ("a", "Same", []), ("m", "Alpha", [])])
    engine = QueryEngine(ModerationState(library))
    assert [v.video_id for v in engine.search_by_title("").videos] == ["m", "z", "a"]


def test_search_by_tag(engine):
    assert titles(engine.search_by_tag("#CAT")) == ["Amazing Cats", "Another Cat Video"]
    assert titles(engine.search_by_tag("#animal")) == [
        "Amazing Cats",
        "Another Cat Video",
        "Funny Dogs",
    ]


def test_search_by_tag_substring(engine):
    """Test a tag matches when it is contained in a video tag."""
    assert titles(engine.search_by_tag("#car")) == ["Life at Google"]


def test_search_by_tag_no_match(engine):
    results = engine.search_by_tag("#x")
    assert not results
    assert results.videos == []


@pytest.mark.parametrize("tag", ["cat", "#", "##cat", "#cat1", "#cat dog", "#ca t"])
def test_search_by_tag_malformed(engine, tag):
    assert not engine.search_by_tag(tag)


def test_cat_scenario_tag_search(cat_library):
    """Test flagged videos drop out of tag search."""
    moderation = ModerationState(cat_library)
    engine = QueryEngine(moderation)
    moderation.flag("B", "spam")
    assert [v.video_id for v in engine.search_by_tag("#cat").videos] == ["A"]


def test_select(library):
    results = SearchResults("x", library.get_videos()[:2])
    assert results.select(1).video_id == "funny_dogs_video_id"
    assert results.select(2).video_id == "amazing_cats_video_id"
    assert results.select(0) is None
    assert results.select(3) is None
    assert results.select(-1) is None
    assert results.select(None) is None


@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), (" 2 ", 2), (3, 3), ("-1", -1), ("no", None), ("", None), ("1.5", None), (None, None)],
)
def test_parse_choice(raw, expected):
    assert parse_choice(raw) == expected
