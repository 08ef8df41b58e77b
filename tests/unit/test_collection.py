"""
Tests for saved-artifact helpers.
"""

import pytest

from artifactscorer import (
    ArtifactType,
    filter_artifacts,
    make_artifact,
    new_artifact_id,
    parse_substats,
    set_ids,
)


@pytest.fixture
def artifacts():
    """Four artifacts across two sets and three slots."""
    return [
        make_artifact(ArtifactType.FLOWER, "emblem", [], artifact_id="1"),
        make_artifact(ArtifactType.PLUME, "emblem", [], artifact_id="2"),
        make_artifact(ArtifactType.FLOWER, "gladiator", [], artifact_id="3"),
        make_artifact(ArtifactType.SANDS, "gladiator", [], artifact_id="4"),
    ]


class TestNewArtifactId:
    """Tests for id generation."""

    def test_hex_of_milliseconds(self):
        """The id is the millisecond timestamp in hex."""
        assert new_artifact_id(now_ms=255) == "ff"
        assert new_artifact_id(now_ms=1666000000000) == format(1666000000000, "x")

    def test_current_time(self):
        """Without a timestamp the id is a hex string."""
        int(new_artifact_id(), 16)


class TestMakeArtifact:
    """Tests for make_artifact()."""

    def test_from_parsed_substats(self):
        """Parsed substats become the artifact's tuple."""
        parsed = parse_substats("会心率+③.⑨%\nHP+②⑨⑨")
        art = make_artifact(ArtifactType.GOBLET, "emblem", parsed.substats, level=4)
        assert len(art.substats) == 2
        assert art.level == 4
        assert art.id


class TestFilterArtifacts:
    """Tests for filter_artifacts()."""

    def test_no_filter(self, artifacts):
        """No filter returns everything."""
        assert filter_artifacts(artifacts) == artifacts

    def test_by_type(self, artifacts):
        """Filtering by slot only."""
        assert [a.id for a in filter_artifacts(artifacts, ArtifactType.FLOWER)] == ["1", "3"]

    def test_by_set(self, artifacts):
        """Filtering by set only."""
        assert [a.id for a in filter_artifacts(artifacts, set_id="gladiator")] == ["3", "4"]

    def test_by_both(self, artifacts):
        """Both filters must match."""
        result = filter_artifacts(artifacts, ArtifactType.FLOWER, "gladiator")
        assert [a.id for a in result] == ["3"]

    def test_no_match(self, artifacts):
        """A combination with no artifacts returns an empty list."""
        assert filter_artifacts(artifacts, ArtifactType.CIRCLET) == []


class TestSetIds:
    """Tests for set_ids()."""

    def test_distinct_in_order(self, artifacts):
        """Distinct set ids in first-seen order."""
        assert set_ids(artifacts) == ["emblem", "gladiator"]
