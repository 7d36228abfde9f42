"""Tests for ydf.services.normalizer."""

import pytest

from fakes import playlist_item, video_item
from ydf.core.errors import MalformedResponseError
from ydf.core.models import PlaylistRecord, RecordKind, VideoRecord
from ydf.services.normalizer import (
    normalize_item,
    normalize_items,
    require,
    require_object,
    truncate_date,
)


class TestRequire:
    def test_nested_path(self):
        assert require({"a": {"b": {"c": 1}}}, "a.b.c") == 1

    def test_list_index(self):
        assert require({"items": [{"id": "x"}]}, "items.0.id") == "x"

    def test_missing_key(self):
        with pytest.raises(MalformedResponseError, match="a.b.c"):
            require({"a": {"b": {}}}, "a.b.c")

    def test_non_container(self):
        with pytest.raises(MalformedResponseError):
            require({"a": "text"}, "a.b")

    def test_index_out_of_range(self):
        with pytest.raises(MalformedResponseError):
            require({"items": []}, "items.0.id")

    def test_falsy_values_are_kept(self):
        assert require({"position": 0}, "position") == 0
        assert require({"description": ""}, "description") == ""


class TestRequireObject:
    def test_returns_object(self):
        assert require_object({"snippet": {"title": "A"}}, "snippet") == {"title": "A"}

    def test_null_is_rejected(self):
        with pytest.raises(MalformedResponseError, match="NoneType at 'statistics'"):
            require_object({"statistics": None}, "statistics")

    def test_string_is_rejected(self):
        with pytest.raises(MalformedResponseError, match="expected an object"):
            require_object({"snippet": "text"}, "snippet")


class TestTruncateDate:
    def test_drops_time_of_day(self):
        assert truncate_date("2020-01-01T23:59:59.123Z") == "2020-01-01"

    def test_not_a_string(self):
        with pytest.raises(MalformedResponseError):
            truncate_date(20200101)


class TestNormalizePlaylist:
    def test_field_mapping(self):
        record = normalize_item(playlist_item(), RecordKind.PLAYLIST)
        assert isinstance(record, PlaylistRecord)
        attrs = record.attributes
        assert attrs.id == "P1"
        assert attrs.title == "A"
        assert attrs.description == "d"
        assert attrs.creation_date == "2020-01-01"
        assert attrs.video_count == 3
        assert attrs.privacy_status == "public"
        assert attrs.thumbnails == {
            "default": "https://i.ytimg.com/P1/default.jpg",
            "high": "https://i.ytimg.com/P1/hq.jpg",
        }

    def test_kind_as_string(self):
        record = normalize_item(playlist_item(), "playlist")
        assert record.kind == "playlist"

    @pytest.mark.parametrize(
        "published_at",
        ["2020-01-01T00:00:00Z", "2019-12-31T23:59:59Z", "2024-02-29T12:00:00.5+02:00"],
    )
    def test_creation_date_is_first_ten_chars(self, published_at):
        record = normalize_item(playlist_item(published_at=published_at), RecordKind.PLAYLIST)
        assert record.attributes.creation_date == published_at[:10]

    def test_missing_localized_description(self):
        item = playlist_item()
        del item["snippet"]["localized"]
        with pytest.raises(MalformedResponseError, match="snippet.localized.description"):
            normalize_item(item, RecordKind.PLAYLIST)

    def test_missing_status(self):
        item = playlist_item()
        del item["status"]
        with pytest.raises(MalformedResponseError, match="status.privacyStatus"):
            normalize_item(item, RecordKind.PLAYLIST)

    def test_negative_item_count(self):
        with pytest.raises(MalformedResponseError):
            normalize_item(playlist_item(item_count=-2), RecordKind.PLAYLIST)

    def test_thumbnail_without_url(self):
        item = playlist_item()
        item["snippet"]["thumbnails"]["default"] = {"width": 120}
        with pytest.raises(MalformedResponseError):
            normalize_item(item, RecordKind.PLAYLIST)


class TestNormalizeVideo:
    def test_field_mapping(self):
        record = normalize_item(video_item("V9", playlist_id="PL7", position=4), RecordKind.VIDEO)
        assert isinstance(record, VideoRecord)
        attrs = record.attributes
        assert attrs.id == "V9"
        assert attrs.title == "Video V9"
        assert attrs.description == "About V9"
        assert attrs.playlist_id == "PL7"
        assert attrs.position_in_playlist == 4
        assert attrs.creation_date == "2021-06-15"
        assert attrs.thumbnails == {"default": "https://i.ytimg.com/vi/V9/default.jpg"}
        assert attrs.privacy_status == "public"

    def test_missing_resource_id(self):
        item = video_item()
        del item["snippet"]["resourceId"]
        with pytest.raises(MalformedResponseError, match="snippet.resourceId.videoId"):
            normalize_item(item, RecordKind.VIDEO)

    def test_playlist_item_is_not_a_video(self):
        with pytest.raises(MalformedResponseError):
            normalize_item(playlist_item(), RecordKind.VIDEO)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            normalize_item(video_item(), "channel")


class TestNormalizeItems:
    def _mixed(self):
        return [
            video_item("V1", position=0, privacy_status="public"),
            video_item("V2", position=1, privacy_status="private"),
            video_item("V3", position=2, privacy_status="unlisted"),
            video_item("V4", position=3, privacy_status="private"),
        ]

    def test_no_filter_keeps_everything_in_order(self):
        records = normalize_items(self._mixed(), RecordKind.VIDEO)
        assert [r.attributes.id for r in records] == ["V1", "V2", "V3", "V4"]

    def test_empty_filter_keeps_everything(self):
        records = normalize_items(self._mixed(), RecordKind.VIDEO, "")
        assert len(records) == 4

    def test_filter_exact_match(self):
        records = normalize_items(self._mixed(), RecordKind.VIDEO, "private")
        assert [r.attributes.id for r in records] == ["V2", "V4"]
        assert all(r.attributes.privacy_status == "private" for r in records)

    def test_filter_is_case_sensitive(self):
        assert normalize_items(self._mixed(), RecordKind.VIDEO, "Private") == ()

    def test_filter_no_partial_match(self):
        assert normalize_items(self._mixed(), RecordKind.VIDEO, "priv") == ()

    def test_duplicates_are_kept(self):
        items = [video_item("V1"), video_item("V1")]
        assert len(normalize_items(items, RecordKind.VIDEO)) == 2

    def test_returns_tuple(self):
        assert isinstance(normalize_items([], RecordKind.PLAYLIST), tuple)

    def test_one_bad_item_fails_the_batch(self):
        bad = playlist_item("P2")
        del bad["contentDetails"]
        with pytest.raises(MalformedResponseError):
            normalize_items([playlist_item("P1"), bad], RecordKind.PLAYLIST)

    def test_bad_item_fails_even_when_filtered_out(self):
        bad = playlist_item("P2", privacy_status="private")
        del bad["snippet"]["title"]
        with pytest.raises(MalformedResponseError):
            normalize_items([playlist_item("P1"), bad], RecordKind.PLAYLIST, "public")
