"""Tests for ydf.services.channel."""

import asyncio

import pytest

from fakes import API_KEY, CHANNEL_ID, UPLOADS_ID, channel_response
from ydf.core.errors import MalformedResponseError, NotFoundError
from ydf.core.models import ChannelInfo
from ydf.services.channel import (
    fetch_channel_info,
    fetch_content_details,
    fetch_uploads_playlist_id,
)


class TestFetchChannelInfo:
    def test_full_mapping(self, api, credentials):
        api.add("channels", channel_response())
        info = asyncio.run(fetch_channel_info(api.transport(), credentials))

        assert info == ChannelInfo(
            localization="US",
            custom_url="@testchannel",
            title="Test Channel",
            description="A channel for tests",
            creation_date="2015-03-04",
            subscriber_count=1200,
            video_count=42,
            view_count=98765,
        )
        assert api.requests_for("channels")[0] == {
            "part": "snippet, statistics",
            "id": CHANNEL_ID,
            "key": API_KEY,
        }

    def test_hidden_subscribers_and_no_country(self, api, credentials):
        body = channel_response()
        del body["items"][0]["statistics"]["subscriberCount"]
        del body["items"][0]["snippet"]["country"]
        api.add("channels", body)
        info = asyncio.run(fetch_channel_info(api.transport(), credentials))

        assert info.subscriber_count is None
        assert info.localization is None
        assert info.video_count == 42

    def test_missing_title(self, api, credentials):
        body = channel_response()
        del body["items"][0]["snippet"]["title"]
        api.add("channels", body)
        with pytest.raises(MalformedResponseError, match="snippet.title"):
            asyncio.run(fetch_channel_info(api.transport(), credentials))

    def test_unknown_channel(self, api, credentials):
        api.add("channels", {"kind": "youtube#channelListResponse", "pageInfo": {"totalResults": 0}})
        with pytest.raises(NotFoundError, match=CHANNEL_ID):
            asyncio.run(fetch_channel_info(api.transport(), credentials))


class TestContentDetails:
    def test_content_details(self, api, credentials):
        api.add("channels", channel_response())
        details = asyncio.run(fetch_content_details(api.transport(), credentials))
        assert details["relatedPlaylists"]["uploads"] == UPLOADS_ID
        assert api.requests_for("channels")[0]["part"] == "contentDetails"

    def test_uploads_playlist_id(self, api, credentials):
        api.add("channels", channel_response(uploads="UU_other"))
        assert asyncio.run(fetch_uploads_playlist_id(api.transport(), credentials)) == "UU_other"

    def test_missing_uploads(self, api, credentials):
        body = channel_response()
        body["items"][0]["contentDetails"] = {"relatedPlaylists": {}}
        api.add("channels", body)
        with pytest.raises(MalformedResponseError, match="relatedPlaylists.uploads"):
            asyncio.run(fetch_uploads_playlist_id(api.transport(), credentials))


class TestMalformedChannel:
    def test_null_statistics_leaves_counts_unset(self, api, credentials):
        body = channel_response()
        body["items"][0]["statistics"] = None
        api.add("channels", body)
        info = asyncio.run(fetch_channel_info(api.transport(), credentials))

        assert info.subscriber_count is None
        assert info.video_count is None
        assert info.view_count is None
        assert info.title == "Test Channel"

    def test_missing_statistics_leaves_counts_unset(self, api, credentials):
        body = channel_response()
        del body["items"][0]["statistics"]
        api.add("channels", body)
        info = asyncio.run(fetch_channel_info(api.transport(), credentials))
        assert info.view_count is None

    def test_non_object_statistics(self, api, credentials):
        body = channel_response()
        body["items"][0]["statistics"] = ["1200"]
        api.add("channels", body)
        with pytest.raises(MalformedResponseError, match="'statistics'"):
            asyncio.run(fetch_channel_info(api.transport(), credentials))

    def test_non_object_snippet(self, api, credentials):
        body = channel_response()
        body["items"][0]["snippet"] = "Test Channel"
        api.add("channels", body)
        with pytest.raises(MalformedResponseError, match="'snippet'"):
            asyncio.run(fetch_channel_info(api.transport(), credentials))

    def test_null_content_details(self, api, credentials):
        body = channel_response()
        body["items"][0]["contentDetails"] = None
        api.add("channels", body)
        with pytest.raises(MalformedResponseError, match="contentDetails"):
            asyncio.run(fetch_content_details(api.transport(), credentials))

    def test_non_object_channel_item(self, api, credentials):
        api.add("channels", {"kind": "youtube#channelListResponse", "items": ["UC_test_channel"]})
        with pytest.raises(MalformedResponseError, match=CHANNEL_ID):
            asyncio.run(fetch_channel_info(api.transport(), credentials))
