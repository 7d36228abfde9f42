"""Channel-level lookups (info, content details, uploads playlist)."""

from __future__ import annotations

from pydantic import ValidationError

from ydf.core.errors import MalformedResponseError, NotFoundError
from ydf.core.models import ChannelInfo, Credentials
from ydf.services.normalizer import require, require_object, truncate_date
from ydf.services.transport import Transport


async def fetch_channel_info(transport: Transport, credentials: Credentials) -> ChannelInfo:
    """Fetch general information and statistics about the channel.

    A channel may omit ``statistics`` or send it as null; its counts are
    then None.
    """
    response = await transport.get(
        "channels",
        {
            "part": "snippet, statistics",
            "id": credentials.channel_id,
            "key": credentials.api_key,
        },
    )
    channel = _first_channel(response, credentials.channel_id)
    snippet = require_object(channel, "snippet")
    statistics = channel.get("statistics")
    if statistics is None:
        statistics = {}
    elif not isinstance(statistics, dict):
        raise MalformedResponseError(
            f"Response item has a {type(statistics).__name__} at 'statistics', expected an object"
        )

    try:
        return ChannelInfo(
            localization=snippet.get("country"),
            custom_url=snippet.get("customUrl"),
            title=require(channel, "snippet.title"),
            description=require(channel, "snippet.description"),
            creation_date=truncate_date(require(channel, "snippet.publishedAt")),
            subscriber_count=statistics.get("subscriberCount"),
            video_count=statistics.get("videoCount"),
            view_count=statistics.get("viewCount"),
        )
    except ValidationError as exc:
        raise MalformedResponseError(f"Invalid channel resource: {exc}") from exc


async def fetch_content_details(transport: Transport, credentials: Credentials) -> dict:
    """Fetch the channel's ``contentDetails`` part."""
    response = await transport.get(
        "channels",
        {
            "part": "contentDetails",
            "id": credentials.channel_id,
            "key": credentials.api_key,
        },
    )
    return require_object(_first_channel(response, credentials.channel_id), "contentDetails")


async def fetch_uploads_playlist_id(transport: Transport, credentials: Credentials) -> str:
    """Return the ID of the playlist holding every upload of the channel."""
    details = await fetch_content_details(transport, credentials)
    return require(details, "relatedPlaylists.uploads")


def _first_channel(response: dict, channel_id: str) -> dict:
    items = response.get("items") or []
    if not items:
        raise NotFoundError(f"No such channel: {channel_id}")
    if not isinstance(items, list) or not isinstance(items[0], dict):
        raise MalformedResponseError(f"Unexpected channel list for {channel_id}: {items!r}")
    return items[0]
