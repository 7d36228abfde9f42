"""Normalization of raw playlist / playlist item resources into records."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from ydf.core.errors import MalformedResponseError
from ydf.core.models import (
    NormalizedRecord,
    PlaylistAttributes,
    PlaylistRecord,
    RecordKind,
    VideoAttributes,
    VideoRecord,
)

_MISSING = object()


def require(item: Any, path: str) -> Any:
    """Return the value at a dotted path, e.g. ``snippet.resourceId.videoId``.

    Raises:
        MalformedResponseError: If any segment of the path is missing.
    """
    value = item
    for part in path.split("."):
        if isinstance(value, list) and part.isdigit():
            index = int(part)
            value = value[index] if index < len(value) else _MISSING
        elif isinstance(value, dict):
            value = value.get(part, _MISSING)
        else:
            value = _MISSING
        if value is _MISSING:
            raise MalformedResponseError(f"Response item is missing '{path}'")
    return value


def require_object(item: Any, path: str) -> dict:
    """Like require(), but the value must be a JSON object."""
    value = require(item, path)
    if not isinstance(value, dict):
        raise MalformedResponseError(
            f"Response item has a {type(value).__name__} at '{path}', expected an object"
        )
    return value


def truncate_date(timestamp: str) -> str:
    """Truncate an ISO 8601 timestamp to its YYYY-MM-DD day."""
    if not isinstance(timestamp, str):
        raise MalformedResponseError(f"Expected a timestamp string, got {timestamp!r}")
    return timestamp[:10]


def normalize_item(item: dict, kind: RecordKind | str) -> NormalizedRecord:
    """Build one record of the given kind from a raw API item."""
    kind = RecordKind(kind)
    try:
        if kind is RecordKind.PLAYLIST:
            return PlaylistRecord(attributes=_playlist_attributes(item))
        return VideoRecord(attributes=_video_attributes(item))
    except ValidationError as exc:
        raise MalformedResponseError(f"Invalid {kind.value} item: {exc}") from exc


def normalize_items(
    items: Iterable[dict],
    kind: RecordKind | str,
    privacy_status: str | None = None,
) -> tuple[NormalizedRecord, ...]:
    """Normalize items in order, keeping only those matching ``privacy_status``.

    An empty or None filter keeps everything.
    """
    records = (normalize_item(item, kind) for item in items)
    if not privacy_status:
        return tuple(records)
    return tuple(r for r in records if r.attributes.privacy_status == privacy_status)


def _playlist_attributes(item: dict) -> PlaylistAttributes:
    return PlaylistAttributes(
        id=require(item, "id"),
        title=require(item, "snippet.title"),
        description=require(item, "snippet.localized.description"),
        creation_date=truncate_date(require(item, "snippet.publishedAt")),
        video_count=require(item, "contentDetails.itemCount"),
        thumbnails=_thumbnail_urls(require(item, "snippet.thumbnails")),
        privacy_status=require(item, "status.privacyStatus"),
    )


def _video_attributes(item: dict) -> VideoAttributes:
    return VideoAttributes(
        id=require(item, "snippet.resourceId.videoId"),
        title=require(item, "snippet.title"),
        description=require(item, "snippet.description"),
        playlist_id=require(item, "snippet.playlistId"),
        position_in_playlist=require(item, "snippet.position"),
        creation_date=truncate_date(require(item, "snippet.publishedAt")),
        thumbnails=_thumbnail_urls(require(item, "snippet.thumbnails")),
        privacy_status=require(item, "status.privacyStatus"),
    )


def _thumbnail_urls(thumbnails: Any) -> dict[str, str]:
    if not isinstance(thumbnails, dict):
        raise MalformedResponseError("Response item has non-object 'snippet.thumbnails'")
    return {
        size: require(thumb, "url") for size, thumb in thumbnails.items()
    }
