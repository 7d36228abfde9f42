"""Paged fetchers for playlists and playlist videos."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ydf.core.errors import MalformedResponseError
from ydf.core.logging import log_event
from ydf.core.models import Credentials, PageKind, RecordKind
from ydf.core.pages import ResultPage
from ydf.services.channel import fetch_content_details
from ydf.services.normalizer import normalize_items, require
from ydf.services.transport import Transport


async def fetch_playlists(
    transport: Transport,
    credentials: Credentials,
    max_results: int | None = None,
    privacy_status: str | None = None,
    page_token: str | None = None,
) -> ResultPage:
    """Fetch one page of the channel's playlists.

    Args:
        transport: Transport used for the request (and for later navigation).
        credentials: API key and channel ID.
        max_results: Page size. Left to the service default when None.
        privacy_status: Keep only playlists with this privacy status.
        page_token: Cursor of the page to fetch. First page when None.
    """
    params = {
        "part": "contentDetails, snippet, status",
        "channelId": credentials.channel_id,
        "key": credentials.api_key,
    }
    _add_paging(params, max_results, page_token)

    response = await transport.get("playlists", params)
    return _build_page(
        transport,
        credentials,
        "playlists",
        response,
        kind=PageKind.PLAYLISTS,
        record_kind=RecordKind.PLAYLIST,
        privacy_status=privacy_status,
    )


async def fetch_videos(
    transport: Transport,
    credentials: Credentials,
    playlist_id: str,
    max_results: int | None = None,
    privacy_status: str | None = None,
    page_token: str | None = None,
    *,
    channel_checked: bool = False,
) -> ResultPage:
    """Fetch one page of the videos of a playlist.

    The channel's content details are looked up first, so an unknown channel
    fails with NotFoundError before any playlist items are requested.
    Callers that have just looked the channel up themselves pass
    ``channel_checked=True`` to skip the repeat. Navigation from the
    returned page always looks it up again.
    """
    if not channel_checked:
        await fetch_content_details(transport, credentials)

    params = {
        "part": "snippet, status",
        "playlistId": playlist_id,
        "key": credentials.api_key,
    }
    _add_paging(params, max_results, page_token)

    response = await transport.get("playlistItems", params)
    return _build_page(
        transport,
        credentials,
        "playlistItems",
        response,
        kind=PageKind.PLAYLIST_ITEMS,
        record_kind=RecordKind.VIDEO,
        privacy_status=privacy_status,
        playlist_id=playlist_id,
    )


def _add_paging(params: dict, max_results: int | None, page_token: str | None) -> None:
    """Add optional paging parameters; unset ones are never sent."""
    if max_results is not None:
        params["maxResults"] = max_results
    if page_token is not None:
        params["pageToken"] = page_token


def _build_page(
    transport: Transport,
    credentials: Credentials,
    resource: str,
    response: dict,
    *,
    kind: PageKind,
    record_kind: RecordKind,
    privacy_status: str | None,
    playlist_id: str | None = None,
) -> ResultPage:
    upstream_kind = response.get("kind")
    if upstream_kind is not None and upstream_kind != kind.value:
        raise MalformedResponseError(
            f"Expected a {kind.value} response, got {upstream_kind!r}"
        )

    items = response.get("items") or []
    data = normalize_items(items, record_kind, privacy_status)
    try:
        page = ResultPage.bound(
            transport,
            credentials,
            kind=kind,
            results_per_page=require(response, "pageInfo.resultsPerPage"),
            total_results=require(response, "pageInfo.totalResults"),
            prev_page_token=response.get("prevPageToken"),
            next_page_token=response.get("nextPageToken"),
            data=data,
            privacy_status=privacy_status,
            playlist_id=playlist_id,
        )
    except ValidationError as exc:
        raise MalformedResponseError(f"Invalid {kind.value} envelope: {exc}") from exc
    log_event(
        logging.DEBUG,
        f"{resource} page: kept {len(data)} of {len(items)} item(s)",
        resource=resource,
        event="page",
        details={
            "kept": len(data),
            "received": len(items),
            "privacy_status": privacy_status,
            "next_page_token": page.next_page_token,
            "prev_page_token": page.prev_page_token,
        },
    )
    return page
