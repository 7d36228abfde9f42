# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""High-level client bound to one channel."""

from __future__ import annotations

import logging

from ydf.core.errors import NotFoundError
from ydf.core.logging import log_event
from ydf.core.models import ChannelInfo, Credentials, PlaylistRecord
from ydf.core.options import FetcherOptions
from ydf.core.pages import ResultPage, iter_pages
from ydf.services.channel import fetch_channel_info, fetch_uploads_playlist_id
from ydf.services.fetchers import fetch_playlists, fetch_videos
from ydf.services.transport import Transport

# Largest page size the Data API accepts
TITLE_LOOKUP_PAGE_SIZE = 50


class YoutubeDataFetcher:
    """Fetches a channel's info, playlists and videos.

    Usage::

        async with YoutubeDataFetcher(api_key, channel_id) as ydf:
            page = await ydf.playlists(max_results=10, privacy_status="public")
            if page.has_next_page:
                page = await page.fetch_next_page()

    Args:
        api_key: YouTube Data API v3 key.
        channel_id: ID of the channel to read.
        options: Transport settings (base URL, timeout). Defaults if omitted.
        transport: Transport to use instead of creating one.
    """

    def __init__(
        self,
        api_key: str,
        channel_id: str,
        options: FetcherOptions | None = None,
        transport: Transport | None = None,
    ) -> None:
        if options is None:
            options = FetcherOptions()
        self._credentials = Credentials(api_key=api_key, channel_id=channel_id)
        self._owns_transport = transport is None
        self._transport = transport or Transport(options.base_url, timeout=options.timeout)

    @classmethod
    def from_options(cls, options: FetcherOptions) -> YoutubeDataFetcher:
        """Build a client from configured options (init, env, or ydf.yaml)."""
        credentials = options.credentials()
        return cls(credentials.api_key, credentials.channel_id, options)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    async def __aenter__(self) -> YoutubeDataFetcher:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this fetcher created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def channel_info(self) -> ChannelInfo:
        return await fetch_channel_info(self._transport, self._credentials)

    async def playlists(
        self, max_results: int | None = None, privacy_status: str | None = None
    ) -> ResultPage:
        """Fetch the first page of the channel's playlists."""
        return await fetch_playlists(
            self._transport, self._credentials, max_results, privacy_status
        )

    async def playlist(self, title: str) -> PlaylistRecord:
        """Find a playlist by its exact title.

        Raises:
            NotFoundError: If no playlist of the channel has this title.
        """
        first = await self.playlists(TITLE_LOOKUP_PAGE_SIZE)
        async for page in iter_pages(first):
            for record in page.data:
                if record.attributes.title == title:
                    return record
        raise NotFoundError(f'Cannot fetch videos from "{title}", no such playlist!')

    async def uploads(
        self, max_results: int | None = None, privacy_status: str | None = None
    ) -> ResultPage:
        """Fetch the first page of every video uploaded to the channel."""
        playlist_id = await fetch_uploads_playlist_id(self._transport, self._credentials)
        log_event(
            logging.DEBUG,
            f"Uploads playlist for {self._credentials.channel_id} is {playlist_id}",
            resource="channels",
            event="uploads_playlist",
            details=playlist_id,
        )
        # The uploads lookup above already proved the channel exists
        return await fetch_videos(
            self._transport,
            self._credentials,
            playlist_id,
            max_results,
            privacy_status,
            channel_checked=True,
        )

    async def playlist_uploads(
        self,
        title: str,
        max_results: int | None = None,
        privacy_status: str | None = None,
    ) -> ResultPage:
        """Fetch the first page of videos of the playlist with this title."""
        playlist = await self.playlist(title)
        return await fetch_videos(
            self._transport,
            self._credentials,
            playlist.attributes.id,
            max_results,
            privacy_status,
        )
