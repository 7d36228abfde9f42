# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Immutable results pages and cursor navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator, Awaitable

from pydantic import BaseModel, ConfigDict, PrivateAttr

from ydf.core.errors import PaginationBoundaryError, PaginationError
from ydf.core.models import Credentials, NormalizedRecord, PageKind

if TYPE_CHECKING:
    from ydf.services.transport import Transport


class ResultPage(BaseModel):
    """One page of playlists or playlist videos.

    ``total_results`` is the upstream count; ``data`` has already been
    filtered by ``privacy_status``. Pages built by the fetchers are bound to
    the transport and credentials that produced them, which lets
    fetch_next_page() and fetch_previous_page() replay the same request with
    another cursor.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: PageKind
    results_per_page: int
    total_results: int
    prev_page_token: str | None = None
    next_page_token: str | None = None
    data: tuple[NormalizedRecord, ...] = ()
    privacy_status: str | None = None
    playlist_id: str | None = None

    _transport: Transport | None = PrivateAttr(default=None)
    _credentials: Credentials | None = PrivateAttr(default=None)

    @classmethod
    def bound(
        cls, transport: Transport, credentials: Credentials, **fields
    ) -> ResultPage:
        """Build a page that can navigate through ``transport``."""
        page = cls(**fields)
        page._transport = transport
        page._credentials = credentials
        return page

    @property
    def is_bound(self) -> bool:
        return self._transport is not None

    @property
    def has_next_page(self) -> bool:
        return bool(self.next_page_token)

    @property
    def has_previous_page(self) -> bool:
        return bool(self.prev_page_token)

    def fetch_next_page(self) -> Awaitable[ResultPage]:
        """Return an awaitable for the next page.

        Raises:
            PaginationBoundaryError: Immediately, with no request issued, if
                this is the last page.
        """
        if not self.next_page_token:
            raise PaginationBoundaryError(
                "Cannot fetch the next results page, no such page!"
            )
        return self._replay(self.next_page_token)

    def fetch_previous_page(self) -> Awaitable[ResultPage]:
        """Return an awaitable for the previous page.

        Raises:
            PaginationBoundaryError: Immediately, with no request issued, if
                this is the first page.
        """
        if not self.prev_page_token:
            raise PaginationBoundaryError(
                "Cannot fetch the previous results page, no such page!"
            )
        return self._replay(self.prev_page_token)

    def _replay(self, page_token: str) -> Awaitable[ResultPage]:
        from ydf.services.fetchers import fetch_playlists, fetch_videos

        if self._transport is None or self._credentials is None:
            raise PaginationError("Results page is not bound to a transport")

        if self.kind is PageKind.PLAYLISTS:
            return fetch_playlists(
                self._transport,
                self._credentials,
                max_results=self.results_per_page,
                privacy_status=self.privacy_status,
                page_token=page_token,
            )
        if self.kind is PageKind.PLAYLIST_ITEMS:
            if not self.playlist_id:
                raise PaginationError("Playlist items page has no playlist_id")
            return fetch_videos(
                self._transport,
                self._credentials,
                self.playlist_id,
                max_results=self.results_per_page,
                privacy_status=self.privacy_status,
                page_token=page_token,
            )
        raise PaginationError(f"Cannot paginate results of kind {self.kind!r}")


async def iter_pages(page: ResultPage) -> AsyncIterator[ResultPage]:
    """Yield ``page`` and then every following page.

    Raises:
        PaginationError: If the service hands back a cursor already followed.
    """
    seen: set[str] = set()
    while True:
        yield page
        token = page.next_page_token
        if not token:
            return
        if token in seen:
            raise PaginationError(f"Repeated page token {token!r}")
        seen.add(token)
        page = await page.fetch_next_page()
