# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Exception hierarchy for ydf."""

from __future__ import annotations


class YdfError(Exception):
    """Base class for every error raised by ydf."""


class TransportError(YdfError):
    """Raised when a request fails at the HTTP or network level.

    ``status`` is the HTTP status code, or 0 when no response was received.
    """

    def __init__(self, status: int, status_text: str, message: str | None = None) -> None:
        self.status = status
        self.status_text = status_text
        super().__init__(message or f"Request failed with status {status}: {status_text}")


class NotFoundError(YdfError):
    """Raised when a requested channel or playlist does not exist."""


class MalformedResponseError(YdfError):
    """Raised when a response lacks a field the normalizer needs."""


class PaginationError(YdfError):
    """Raised when a results page cannot be navigated."""


class PaginationBoundaryError(PaginationError):
    """Raised when asking for a page beyond the first or last one."""
