# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""CLI entry point for ydf."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Awaitable, Callable

import click

from ydf import __version__
from ydf.client import YoutubeDataFetcher
from ydf.core.errors import YdfError
from ydf.core.logging import setup_logging, get_logger
from ydf.core.options import FetcherOptions
from ydf.core.pages import ResultPage, iter_pages
from ydf.core.writer import write_result


# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1


def _common_options(fn):
    """Shared Click options that map to FetcherOptions fields."""
    decorators = [
        click.option("--api-key", type=str, default=None, help="YouTube Data API v3 key."),
        click.option("--channel-id", type=str, default=None, help="Channel ID to read."),
        click.option("--timeout", type=float, default=None, help="Request timeout in seconds."),
        click.option("--verbose", is_flag=True, default=None, help="Verbose console output."),
        click.option("--log-file", type=click.Path(path_type=Path), default=None, help="Append JSONL logs to this file."),
        click.option("--out", type=click.Path(path_type=Path), default=None, help="Write JSON to this file instead of stdout."),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def _paging_options(fn):
    """Shared options for commands returning results pages."""
    decorators = [
        click.option("--max-results", type=click.IntRange(0, 50), default=None, help="Results per page (0-50)."),
        click.option("--privacy-status", type=str, default=None, help="Keep only items with this privacy status."),
        click.option("--all-pages", is_flag=True, default=False, help="Follow next-page cursors to the end."),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def _build_options(**cli_kwargs) -> FetcherOptions:
    """Build FetcherOptions from CLI kwargs, filtering out unset (None) values.

    Only explicitly-provided CLI flags are passed to FetcherOptions as init
    overrides. Unset flags fall through to env vars → YAML → defaults.
    """
    overrides = {key: value for key, value in cli_kwargs.items() if value is not None}
    return FetcherOptions(**overrides)


async def _collect_pages(first: ResultPage, all_pages: bool) -> ResultPage | list[ResultPage]:
    if not all_pages:
        return first
    return [page async for page in iter_pages(first)]


def _run(
    options_kwargs: dict,
    out: Path | None,
    action: Callable[[YoutubeDataFetcher], Awaitable],
) -> None:
    """Configure logging, run ``action`` against a fetcher and write its result."""
    options = _build_options(**options_kwargs)
    setup_logging(verbose=options.verbose, jsonl_path=options.log_file)
    log = get_logger()

    try:
        credentials = options.credentials()
    except ValueError as exc:
        log.error("%s. Use --api-key/--channel-id or YDF_API_KEY/YDF_CHANNEL_ID.", exc)
        sys.exit(EXIT_ERROR)

    async def _main():
        async with YoutubeDataFetcher(credentials.api_key, credentials.channel_id, options) as fetcher:
            return await action(fetcher)

    try:
        result = asyncio.run(_main())
    except YdfError as exc:
        log.error("%s", exc)
        sys.exit(EXIT_ERROR)

    path = write_result(result, out)
    if path is not None:
        log.info("Wrote %s", path)
    sys.exit(EXIT_OK)


@click.group()
@click.version_option(version=__version__, prog_name="ydf")
def cli() -> None:
    """YouTube channel playlists and videos fetcher."""


@cli.command()
@_common_options
def channel(out, **kwargs):
    """Fetch general channel information."""
    _run(kwargs, out, lambda fetcher: fetcher.channel_info())


@cli.command()
@_common_options
@_paging_options
def playlists(out, max_results, privacy_status, all_pages, **kwargs):
    """Fetch the channel's playlists."""

    async def action(fetcher: YoutubeDataFetcher):
        first = await fetcher.playlists(max_results, privacy_status)
        return await _collect_pages(first, all_pages)

    _run(kwargs, out, action)


@cli.command()
@_common_options
@_paging_options
def uploads(out, max_results, privacy_status, all_pages, **kwargs):
    """Fetch every video uploaded to the channel."""

    async def action(fetcher: YoutubeDataFetcher):
        first = await fetcher.uploads(max_results, privacy_status)
        return await _collect_pages(first, all_pages)

    _run(kwargs, out, action)


@cli.command("playlist-uploads")
@click.argument("title")
@_common_options
@_paging_options
def playlist_uploads(title, out, max_results, privacy_status, all_pages, **kwargs):
    """Fetch the videos of the playlist named TITLE."""

    async def action(fetcher: YoutubeDataFetcher):
        first = await fetcher.playlist_uploads(title, max_results, privacy_status)
        return await _collect_pages(first, all_pages)

    _run(kwargs, out, action)


if __name__ == "__main__":
    cli()
