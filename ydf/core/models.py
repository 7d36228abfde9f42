# Copyright (c) 2026 Pointmatic
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pydantic data models for ydf."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class RecordKind(str, Enum):
    PLAYLIST = "playlist"
    VIDEO = "video"


class PageKind(str, Enum):
    """Which upstream list a results page was read from."""

    PLAYLISTS = "youtube#playlistListResponse"
    PLAYLIST_ITEMS = "youtube#playlistItemListResponse"


class Credentials(_Frozen):
    api_key: str
    channel_id: str


class PlaylistAttributes(_Frozen):
    id: str
    title: str
    description: str
    creation_date: str
    video_count: int = Field(ge=0)
    thumbnails: dict[str, str] = {}
    privacy_status: str


class VideoAttributes(_Frozen):
    id: str
    title: str
    description: str
    playlist_id: str
    position_in_playlist: int = Field(ge=0)
    creation_date: str
    thumbnails: dict[str, str] = {}
    privacy_status: str


class PlaylistRecord(_Frozen):
    kind: Literal["playlist"] = "playlist"
    attributes: PlaylistAttributes


class VideoRecord(_Frozen):
    kind: Literal["video"] = "video"
    attributes: VideoAttributes


NormalizedRecord = Annotated[
    Union[PlaylistRecord, VideoRecord],
    Field(discriminator="kind"),
]


class ChannelInfo(_Frozen):
    title: str
    description: str
    creation_date: str
    localization: str | None = None
    custom_url: str | None = None
    subscriber_count: int | None = None
    video_count: int | None = None
    view_count: int | None = None
