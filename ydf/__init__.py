"""ydf: YouTube channel playlists and videos, normalized and paginated."""

__version__ = "0.1.0"

from ydf.client import YoutubeDataFetcher
from ydf.core.errors import (
    MalformedResponseError,
    NotFoundError,
    PaginationBoundaryError,
    PaginationError,
    TransportError,
    YdfError,
)
from ydf.core.models import (
    ChannelInfo,
    Credentials,
    PageKind,
    PlaylistRecord,
    VideoRecord,
)
from ydf.core.options import FetcherOptions
from ydf.core.pages import ResultPage, iter_pages


__all__ = [
    "__version__",
    "YoutubeDataFetcher",
    "FetcherOptions",
    "ResultPage",
    "iter_pages",
    "ChannelInfo",
    "Credentials",
    "PageKind",
    "PlaylistRecord",
    "VideoRecord",
    "YdfError",
    "TransportError",
    "NotFoundError",
    "MalformedResponseError",
    "PaginationError",
    "PaginationBoundaryError",
]
