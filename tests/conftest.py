from __future__ import annotations

import os

import pytest

from fakes import API_KEY, CHANNEL_ID, FakeApi
from ydf.core.models import Credentials


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep YDF_* variables and a local ydf.yaml out of FetcherOptions."""
    for name in list(os.environ):
        if name.startswith("YDF_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key=API_KEY, channel_id=CHANNEL_ID)
