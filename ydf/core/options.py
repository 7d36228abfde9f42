"""FetcherOptions settings model for ydf."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource
from pydantic_settings import YamlConfigSettingsSource

from ydf.core.models import Credentials

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"


class FetcherOptions(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="YDF_",
        yaml_file="ydf.yaml",
        yaml_file_encoding="utf-8",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    api_key: str | None = None
    channel_id: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    verbose: bool = False
    log_file: Path | None = None

    def credentials(self) -> Credentials:
        """Build the Credentials used by every request.

        Raises:
            ValueError: If the API key or the channel ID is not configured.
        """
        missing = [
            name for name in ("api_key", "channel_id") if not getattr(self, name)
        ]
        if missing:
            raise ValueError(f"Missing required option(s): {', '.join(missing)}")
        return Credentials(api_key=self.api_key, channel_id=self.channel_id)
