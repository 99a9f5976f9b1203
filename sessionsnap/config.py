"""Library configuration loading helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, get_args

import tomllib

from pydantic import BaseModel, Field, field_validator

CONFIG_FILE = Path.home() / ".config" / "sessionsnap" / "config.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class DecoderConfig(BaseModel):
    """Knobs for how monitoring rows become snapshots."""

    blank_wait_event_as_null: bool = True


class AppConfig(BaseModel):
    """Shape of the configuration file."""

    log_level: LogLevel = "WARNING"
    decoder: DecoderConfig = Field(default_factory=DecoderConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value

    def with_decoder(self, **updates: object) -> AppConfig:
        """Return a copy with decoder settings changed."""

        decoder = self.decoder.model_copy(update=updates)
        return self.model_copy(update={"decoder": decoder})

    def with_log_level(self, level: str) -> AppConfig:
        return AppConfig(log_level=level, decoder=self.decoder)


def load_config() -> AppConfig:
    """Load configuration from disk; fall back to defaults if missing."""

    try:
        data = _read_config_file()
    except FileNotFoundError:
        return AppConfig()
    except (tomllib.TOMLDecodeError, OSError):
        return AppConfig()

    return AppConfig(
        log_level=data.get("log_level", AppConfig.model_fields["log_level"].default),
        decoder=data.get("decoder", DecoderConfig()),
    )


def save_config(config: AppConfig) -> None:
    """Persist configuration to disk."""

    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = [
        f'log_level = "{config.log_level}"',
        "",
        "[decoder]",
        f"blank_wait_event_as_null = {str(config.decoder.blank_wait_event_as_null).lower()}",
    ]
    CONFIG_FILE.write_text("\n".join(lines) + "\n")


def configure_logging(config: AppConfig) -> None:
    """Apply the configured level to the package logger."""

    logging.getLogger("sessionsnap").setLevel(config.log_level)


def _read_config_file() -> dict[str, object]:
    with CONFIG_FILE.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    if isinstance(raw, dict):
        log_level = raw.get("log_level")
        if isinstance(log_level, str) and log_level.upper() in LOG_LEVELS:
            data["log_level"] = log_level.upper()
        decoder = raw.get("decoder")
        if isinstance(decoder, dict):
            settings: dict[str, object] = {}
            blank_as_null = decoder.get("blank_wait_event_as_null")
            if isinstance(blank_as_null, bool):
                settings["blank_wait_event_as_null"] = blank_as_null
            data["decoder"] = DecoderConfig(**settings)
    return data


__all__ = [
    "AppConfig",
    "CONFIG_FILE",
    "DecoderConfig",
    "configure_logging",
    "load_config",
    "save_config",
]
