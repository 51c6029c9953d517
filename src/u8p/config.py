"""Configuration loading utilities for u8p."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .models import BoundaryPolicy
from .paths import project_config_path, runtime_config_dir

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class BoundaryConfig(BaseModel):
    min_offset: int = Field(default=3, ge=0, description="Largest offset rejected as too small")
    empty_is_error: bool = Field(
        default=False,
        description="Treat an empty buffer as INVALID_LENGTH instead of index 0",
    )

    def to_policy(self) -> BoundaryPolicy:
        return BoundaryPolicy(min_offset=self.min_offset, empty_is_error=self.empty_is_error)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    boundary: BoundaryConfig = Field(default_factory=BoundaryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Malformed YAML in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
