"""Validated configuration models for hex planes and boards."""

from __future__ import annotations

import json
import logging
import math
import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.toml"


class PlaneConfig(BaseModel):
    """Parameters of the plane geometry."""

    model_config = ConfigDict(extra="forbid")

    hex_width: float = Field(default=32.0, gt=0.0)

    @field_validator("hex_width")
    @classmethod
    def _require_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("hex_width must be finite")
        return float(value)


class GridConfig(BaseModel):
    """Dimensions of a dense board anchored at hex ``(0, 0)``."""

    model_config = ConfigDict(extra="forbid")

    q_max: int = Field(default=16, ge=1)
    r_max: int = Field(default=16, ge=1)


class HexplaneConfig(BaseModel):
    """Top-level configuration payload."""

    model_config = ConfigDict(extra="forbid")

    plane: PlaneConfig = Field(default_factory=PlaneConfig)
    grid: GridConfig = Field(default_factory=GridConfig)


def default_config_path() -> Path:
    """Per-user configuration file location (not created)."""

    return Path(user_config_dir("hexplane")) / CONFIG_FILENAME


def _read_payload(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object")
        return data
    raise ValueError(f"Unsupported config file type: {path.suffix or path.name}")


def load_config(path: str | Path | None = None) -> HexplaneConfig:
    """Load configuration from ``path`` or from the per-user default.

    An explicit path must exist. When no path is given and the default file
    is absent, the built-in defaults are returned.
    """

    if path is None:
        candidate = default_config_path()
        if not candidate.exists():
            logger.debug("no config at %s; using defaults", candidate)
            return HexplaneConfig()
    else:
        candidate = Path(path)
        if not candidate.exists():
            raise FileNotFoundError(candidate)
    logger.info("loading config from %s", candidate)
    return HexplaneConfig.model_validate(_read_payload(candidate))


__all__ = [
    "CONFIG_FILENAME",
    "GridConfig",
    "HexplaneConfig",
    "PlaneConfig",
    "default_config_path",
    "load_config",
]
