from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib.resources import files as resource_files
from typing import Any, Mapping, Optional

import yaml

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

ENV_MAX_DEPTH = "SATCHEL_MAX_DEPTH"
DEFAULT_MAX_DEPTH = 8


@dataclass(frozen=True)
class FlattenConfig:
    """Defaults applied when a caller does not pass an explicit depth limit."""

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise InvalidArgumentError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 0:
            raise InvalidArgumentError(f"max_depth must be non-negative, got {self.max_depth}")


def _parse_int(value: Any, source: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidArgumentError(f"Invalid integer for max_depth from {source}: {value!r}") from None


def load_flatten_config(
    path: Optional[str] = None, env: Optional[Mapping[str, str]] = None
) -> FlattenConfig:
    """Load flattening defaults from YAML.

    If path is None, loads the embedded default resource at
    satchel/config/defaults.yaml. The SATCHEL_MAX_DEPTH environment variable,
    when set, overrides whatever the file says.
    """
    if path is None:
        data = resource_files("satchel.config").joinpath("defaults.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded flatten config resource")
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        logger.debug("Loaded flatten config from path: %s", path)

    raw = yaml.safe_load(data) or {}
    if not isinstance(raw, dict):
        raise InvalidArgumentError(f"Flatten config must be a mapping, got {type(raw).__name__}")

    max_depth = raw.get("max_depth", DEFAULT_MAX_DEPTH)
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise InvalidArgumentError(f"max_depth must be an integer, got {max_depth!r}")

    env = os.environ if env is None else env
    override = env.get(ENV_MAX_DEPTH)
    if override not in (None, ""):
        max_depth = _parse_int(override, ENV_MAX_DEPTH)
        logger.debug("max_depth overridden by %s=%s", ENV_MAX_DEPTH, override)

    cfg = FlattenConfig(max_depth=max_depth)
    logger.info("Flatten config: max_depth=%d", cfg.max_depth)
    return cfg
