"""Discovery and validation of the platforms.yaml table."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import PlatformsConfigError
from .models.platforms_config import PlatformDescriptor, PlatformsConfig

logger = logging.getLogger(__name__)

# Ships with the package
BUILTIN_PLATFORMS_CONFIG = Path(__file__).parent / "data" / "platforms.yaml"

_USER_PLATFORMS_CONFIG = Path.home() / ".config" / "mobile_assets" / "platforms.yaml"


def load_platforms_file(path: Path) -> list[PlatformDescriptor]:
    """Load and validate a single platforms YAML file.

    Raises PlatformsConfigError if the file is unreadable, is not YAML, or
    does not match the PlatformsConfig model.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise PlatformsConfigError(f"Cannot read platforms config {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise PlatformsConfigError(f"Invalid platforms config: {path} (expected YAML mapping)")
    try:
        config = PlatformsConfig.model_validate(raw)
    except ValidationError as exc:
        raise PlatformsConfigError(f"Invalid platforms config {path}: {exc}") from exc
    return list(config.platforms)


def load_platforms(explicit_path: str | Path | None = None) -> list[PlatformDescriptor]:
    """
    Locate and load the platform table.

    Search order (first valid file wins):
      1. explicit_path (an error here is fatal)
      2. ./platforms.yaml
      3. ~/.config/mobile_assets/platforms.yaml
      4. Built-in package data/platforms.yaml
    """
    if explicit_path is not None:
        platforms = load_platforms_file(Path(explicit_path))
        logger.info("Loaded platforms config from %s", explicit_path)
        return platforms

    for path in (Path("platforms.yaml"), _USER_PLATFORMS_CONFIG):
        if not path.is_file():
            continue
        try:
            platforms = load_platforms_file(path)
        except PlatformsConfigError as exc:
            logger.warning("Failed to load platforms config %s: %s", path, exc)
            continue
        logger.info("Loaded platforms config from %s", path)
        return platforms

    return load_platforms_file(BUILTIN_PLATFORMS_CONFIG)
