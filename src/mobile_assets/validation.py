"""Precondition checks run before any asset is generated.

The checks run fail-fast in a fixed order: platforms, config file, then
source assets. Missing config.xml is always fatal. A missing icon or splash
source only disables that asset type, but the run fails when both are
missing.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from .display import Display
from .errors import MissingConfigError, NoAssetsError, NoPlatformsError
from .models.platforms_config import PlatformDescriptor
from .models.run_config import RunConfiguration
from .resolver import resolve_platforms

logger = logging.getLogger(__name__)

ASSET_TYPES = ("icon", "splash")


async def _read_file(path: Path) -> None:
    await asyncio.to_thread(Path(path).read_bytes)


async def check_platforms(
    run_config: RunConfiguration,
    descriptors: Sequence[PlatformDescriptor],
    display: Display,
) -> None:
    """Raise NoPlatformsError unless at least one platform root exists."""
    platforms = await resolve_platforms(run_config.project_root, "", descriptors)
    active = [p.name for p in platforms if p.is_added]
    if not active:
        raise NoPlatformsError()
    display.success("platforms found: " + ", ".join(active))


async def check_config(run_config: RunConfiguration, display: Display) -> None:
    try:
        await _read_file(run_config.config)
    except FileNotFoundError as exc:
        raise MissingConfigError(f"cordova's {run_config.config} does not exist") from exc
    except OSError as exc:
        raise MissingConfigError(f"cordova's {run_config.config} cannot be read: {exc}") from exc
    display.success(f"cordova's {run_config.config} exists")


async def _check_source(asset_type: str, location: Path | None, display: Display) -> bool:
    if location is None:
        display.warn(f"{asset_type} asset was not specified")
        return False
    try:
        await _read_file(location)
    except OSError as exc:
        logger.debug("%s source %s unreadable: %s", asset_type, location, exc)
        display.warn(f"{asset_type} asset could not be read at: {location}")
        return False
    display.success(f"{asset_type} asset exists at: {location}")
    return True


async def check_assets(run_config: RunConfiguration, display: Display) -> RunConfiguration:
    """Disable unreadable sources; raise NoAssetsError if none is usable.

    Returns a copy of *run_config* whose unreadable sources are set to None.
    """
    results = await asyncio.gather(
        *(_check_source(t, run_config.source_for(t), display) for t in ASSET_TYPES)
    )
    valid = dict(zip(ASSET_TYPES, results))
    if not any(valid.values()):
        raise NoAssetsError()
    return run_config.model_copy(update={t: None for t, ok in valid.items() if not ok})


async def validate(
    run_config: RunConfiguration,
    descriptors: Sequence[PlatformDescriptor],
    display: Display,
) -> RunConfiguration:
    await check_platforms(run_config, descriptors, display)
    await check_config(run_config, display)
    return await check_assets(run_config, display)
