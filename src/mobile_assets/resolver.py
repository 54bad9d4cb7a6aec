"""Detect which platforms are installed and where their assets belong."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from collections.abc import Sequence
from pathlib import Path

from .errors import ProbeError
from .models.platforms_config import PlatformDescriptor, ResolvedPlatform
from .templating import resolve_template

logger = logging.getLogger(__name__)


async def probe_directory(path: Path) -> bool:
    """Return True if *path* is an existing directory.

    "Not found" answers False; any other stat failure is raised as ProbeError.
    """
    try:
        st = await asyncio.to_thread(os.stat, path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise ProbeError(f"Cannot probe platform directory {path}: {exc}") from exc
    return stat.S_ISDIR(st.st_mode)


async def _resolve_one(project_root: Path, project_name: str, descriptor: PlatformDescriptor) -> ResolvedPlatform:
    platform_root = project_root / descriptor.root
    is_added = await probe_directory(platform_root)
    logger.debug("Platform '%s' at %s: added=%s", descriptor.name, platform_root, is_added)
    return ResolvedPlatform(
        descriptor=descriptor,
        is_added=is_added,
        icon_path=platform_root / resolve_template(descriptor.icon_path, project_name),
        splash_path=platform_root / resolve_template(descriptor.splash_path, project_name),
    )


async def resolve_platforms(
    project_root: Path,
    project_name: str,
    descriptors: Sequence[PlatformDescriptor],
) -> list[ResolvedPlatform]:
    """Probe every platform root concurrently; results keep descriptor order."""
    root = Path(project_root).resolve()
    return list(await asyncio.gather(*(_resolve_one(root, project_name, d) for d in descriptors)))
