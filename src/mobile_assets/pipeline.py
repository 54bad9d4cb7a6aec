"""End-to-end run: validate inputs, resolve platforms, generate assets."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from .display import Display
from .generation import GenerationResult, generate
from .models.platforms_config import PlatformDescriptor
from .models.run_config import RunConfiguration
from .project_descriptor import read_project_name
from .resize import PillowResizer, Resizer
from .resolver import resolve_platforms
from .validation import validate

logger = logging.getLogger(__name__)


async def run_pipeline(
    run_config: RunConfiguration,
    descriptors: Sequence[PlatformDescriptor],
    *,
    resizer: Resizer | None = None,
    display: Display | None = None,
) -> GenerationResult:
    """Run every stage in order; the first error propagates unchanged."""
    display = display or Display()
    resizer = resizer or PillowResizer()

    display.header("Checking Project, Icon, and Splash")
    validated = await validate(run_config, descriptors, display)
    project_name = await read_project_name(validated.config)
    platforms = await resolve_platforms(validated.project_root, project_name, descriptors)
    logger.debug("Resolved %d platform(s) for project '%s'", len(platforms), project_name)
    return await generate(validated, platforms, resizer, display)


def run(
    run_config: RunConfiguration,
    descriptors: Sequence[PlatformDescriptor],
    *,
    resizer: Resizer | None = None,
    display: Display | None = None,
) -> GenerationResult:
    return asyncio.run(run_pipeline(run_config, descriptors, resizer=resizer, display=display))
