"""Sequential asset generation across all installed platforms."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .display import Display
from .models.platforms_config import IconSpec, ResolvedPlatform, SplashSpec
from .models.run_config import RunConfiguration
from .resize import Resizer, ResizeRequest

logger = logging.getLogger(__name__)

# Icons always come before splashes for a platform.
GENERATION_ORDER = ("icon", "splash")

# Passed through to the resize capability for every asset
RESIZE_QUALITY = 1
RESIZE_FORMAT = "png"


class WorkItem(BaseModel):
    model_config = ConfigDict(frozen=True)
    platform: str
    asset_type: str
    spec: IconSpec | SplashSpec
    src_path: Path
    dst_path: Path

    def to_request(self) -> ResizeRequest:
        width, height = self.spec.dimensions
        return ResizeRequest(
            src_path=self.src_path,
            dst_path=self.dst_path,
            width=width,
            height=height,
            quality=RESIZE_QUALITY,
            format=RESIZE_FORMAT,
        )


class GenerationResult(BaseModel):
    generated: list[Path] = Field(default_factory=list)


def _assets_for(platform: ResolvedPlatform, asset_type: str) -> tuple[Path, Sequence[IconSpec | SplashSpec]]:
    if asset_type == "icon":
        return platform.icon_path, platform.descriptor.icon_assets
    return platform.splash_path, platform.descriptor.splash_assets


def plan_generation(run_config: RunConfiguration, platforms: Sequence[ResolvedPlatform]) -> list[WorkItem]:
    """Build the ordered work list: platform order, icons then splashes, declared spec order.

    A (platform, type) pair with a disabled source or no specs contributes nothing.
    """
    items: list[WorkItem] = []
    for platform in platforms:
        if not platform.is_added:
            continue
        for asset_type in GENERATION_ORDER:
            src = run_config.source_for(asset_type)
            out_dir, specs = _assets_for(platform, asset_type)
            if src is None or not specs:
                continue
            items.extend(
                WorkItem(
                    platform=platform.name,
                    asset_type=asset_type,
                    spec=spec,
                    src_path=src,
                    dst_path=out_dir / spec.name,
                )
                for spec in specs
            )
    return items


async def generate(
    run_config: RunConfiguration,
    platforms: Sequence[ResolvedPlatform],
    resizer: Resizer,
    display: Display,
) -> GenerationResult:
    """Resize every planned asset one at a time.

    The first failing resize propagates and nothing after it runs. Files
    written before the failure are left in place.
    """
    result = GenerationResult()
    current_group: tuple[str, str] | None = None
    for item in plan_generation(run_config, platforms):
        group = (item.platform, item.asset_type)
        if group != current_group:
            display.header(f"Generating {item.asset_type} assets for {item.platform}")
            current_group = group
        await resizer(item.to_request())
        result.generated.append(item.dst_path)
        display.success(f"{item.spec.name} created")
    logger.info("Generated %d asset(s)", len(result.generated))
    return result
