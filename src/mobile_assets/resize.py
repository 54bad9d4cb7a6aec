"""Pillow-backed resize capability used to produce each asset."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageOps
from pydantic import BaseModel, ConfigDict, PositiveInt

from .errors import ResizeError

logger = logging.getLogger(__name__)


class ResizeRequest(BaseModel):
    model_config = ConfigDict(frozen=True)
    src_path: Path
    dst_path: Path
    width: PositiveInt
    height: PositiveInt
    quality: int | None = None  # only honoured by lossy formats
    format: str = "png"


class Resizer(Protocol):
    async def __call__(self, request: ResizeRequest) -> None: ...


def resize_image(request: ResizeRequest) -> None:
    """Scale and centre-crop the source to exactly width x height, then save it."""
    fmt = request.format.upper()
    with Image.open(request.src_path) as img:
        mode = "RGB" if fmt in {"JPEG", "JPG"} else "RGBA"
        fitted = ImageOps.fit(
            img.convert(mode),
            (request.width, request.height),
            method=Image.Resampling.LANCZOS,
        )
    request.dst_path.parent.mkdir(parents=True, exist_ok=True)
    save_kwargs: dict[str, int] = {}
    if request.quality is not None and fmt in {"JPEG", "JPG", "WEBP"}:
        save_kwargs["quality"] = request.quality
    fitted.save(request.dst_path, format="JPEG" if fmt == "JPG" else fmt, **save_kwargs)


class PillowResizer:
    """Runs resize_image off the event loop and normalises failures to ResizeError."""

    async def __call__(self, request: ResizeRequest) -> None:
        try:
            await asyncio.to_thread(resize_image, request)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ResizeError(f"Failed to create {request.dst_path}: {exc}") from exc
        logger.debug("Resized %s -> %s (%dx%d)", request.src_path, request.dst_path, request.width, request.height)
