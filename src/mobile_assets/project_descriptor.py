"""Read the project display name out of Cordova's config.xml."""

from __future__ import annotations

import asyncio
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import ParseError, ReadError, SchemaError

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    # '{http://www.w3.org/ns/widgets}name' -> 'name'
    return tag.rsplit("}", 1)[-1]


def parse_project_name(data: bytes, source: str = "<config>") -> str:
    """Return the text of the first <name> under the root <widget> element."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ParseError(f"{source} is not well-formed XML: {exc}") from exc

    if _local_name(root.tag) != "widget":
        raise SchemaError(f"{source}: expected a <widget> root element, found <{_local_name(root.tag)}>")

    name_el = next((child for child in root if _local_name(child.tag) == "name"), None)
    if name_el is None:
        raise SchemaError(f"{source}: <widget> has no <name> element")

    name = (name_el.text or "").strip()
    if not name:
        raise SchemaError(f"{source}: <name> element is empty")
    return name


async def read_project_name(config_path: Path) -> str:
    try:
        data = await asyncio.to_thread(Path(config_path).read_bytes)
    except OSError as exc:
        raise ReadError(f"Cannot read {config_path}: {exc}") from exc
    name = parse_project_name(data, source=str(config_path))
    logger.debug("Project name from %s: %s", config_path, name)
    return name
