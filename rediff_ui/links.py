"""Anchor inventory: extract ``{text, href}`` records and persist them."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from playwright.async_api import Locator

logger = logging.getLogger(__name__)

# Anchors with no visible text are almost always the logo linking home.
BLANK_LINK_TEXT = "Home"


@dataclass
class LinkRecord:
    text: str
    href: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def normalize_link_text(text: str | None) -> str:
    stripped = (text or "").strip()
    return stripped if stripped else BLANK_LINK_TEXT


async def collect_link_records(links: Locator) -> List[LinkRecord]:
    """Return one record per anchor currently matched by ``links``."""
    records: List[LinkRecord] = []
    for link in await links.all():
        text = await link.text_content()
        href = await link.get_attribute("href")
        records.append(LinkRecord(text=normalize_link_text(text), href=href))
    return records


def write_link_inventory(path: Path, records: List[LinkRecord]) -> Path:
    """Write ``records`` as a JSON array, replacing any previous file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)
    path.write_text(payload, encoding="utf-8")
    logger.info("Links data stored in %s (%d links)", path, len(records))
    return path
