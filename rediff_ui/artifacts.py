"""Labelled screenshots collected while a scenario runs."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from playwright.async_api import Page

logger = logging.getLogger(__name__)

_EXTENSIONS = {"image/png": "png", "image/jpeg": "jpg"}


@dataclass
class Artifact:
    label: str
    body: bytes
    content_type: str = "image/png"


def _slug(label: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", label.lower()).strip("-") or "artifact"


@dataclass
class ArtifactRecorder:
    """Holds the artifacts of one scenario in capture order.

    Page objects attach to it; the test harness decides what to do with them
    afterwards (see ``save_to``).
    """

    artifacts: List[Artifact] = field(default_factory=list)

    def attach(self, label: str, body: bytes, content_type: str = "image/png") -> Artifact:
        artifact = Artifact(label=label, body=body, content_type=content_type)
        self.artifacts.append(artifact)
        logger.info("Attached artifact '%s' (%d bytes)", label, len(body))
        return artifact

    async def capture(self, page: Page, label: str, full_page: bool = False) -> Artifact:
        """Screenshot ``page`` and attach it under ``label``."""
        body = await page.screenshot(full_page=full_page)
        return self.attach(label, body)

    def labels(self) -> List[str]:
        return [artifact.label for artifact in self.artifacts]

    def save_to(self, directory: Path, prefix: str = "") -> List[Path]:
        """Write every artifact to ``directory`` as ``[prefix-]NN-label.ext``."""
        directory.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for step, artifact in enumerate(self.artifacts, start=1):
            extension = _EXTENSIONS.get(artifact.content_type, "bin")
            stem = f"{step:02d}-{_slug(artifact.label)}"
            if prefix:
                stem = f"{prefix}-{stem}"
            path = directory / f"{stem}.{extension}"
            path.write_bytes(artifact.body)
            written.append(path)
        return written
