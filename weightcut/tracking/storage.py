# -*- coding: utf-8 -*-
"""Tracking: JSON file storage for the state snapshot."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..config import settings
from ..errors import ConfigurationError
from .models import SNAPSHOT_VERSION, StateSnapshot

logger = logging.getLogger(__name__)


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class JsonSnapshotStore:
    """Loads and saves one snapshot as a JSON file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else settings.snapshot_path

    def load(self) -> StateSnapshot:
        if not self.path.exists():
            logger.info("No snapshot at %s, starting fresh", self.path)
            return StateSnapshot()
        raw = self.path.read_text(encoding="utf-8")
        try:
            snapshot = StateSnapshot.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigurationError(f"Snapshot at {self.path} is invalid: {exc}") from exc
        if snapshot.version != SNAPSHOT_VERSION:
            raise ConfigurationError(
                f"Snapshot version {snapshot.version} is not supported (expected {SNAPSHOT_VERSION})"
            )
        return snapshot

    def save(self, snapshot: StateSnapshot) -> Path:
        _ensure_dir(self.path.parent)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp, self.path)
        return self.path
