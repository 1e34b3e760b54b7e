"""Device list with JSON file persistence and exclusive access."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from pydantic import ValidationError

from lanwake.config import settings
from lanwake.exceptions import DeviceStoreError
from lanwake.schemas.device import Device, DeviceList

logger = logging.getLogger(__name__)


class DeviceStore:
    """Known devices, persisted as {"devices": [{"macAddress": ...}]}."""

    def __init__(self, path: str | None = None):
        self._path = Path(path or settings.devices_file)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get_all(self) -> DeviceList:
        """Return every stored device. A missing or empty file is an empty list."""
        with self._lock:
            return self._load()

    def add(self, device: Device) -> bool:
        """Store device unless one with the same MAC text exists. Returns True if added."""
        with self._lock:
            data = self._load()
            if any(d.mac_address == device.mac_address for d in data.devices):
                return False
            data.devices.append(device)
            self._save(data)
        logger.info("Device added: %s", device.mac_address)
        return True

    def remove(self, device: Device) -> bool:
        """Drop every device with the same MAC text. Returns True if any was removed."""
        with self._lock:
            data = self._load()
            keep = [d for d in data.devices if d.mac_address != device.mac_address]
            removed = len(keep) != len(data.devices)
            if removed:
                data.devices = keep
                self._save(data)
                logger.info("Device removed: %s", device.mac_address)
        return removed

    def _load(self) -> DeviceList:
        """Read the devices file, creating it if absent."""
        try:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
                logger.info("Created empty devices file at %s", self._path)
                return DeviceList()
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DeviceStoreError(f"Could not read {self._path}: {e}") from e

        if not raw.strip():
            return DeviceList()
        try:
            return DeviceList.model_validate_json(raw)
        except ValidationError as e:
            raise DeviceStoreError(f"Could not decode {self._path}: {e}") from e

    def _save(self, data: DeviceList) -> None:
        """Persist devices to disk."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(data.model_dump(by_alias=True), indent=2) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise DeviceStoreError(f"Could not write {self._path}: {e}") from e
