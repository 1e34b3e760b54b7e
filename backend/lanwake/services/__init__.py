"""Business logic services — singleton registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lanwake.config import settings

if TYPE_CHECKING:
    from lanwake.services.device_store import DeviceStore

logger = logging.getLogger(__name__)

_device_store: DeviceStore | None = None


def init_services() -> None:
    """Create the service singletons."""
    global _device_store

    from lanwake.services.device_store import DeviceStore

    _device_store = DeviceStore(settings.devices_file)
    logger.info("Device store initialized at %s", _device_store.path)


def shutdown_services() -> None:
    global _device_store
    _device_store = None


def get_device_store() -> DeviceStore:
    if _device_store is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _device_store
