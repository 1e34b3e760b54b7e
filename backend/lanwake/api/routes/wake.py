"""Wake routes — list, wake+remember, and forget devices."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from lanwake.config import settings
from lanwake.exceptions import DeviceStoreError, MalformedAddressError, WakeError
from lanwake.schemas.device import Device, DeviceList
from lanwake.services import get_device_store
from lanwake.services.device_store import DeviceStore
from lanwake.utils.magic_packet import parse_mac
from lanwake.utils.wol import parse_source_ip, wake

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/wake", response_model=DeviceList)
async def list_devices(store: DeviceStore = Depends(get_device_store)):
    """List all remembered devices."""
    try:
        return store.get_all()
    except DeviceStoreError as e:
        logger.error("Failed to read devices: %s", e)
        raise HTTPException(500, "Could not unmarshal JSON")


@router.post("/wake", status_code=204)
async def wake_device(body: Device, store: DeviceStore = Depends(get_device_store)):
    """Send a magic packet to the device, then remember it."""
    try:
        hw_addr = parse_mac(body.mac_address)
    except MalformedAddressError:
        raise HTTPException(400, f"Invalid MAC address: {body.mac_address}")

    source = parse_source_ip(settings.source_ip) if settings.source_ip else None
    try:
        await asyncio.to_thread(wake, hw_addr, source)
    except (WakeError, OSError) as e:
        logger.warning("WoL failed for %s: %s", body.mac_address, e)
        raise HTTPException(400, f"Failed to wake device with address {body.mac_address}")
    logger.info("WoL packet sent to %s", body.mac_address)

    try:
        store.add(body)
    except DeviceStoreError as e:
        logger.error("Failed to store device %s: %s", body.mac_address, e)
        raise HTTPException(500, "Could not unmarshal JSON")
    return Response(status_code=204)


@router.delete("/wake", status_code=204)
async def forget_device(body: Device, store: DeviceStore = Depends(get_device_store)):
    """Remove the device from the list."""
    try:
        store.remove(body)
    except DeviceStoreError as e:
        logger.error("Failed to remove device %s: %s", body.mac_address, e)
        raise HTTPException(500, "Could not unmarshal JSON")
    return Response(status_code=204)
