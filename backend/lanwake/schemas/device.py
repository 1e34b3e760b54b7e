"""Device list schemas — the JSON shape shared by the API and the devices file."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Device(BaseModel):
    """A wakeable device, identified by its MAC address as submitted."""
    model_config = ConfigDict(populate_by_name=True)

    mac_address: str = Field("", alias="macAddress")


class DeviceList(BaseModel):
    """All known devices."""
    devices: list[Device] = []

    @field_validator("devices", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value
