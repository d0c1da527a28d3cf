"""GPS tag and coordinate models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# GPS IFD tag ids
GPS_LATITUDE_REF = 1
GPS_LATITUDE = 2
GPS_LONGITUDE_REF = 3
GPS_LONGITUDE = 4
GPS_ALTITUDE_REF = 5
GPS_ALTITUDE = 6


class GPSRawTagBlock(BaseModel):
    """Undecoded GPS tag payloads read from an image's EXIF container."""

    model_config = ConfigDict(frozen=True)

    byte_order: Literal["<", ">"] = "<"
    tags: dict[int, bytes] = Field(default_factory=dict)

    def payload(self, tag: int) -> bytes | None:
        """Return the raw payload for a tag, or None if the tag is absent."""
        return self.tags.get(tag)

    @property
    def is_empty(self) -> bool:
        return not self.tags


class GeoCoordinate(BaseModel):
    """Decoded GPS position.

    When ``has_gps`` is False every numeric field holds its default and
    must not be read as a location. ``decode_failed`` marks an image that
    carries GPS tags which could not be decoded.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0
    is_above_sea_level: bool = True
    has_gps: bool = False
    decode_failed: bool = False

    @property
    def is_mappable(self) -> bool:
        """Check if the coordinate can be placed on a map."""
        return self.has_gps and not self.decode_failed

    @property
    def sea_level_flag(self) -> str:
        """Return the altitude reference as reported: 1 above, 0 below."""
        return "1" if self.is_above_sea_level else "0"
