"""Decoding of raw EXIF GPS tags into decimal-degree coordinates.

GPS positions are stored as three rationals (degrees, minutes, seconds),
each a pair of 32-bit integers, next to a one-character hemisphere marker.
Arithmetic is done in ``Decimal`` and converted to float once at the end,
so whole-degree values come out exact.
"""

import logging
import struct
from decimal import Decimal, InvalidOperation

from photoaudit.errors import GPSDecodeError
from photoaudit.models import (
    GPS_ALTITUDE,
    GPS_ALTITUDE_REF,
    GPS_LATITUDE,
    GPS_LATITUDE_REF,
    GPS_LONGITUDE,
    GPS_LONGITUDE_REF,
    GeoCoordinate,
    GPSRawTagBlock,
)

logger = logging.getLogger(__name__)

RATIONAL_SIZE = 8
MINUTES_PER_DEGREE = Decimal(60)
SECONDS_PER_DEGREE = Decimal(3600)

LATITUDE_HEMISPHERES = {"N": 1, "S": -1}
LONGITUDE_HEMISPHERES = {"E": 1, "W": -1}


def read_rational(payload: bytes, offset: int, byte_order: str = "<") -> Decimal:
    """Read one numerator/denominator pair at ``offset`` as a Decimal.

    Raises:
        GPSDecodeError: If the payload is too short or the denominator is zero
    """
    try:
        numerator, denominator = struct.unpack_from(f"{byte_order}ii", payload, offset)
    except struct.error as e:
        raise GPSDecodeError(f"rational at offset {offset} truncated: {e}") from e
    if denominator == 0:
        raise GPSDecodeError(f"rational at offset {offset} has zero denominator")
    try:
        return Decimal(numerator) / Decimal(denominator)
    except InvalidOperation as e:
        raise GPSDecodeError(f"rational at offset {offset} is invalid: {e}") from e


def dms_to_decimal(payload: bytes, byte_order: str = "<") -> Decimal:
    """Convert a degrees/minutes/seconds rational triple to decimal degrees.

    The triple is a magnitude; the hemisphere marker carries the sign.

    Raises:
        GPSDecodeError: If a component is truncated, has a zero denominator,
            or is negative
    """
    degrees = read_rational(payload, 0, byte_order)
    minutes = read_rational(payload, RATIONAL_SIZE, byte_order)
    seconds = read_rational(payload, 2 * RATIONAL_SIZE, byte_order)
    if min(degrees, minutes, seconds) < 0:
        raise GPSDecodeError(f"negative DMS component in {degrees}, {minutes}, {seconds}")
    return degrees + minutes / MINUTES_PER_DEGREE + seconds / SECONDS_PER_DEGREE


def read_hemisphere(payload: bytes | None, allowed: dict[str, int], label: str) -> int:
    """Return the sign (+1/-1) for an ASCII hemisphere marker."""
    if not payload:
        raise GPSDecodeError(f"{label} hemisphere marker missing")
    marker = chr(payload[0]).upper()
    if marker not in allowed:
        raise GPSDecodeError(f"{label} hemisphere marker {marker!r} not one of {sorted(allowed)}")
    return allowed[marker]


def _decode_axis(
    block: GPSRawTagBlock, ref_tag: int, value_tag: int, allowed: dict[str, int], label: str
) -> Decimal:
    sign = read_hemisphere(block.payload(ref_tag), allowed, label)
    payload = block.payload(value_tag)
    if payload is None:
        raise GPSDecodeError(f"{label} value missing")
    return sign * dms_to_decimal(payload, block.byte_order)


def decode_altitude(block: GPSRawTagBlock) -> tuple[float, bool]:
    """Decode altitude in meters and the above-sea-level flag.

    Altitude is optional: a missing or malformed reference or value yields
    ``(0.0, True)``.
    """
    ref_payload = block.payload(GPS_ALTITUDE_REF)
    value_payload = block.payload(GPS_ALTITUDE)
    if not ref_payload or value_payload is None:
        return 0.0, True
    try:
        altitude = read_rational(value_payload, 0, block.byte_order)
    except GPSDecodeError as e:
        logger.debug("Ignoring undecodable altitude: %s", e)
        return 0.0, True
    return float(altitude), ref_payload[0] == 0


def decode_gps(block: GPSRawTagBlock) -> GeoCoordinate:
    """Decode a GPS tag block into a GeoCoordinate.

    The latitude hemisphere marker is the presence test: without it the
    image has no GPS data and the zero-valued coordinate is returned.

    Args:
        block: Raw GPS tag payloads

    Returns:
        GeoCoordinate with signed decimal degrees (south and west negative)

    Raises:
        GPSDecodeError: If GPS data is present but latitude or longitude
            cannot be decoded
    """
    if block.payload(GPS_LATITUDE_REF) is None:
        return GeoCoordinate()

    latitude = _decode_axis(block, GPS_LATITUDE_REF, GPS_LATITUDE, LATITUDE_HEMISPHERES, "latitude")
    longitude = _decode_axis(
        block, GPS_LONGITUDE_REF, GPS_LONGITUDE, LONGITUDE_HEMISPHERES, "longitude"
    )
    altitude, above_sea_level = decode_altitude(block)

    return GeoCoordinate(
        latitude=float(latitude),
        longitude=float(longitude),
        altitude=altitude,
        is_above_sea_level=above_sea_level,
        has_gps=True,
    )


def decode_gps_safe(block: GPSRawTagBlock, path: str = "") -> GeoCoordinate:
    """Decode GPS tags, turning a GPSDecodeError into the fallback coordinate.

    The fallback keeps ``has_gps`` set, since the image is known to be
    geotagged, and marks ``decode_failed`` with zeroed fields.
    """
    try:
        return decode_gps(block)
    except GPSDecodeError as e:
        logger.warning("GPS data present but undecodable in %s: %s", path or "<unknown>", e)
        return GeoCoordinate(has_gps=True, decode_failed=True)
