"""Approximate transformations between WGS84 and the Swiss CH1903 / LV03 grid.

These are the closed-form polynomial formulas published by swisstopo. They are
accurate to roughly 1-2 meters inside Switzerland and should not be used far
outside of it.

Every function works on plain floats as well as numpy arrays or pandas Series,
in which case the formulas are applied element-wise.

Naming follows the Swiss convention: ``y`` is the easting (~600000 m) and
``x`` is the northing (~200000 m).
"""

from typing import Tuple

import numpy as np

# LV95 false origin offsets relative to LV03
LV95_EAST_OFFSET = 2_000_000
LV95_NORTH_OFFSET = 1_000_000


def decimal_degrees_to_dms(angle: float) -> Tuple[float, float, float]:
    """
    Split a decimal-degree angle into degrees, minutes and seconds.

    Degrees and minutes are truncated toward zero (not floored), so for a
    negative angle all three parts carry the sign of the angle.

    Args:
        angle: The angle in decimal degrees

    Returns:
        A tuple of (degrees, minutes, seconds)

    Examples:
        >>> deg, minutes, sec = decimal_degrees_to_dms(-1.5)
        >>> print(deg, minutes, sec)
        -1.0 -30.0 0.0
    """
    deg = np.trunc(angle)
    minutes = np.trunc((angle - deg) * 60)
    sec = (((angle - deg) * 60) - minutes) * 60

    return deg, minutes, sec


def decimal_degrees_to_sexagesimal_seconds(angle: float) -> float:
    """
    Convert a decimal-degree angle to total sexagesimal seconds.

    Args:
        angle: The angle in decimal degrees

    Returns:
        The angle as a total count of arc-seconds

    Examples:
        >>> print(decimal_degrees_to_sexagesimal_seconds(1.5))
        5400.0
    """
    deg, minutes, sec = decimal_degrees_to_dms(angle)

    return sec + minutes * 60 + deg * 3600


def _wgs_aux(lat: float, long: float) -> Tuple[float, float]:
    # auxiliary values relative to Bern, in units of 10000"
    lat_sex = decimal_degrees_to_sexagesimal_seconds(lat)
    long_sex = decimal_degrees_to_sexagesimal_seconds(long)

    lat_aux = (lat_sex - 169028.66) / 10000
    long_aux = (long_sex - 26782.5) / 10000

    return lat_aux, long_aux


def _ch_aux(y: float, x: float) -> Tuple[float, float]:
    # auxiliary values relative to Bern, in units of 1000 km
    y_aux = (y - 600000) / 1000000
    x_aux = (x - 200000) / 1000000

    return y_aux, x_aux


def wgs_to_ch_y(lat: float, long: float) -> float:
    """
    Convert a WGS84 latitude/longitude to the CH1903 y (easting) coordinate.

    Args:
        lat: The latitude in decimal degrees
        long: The longitude in decimal degrees

    Returns:
        The CH1903 easting in meters
    """
    lat_aux, long_aux = _wgs_aux(lat, long)

    y = (
        600072.37
        + 211455.93 * long_aux
        - 10938.51 * long_aux * lat_aux
        - 0.36 * long_aux * lat_aux**2
        - 44.54 * long_aux**3
    )

    return y


def wgs_to_ch_x(lat: float, long: float) -> float:
    """
    Convert a WGS84 latitude/longitude to the CH1903 x (northing) coordinate.

    Args:
        lat: The latitude in decimal degrees
        long: The longitude in decimal degrees

    Returns:
        The CH1903 northing in meters
    """
    lat_aux, long_aux = _wgs_aux(lat, long)

    x = (
        200147.07
        + 308807.95 * lat_aux
        + 3745.25 * long_aux**2
        + 76.63 * lat_aux**2
        - 194.56 * long_aux**2 * lat_aux
        + 119.79 * lat_aux**3
    )

    return x


def wgs_to_ch_h(lat: float, long: float, h: float) -> float:
    """Convert a WGS84 ellipsoidal height to a CH1903 height (meters)."""
    lat_aux, long_aux = _wgs_aux(lat, long)

    return h - 49.55 + 2.73 * long_aux + 6.94 * lat_aux


def ch_to_wgs_lat(y: float, x: float) -> float:
    """
    Convert a CH1903 y/x pair to a WGS84 latitude.

    Args:
        y: The CH1903 easting in meters
        x: The CH1903 northing in meters

    Returns:
        The latitude in decimal degrees

    Examples:
        >>> # Rigi
        >>> print(round(ch_to_wgs_lat(679520, 212273), 6))
        47.056709
    """
    y_aux, x_aux = _ch_aux(y, x)

    lat = (
        16.9023892
        + 3.238272 * x_aux
        - 0.270978 * y_aux**2
        - 0.002528 * x_aux**2
        - 0.0447 * y_aux**2 * x_aux
        - 0.0140 * x_aux**3
    )

    # unit 10000" to 1" and seconds to decimal degrees
    lat = lat * 100 / 36

    return lat


def ch_to_wgs_long(y: float, x: float) -> float:
    """
    Convert a CH1903 y/x pair to a WGS84 longitude.

    Args:
        y: The CH1903 easting in meters
        x: The CH1903 northing in meters

    Returns:
        The longitude in decimal degrees

    Examples:
        >>> # Rigi
        >>> print(round(ch_to_wgs_long(679520, 212273), 6))
        8.485306
    """
    y_aux, x_aux = _ch_aux(y, x)

    long = (
        2.6779094
        + 4.728982 * y_aux
        + 0.791484 * y_aux * x_aux
        + 0.1306 * y_aux * x_aux**2
        - 0.0436 * y_aux**3
    )

    # unit 10000" to 1" and seconds to decimal degrees
    long = long * 100 / 36

    return long


def ch_to_wgs_h(y: float, x: float, h: float) -> float:
    """Convert a CH1903 height to a WGS84 ellipsoidal height (meters)."""
    y_aux, x_aux = _ch_aux(y, x)

    return h + 49.55 - 12.60 * y_aux - 22.64 * x_aux


def wgs_to_ch(lat: float, long: float) -> Tuple[float, float]:
    """
    Convert a WGS84 latitude/longitude to a CH1903 coordinate pair.

    Returns:
        A tuple of (y, x) in meters
    """
    return wgs_to_ch_y(lat, long), wgs_to_ch_x(lat, long)


def ch_to_wgs(y: float, x: float) -> Tuple[float, float]:
    """
    Convert a CH1903 coordinate pair to WGS84.

    Returns:
        A tuple of (latitude, longitude) in decimal degrees
    """
    return ch_to_wgs_lat(y, x), ch_to_wgs_long(y, x)


def lv95_to_lv03(east: float, north: float) -> Tuple[float, float]:
    """
    Shift LV95 (CH1903+) grid values onto the LV03 origin.

    The approximation formulas only know LV03, whose origin in Bern is
    (600000, 200000); LV95 places it at (2600000, 1200000).

    Returns:
        A tuple of (y, x) in LV03 meters
    """
    return east - LV95_EAST_OFFSET, north - LV95_NORTH_OFFSET


def lv03_to_lv95(y: float, x: float) -> Tuple[float, float]:
    """Shift LV03 grid values onto the LV95 origin, returning (east, north)."""
    return y + LV95_EAST_OFFSET, x + LV95_NORTH_OFFSET
