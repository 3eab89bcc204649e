from typing import Tuple

from pyproj import Transformer

from swisscoords.constructs.coordinate import Coordinate
from swisscoords.utils.crs import LATLON_CRS, LV03_CRS


def lv03_to_latlon(y: float, x: float) -> Tuple[float, float]:
    """
    Transform Swiss LV03 (EPSG:21781) coordinates to WGS84 latitude/longitude with pyproj.

    This uses the datum transformation from the PROJ database and serves as a
    reference for the swisstopo approximation in swisscoords.converter.

    Args:
        y: The easting in meters
        x: The northing in meters

    Returns:
        A tuple of (latitude, longitude) in decimal degrees (WGS84/EPSG:4326)

    Examples:
        >>> # Rigi
        >>> lat, lon = lv03_to_latlon(679520, 212273)
        >>> print(f"Lat: {lat:.4f}, Lon: {lon:.4f}")
        Lat: 47.0567, Lon: 8.4853
    """
    transformer = Transformer.from_crs(LV03_CRS, LATLON_CRS, always_xy=True)
    lon, lat = transformer.transform(y, x)

    return lat, lon


def latlon_to_lv03(lat: float, lon: float) -> Tuple[float, float]:
    """
    Transform WGS84 latitude/longitude to Swiss LV03 (EPSG:21781) coordinates with pyproj.

    Args:
        lat: The latitude in decimal degrees
        lon: The longitude in decimal degrees

    Returns:
        A tuple of (y, x) in LV03 meters
    """
    transformer = Transformer.from_crs(LATLON_CRS, LV03_CRS, always_xy=True)
    y, x = transformer.transform(lon, lat)

    return y, x


def coord_to_coord_dist(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate the Euclidean distance between two coordinates.

    The distance is computed in the geometries' coordinate reference system, so for a
    distance in meters both coordinates should be on a projected grid such as LV03.

    Args:
        a: The first coordinate
        b: The second coordinate. Must be in the same CRS as coordinate a.

    Returns:
        The Euclidean distance in the units of the coordinates' CRS

    Raises:
        TypeError: If the two coordinates are in different CRS
    """
    if a.crs != b.crs:
        raise TypeError("cannot measure the distance between coordinates with different crs")

    dist = a.geom.distance(b.geom)

    return dist
