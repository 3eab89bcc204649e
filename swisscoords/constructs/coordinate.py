from __future__ import annotations

import logging
import math
from typing import Any, NamedTuple

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError
from shapely.geometry import Point

from swisscoords.converter import ch_to_wgs, lv95_to_lv03, wgs_to_ch
from swisscoords.utils.crs import LATLON_BOUNDS, LATLON_CRS, LV03_BOUNDS, LV03_CRS
from swisscoords.utils.exceptions import InvalidCoordinateException

log = logging.getLogger(__name__)


class Coordinate(NamedTuple):
    """
    Represents a single point together with its coordinate reference system (CRS).

    A Coordinate is immutable. In WGS84 (EPSG:4326) the geometry holds (longitude, latitude);
    on the Swiss LV03 grid (EPSG:21781) it holds (y, x), i.e. (easting, northing).

    Attributes:
        coordinate_id: The unique identifier for this coordinate (can be any hashable type)
        geom: The Shapely Point geometry representing the spatial location
        crs: The pyproj CRS (Coordinate Reference System) defining the coordinate space
        x: The x value of the geometry (longitude, or the Swiss easting "y")
        y: The y value of the geometry (latitude, or the Swiss northing "x")

    Examples:
        >>> from swisscoords.constructs.coordinate import Coordinate
        >>> rigi = Coordinate.from_lv03(679520, 212273)
        >>> wgs = rigi.to_wgs84()
        >>> print(round(wgs.y, 6), round(wgs.x, 6))
        47.056709 8.485306
    """

    coordinate_id: Any
    geom: Point
    crs: CRS

    def __repr__(self):
        crs_a = self.crs.to_authority() if self.crs else "Null"
        return f"Coordinate(coordinate_id={self.coordinate_id}, x={self.x}, y={self.y}, crs={crs_a})"

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> Coordinate:
        """
        Create a coordinate from latitude and longitude values in WGS84 (EPSG:4326).

        Args:
            lat: The latitude in decimal degrees
            lon: The longitude in decimal degrees

        Returns:
            A new Coordinate instance in EPSG:4326 CRS with no coordinate_id
        """
        return cls(coordinate_id=None, geom=Point(lon, lat), crs=LATLON_CRS)

    @classmethod
    def from_lv03(cls, y: float, x: float) -> Coordinate:
        """
        Create a coordinate from Swiss CH1903 / LV03 grid values (EPSG:21781).

        Args:
            y: The easting in meters (~600000 at Bern)
            x: The northing in meters (~200000 at Bern)

        Returns:
            A new Coordinate instance in EPSG:21781 CRS with no coordinate_id
        """
        return cls(coordinate_id=None, geom=Point(y, x), crs=LV03_CRS)

    @classmethod
    def from_lv95(cls, east: float, north: float) -> Coordinate:
        """
        Create an LV03 coordinate from Swiss CH1903+ / LV95 grid values.

        The LV95 origin offsets are removed so the result lives on the LV03 grid.

        Args:
            east: The LV95 easting in meters (~2600000 at Bern)
            north: The LV95 northing in meters (~1200000 at Bern)
        """
        y, x = lv95_to_lv03(east, north)
        return cls.from_lv03(y, x)

    @property
    def x(self) -> float:
        return self.geom.x

    @property
    def y(self) -> float:
        return self.geom.y

    @property
    def in_switzerland(self) -> bool:
        """
        Whether this coordinate lies inside the extent of Switzerland.

        Only WGS84 and LV03 coordinates are supported; any other CRS returns False.
        """
        if self.crs == LATLON_CRS:
            bounds = LATLON_BOUNDS
        elif self.crs == LV03_CRS:
            bounds = LV03_BOUNDS
        else:
            return False

        minx, miny, maxx, maxy = bounds
        return minx <= self.x <= maxx and miny <= self.y <= maxy

    def to_lv03(self) -> Coordinate:
        """
        Convert this WGS84 coordinate to the Swiss LV03 grid with the swisstopo approximation.

        Returns:
            A new Coordinate in EPSG:21781, or this coordinate if it is already on that grid.
            The coordinate_id is preserved.

        Raises:
            TypeError: If the coordinate is neither in WGS84 nor LV03
            InvalidCoordinateException: If the conversion yields a non-finite value
        """
        if self.crs == LV03_CRS:
            return self
        elif self.crs != LATLON_CRS:
            raise TypeError(
                f"cannot convert coordinate in {self.crs} to LV03; use to_crs instead"
            )

        if not self.in_switzerland:
            log.warning(f"{self} lies outside Switzerland; LV03 values will be inaccurate")

        new_y, new_x = wgs_to_ch(self.y, self.x)

        if not (math.isfinite(new_y) and math.isfinite(new_x)):
            raise InvalidCoordinateException(
                f"Unable to convert ({self.y}, {self.x}) -> LV03 ({new_y}, {new_x})"
            )

        return Coordinate(
            coordinate_id=self.coordinate_id,
            geom=Point(new_y, new_x),
            crs=LV03_CRS,
        )

    def to_wgs84(self) -> Coordinate:
        """
        Convert this LV03 coordinate to WGS84 with the swisstopo approximation.

        Returns:
            A new Coordinate in EPSG:4326, or this coordinate if it is already in WGS84.
            The coordinate_id is preserved.

        Raises:
            TypeError: If the coordinate is neither in WGS84 nor LV03
            InvalidCoordinateException: If the conversion yields a non-finite value
        """
        if self.crs == LATLON_CRS:
            return self
        elif self.crs != LV03_CRS:
            raise TypeError(
                f"cannot convert coordinate in {self.crs} to WGS84; use to_crs instead"
            )

        if not self.in_switzerland:
            log.warning(f"{self} lies outside Switzerland; WGS84 values will be inaccurate")

        lat, lon = ch_to_wgs(self.x, self.y)

        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidCoordinateException(
                f"Unable to convert LV03 ({self.x}, {self.y}) -> ({lat}, {lon})"
            )

        return Coordinate(
            coordinate_id=self.coordinate_id,
            geom=Point(lon, lat),
            crs=LATLON_CRS,
        )

    def to_crs(self, new_crs: Any) -> Coordinate:
        """
        Reproject this coordinate to a different CRS with pyproj.

        Unlike to_lv03 and to_wgs84 this uses the full datum transformation from the
        PROJ database rather than the swisstopo approximation.

        Args:
            new_crs: The target CRS. Can be a pyproj.CRS object, an EPSG code as a string
                (e.g., 'EPSG:2056'), an integer EPSG code, or any CRS format that pyproj.CRS() accepts

        Returns:
            A new Coordinate instance with transformed geometry in the target CRS.
            The coordinate_id is preserved from the original coordinate.

        Raises:
            ValueError: If the new_crs cannot be parsed into a valid CRS, or if the
                transformation results in infinite coordinate values
        """
        # convert the incoming crs to an pyproj.crs.CRS object; this could fail
        try:
            new_crs = CRS(new_crs)
        except ProjError as e:
            raise ValueError(
                f"Could not parse incoming `new_crs` parameter: {new_crs}"
            ) from e

        if new_crs == self.crs:
            return self

        transformer = Transformer.from_crs(self.crs, new_crs, always_xy=True)
        new_x, new_y = transformer.transform(self.geom.x, self.geom.y)

        if math.isinf(new_x) or math.isinf(new_y):
            raise ValueError(
                f"Unable to convert {self.crs} ({self.geom.x}, {self.geom.y}) -> {new_crs} ({new_x}, {new_y})"
            )

        return Coordinate(
            coordinate_id=self.coordinate_id,
            geom=Point(new_x, new_y),
            crs=new_crs,
        )
