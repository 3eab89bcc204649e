from __future__ import annotations

import logging
from functools import cached_property
from typing import List

import numpy as np
import pandas as pd
from geopandas import GeoDataFrame, points_from_xy
from pyproj import CRS

from swisscoords.constructs.coordinate import Coordinate
from swisscoords.converter import ch_to_wgs, wgs_to_ch
from swisscoords.utils.crs import LATLON_BOUNDS, LATLON_CRS, LV03_BOUNDS, LV03_CRS
from swisscoords.utils.exceptions import InvalidCoordinateException
from swisscoords.utils.keys import (
    DEFAULT_LAT_COLUMN,
    DEFAULT_LON_COLUMN,
    DEFAULT_X_COLUMN,
    DEFAULT_Y_COLUMN,
)

log = logging.getLogger(__name__)


def _count_outside(xs: np.ndarray, ys: np.ndarray, bounds) -> int:
    minx, miny, maxx, maxy = bounds
    inside = (xs >= minx) & (xs <= maxx) & (ys >= miny) & (ys <= maxy)
    return int((~inside).sum())


class Trace:
    """
    A collection of points to be converted between WGS84 and the Swiss LV03 grid in one go.

    A Trace wraps a GeoDataFrame of point geometries. Conversions are applied to whole
    columns at once with the same formulas used for a single Coordinate.

    The underlying GeoDataFrame must have unique indices - duplicate indices will raise
    an IndexError during initialization.

    Attributes:
        coords: A list of Coordinate objects representing each point
        crs: The coordinate reference system (CRS) of the trace
        index: The pandas Index from the underlying GeoDataFrame

    Examples:
        >>> import pandas as pd
        >>> from swisscoords.constructs.trace import Trace
        >>>
        >>> df = pd.DataFrame({
        ...     'latitude': [47.056709, 47.4167],
        ...     'longitude': [8.485306, 8.5469]
        ... })
        >>> trace = Trace.from_dataframe(df)
        >>> lv03 = trace.to_lv03()
        >>> lv03.to_dataframe().columns.to_list()
        ['y', 'x']
    """

    _frame: GeoDataFrame

    def __init__(self, frame: GeoDataFrame):
        if frame.index.has_duplicates:
            duplicates = frame.index[frame.index.duplicated()].values
            raise IndexError(
                f"Trace cannot have duplicates in the index but found {duplicates}"
            )
        self._frame = frame

    def __getitem__(self, i) -> Trace:
        if isinstance(i, int):
            i = [i]
        new_frame = self._frame.iloc[i]
        return Trace(new_frame)

    def __add__(self, other: Trace) -> Trace:
        if self.crs != other.crs:
            raise TypeError("cannot add two traces together with different crs")
        new_frame = pd.concat([self._frame, other._frame])
        return Trace(new_frame)

    def __len__(self):
        """Number of points."""
        return len(self._frame)

    def __str__(self):
        output_lines = [
            "swisscoords Trace object",
            f"crs: {self.crs.to_authority() if self.crs else None}",
            f"frame: {self._frame}",
        ]
        return "\n".join(output_lines)

    def __repr__(self):
        return self.__str__()

    @property
    def index(self) -> pd.Index:
        """Get index to underlying GeoDataFrame."""
        return self._frame.index

    @cached_property
    def coords(self) -> List[Coordinate]:
        """
        Get all points in the trace as Coordinate objects.

        The index values are used as coordinate IDs. The result is cached.
        """
        coords_list = [
            Coordinate(i, g, self.crs)
            for i, g in zip(self._frame.index, self._frame.geometry)
        ]
        return coords_list

    @property
    def crs(self) -> CRS:
        """Get Coordinate Reference System(CRS) to underlying GeoDataFrame."""
        return self._frame.crs

    @classmethod
    def from_geo_dataframe(cls, frame: GeoDataFrame) -> Trace:
        """
        Create a trace from a GeoPandas GeoDataFrame of Point geometries.

        Additional columns are discarded - only the geometry and index are retained.

        Args:
            frame: A GeoDataFrame with Point geometries. Must have a valid CRS and unique index values.

        Returns:
            A new Trace instance
        """
        # get rid of any extra info besides geometry and index
        frame = GeoDataFrame(geometry=frame.geometry, index=frame.index)
        return Trace(frame)

    @classmethod
    def from_dataframe(
        cls,
        dataframe: pd.DataFrame,
        lat_column: str = DEFAULT_LAT_COLUMN,
        lon_column: str = DEFAULT_LON_COLUMN,
    ) -> Trace:
        """
        Create a WGS84 trace from a pandas DataFrame with latitude/longitude columns.

        Args:
            dataframe: A pandas DataFrame containing WGS84 (EPSG:4326) coordinates in decimal degrees
            lat_column: The name of the column containing latitude values. Default is "latitude".
            lon_column: The name of the column containing longitude values. Default is "longitude".

        Returns:
            A new Trace instance in EPSG:4326
        """
        frame = GeoDataFrame(
            geometry=points_from_xy(dataframe[lon_column], dataframe[lat_column]),
            index=dataframe.index,
            crs=LATLON_CRS,
        )

        return Trace.from_geo_dataframe(frame)

    @classmethod
    def from_lv03_dataframe(
        cls,
        dataframe: pd.DataFrame,
        y_column: str = DEFAULT_Y_COLUMN,
        x_column: str = DEFAULT_X_COLUMN,
    ) -> Trace:
        """
        Create an LV03 trace from a pandas DataFrame with Swiss grid columns.

        Args:
            dataframe: A pandas DataFrame containing LV03 (EPSG:21781) values in meters
            y_column: The name of the column containing the easting. Default is "y".
            x_column: The name of the column containing the northing. Default is "x".

        Returns:
            A new Trace instance in EPSG:21781
        """
        frame = GeoDataFrame(
            geometry=points_from_xy(dataframe[y_column], dataframe[x_column]),
            index=dataframe.index,
            crs=LV03_CRS,
        )

        return Trace.from_geo_dataframe(frame)

    def _rebuild(self, xs: np.ndarray, ys: np.ndarray, crs: CRS) -> Trace:
        if not (np.isfinite(xs).all() and np.isfinite(ys).all()):
            bad = self.index[~(np.isfinite(xs) & np.isfinite(ys))].values
            raise InvalidCoordinateException(
                f"Conversion to {crs.to_authority()} produced non-finite values at {bad}"
            )

        frame = GeoDataFrame(
            geometry=points_from_xy(xs, ys),
            index=self._frame.index,
            crs=crs,
        )
        return Trace(frame)

    def to_lv03(self) -> Trace:
        """
        Convert a WGS84 trace to the Swiss LV03 grid with the swisstopo approximation.

        Returns:
            A new Trace in EPSG:21781, or this trace if it is already on that grid

        Raises:
            TypeError: If the trace is neither in WGS84 nor LV03
            InvalidCoordinateException: If any point converts to a non-finite value
        """
        if self.crs == LV03_CRS:
            return self
        elif self.crs != LATLON_CRS:
            raise TypeError(
                f"cannot convert trace in {self.crs} to LV03; use to_crs instead"
            )

        lon = self._frame.geometry.x.to_numpy()
        lat = self._frame.geometry.y.to_numpy()

        outside = _count_outside(lon, lat, LATLON_BOUNDS)
        if outside:
            log.warning(f"{outside} of {len(self)} points lie outside Switzerland")

        log.debug(f"converting {len(self)} points to LV03")
        y, x = wgs_to_ch(lat, lon)

        return self._rebuild(y, x, LV03_CRS)

    def to_wgs84(self) -> Trace:
        """
        Convert an LV03 trace to WGS84 with the swisstopo approximation.

        Returns:
            A new Trace in EPSG:4326, or this trace if it is already in WGS84

        Raises:
            TypeError: If the trace is neither in WGS84 nor LV03
            InvalidCoordinateException: If any point converts to a non-finite value
        """
        if self.crs == LATLON_CRS:
            return self
        elif self.crs != LV03_CRS:
            raise TypeError(
                f"cannot convert trace in {self.crs} to WGS84; use to_crs instead"
            )

        y = self._frame.geometry.x.to_numpy()
        x = self._frame.geometry.y.to_numpy()

        outside = _count_outside(y, x, LV03_BOUNDS)
        if outside:
            log.warning(f"{outside} of {len(self)} points lie outside Switzerland")

        log.debug(f"converting {len(self)} points to WGS84")
        lat, lon = ch_to_wgs(y, x)

        return self._rebuild(lon, lat, LATLON_CRS)

    def to_crs(self, new_crs: CRS) -> Trace:
        """
        Reproject the trace to a different CRS with geopandas/pyproj.

        Args:
            new_crs: The target CRS. Can be a pyproj.CRS object, EPSG code string
                (e.g., 'EPSG:2056'), or any format accepted by pyproj.CRS()

        Returns:
            A new Trace with all points transformed to the target CRS
        """
        new_frame = self._frame.to_crs(new_crs)
        return Trace(new_frame)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export the trace as a plain pandas DataFrame.

        WGS84 traces get "latitude"/"longitude" columns, LV03 traces get "y"/"x" columns
        and any other CRS gets the raw geometry "x"/"y" values. The index is preserved.
        """
        xs = self._frame.geometry.x.to_numpy()
        ys = self._frame.geometry.y.to_numpy()

        if self.crs == LATLON_CRS:
            data = {DEFAULT_LAT_COLUMN: ys, DEFAULT_LON_COLUMN: xs}
        elif self.crs == LV03_CRS:
            data = {DEFAULT_Y_COLUMN: xs, DEFAULT_X_COLUMN: ys}
        else:
            data = {"x": xs, "y": ys}

        return pd.DataFrame(data, index=self._frame.index)
