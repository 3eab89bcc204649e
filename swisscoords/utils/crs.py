"""Coordinate Reference System (CRS) constants used throughout swisscoords.

This module defines the CRS objects and the Swiss extents used by the conversions:
- LATLON_CRS: WGS84 geographic coordinates (EPSG:4326)
- LV03_CRS: Swiss CH1903 / LV03 projected coordinates (EPSG:21781)
- LV95_CRS: Swiss CH1903+ / LV95 projected coordinates (EPSG:2056)
"""

from pyproj import CRS

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# Standard GPS coordinates in decimal degrees
LATLON_CRS = CRS(4326)

# Swiss CH1903 / LV03 grid (EPSG:21781)
# Coordinates are in meters (easting "y", northing "x"), origin Bern at (600000, 200000)
LV03_CRS = CRS(21781)

# Swiss CH1903+ / LV95 grid (EPSG:2056)
# Same projection as LV03 with the origin shifted to (2600000, 1200000)
LV95_CRS = CRS(2056)

# Extent of Switzerland as (minx, miny, maxx, maxy) in each CRS;
# the approximation formulas are only meaningful inside these bounds
LATLON_BOUNDS = (5.9, 45.5, 10.6, 48.0)
LV03_BOUNDS = (480000.0, 60000.0, 850000.0, 300000.0)
