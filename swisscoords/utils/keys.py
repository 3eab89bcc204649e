"""Standard column names used when converting tabular data.

These constants define the default DataFrame columns read and written by Trace.
"""

# WGS84 latitude in decimal degrees
DEFAULT_LAT_COLUMN = "latitude"

# WGS84 longitude in decimal degrees
DEFAULT_LON_COLUMN = "longitude"

# Swiss grid easting in meters
DEFAULT_Y_COLUMN = "y"

# Swiss grid northing in meters
DEFAULT_X_COLUMN = "x"
