"""Convert between WGS84 latitude/longitude and the Swiss CH1903 / LV03 grid."""

from swisscoords.converter import (
    ch_to_wgs,
    ch_to_wgs_h,
    ch_to_wgs_lat,
    ch_to_wgs_long,
    decimal_degrees_to_dms,
    decimal_degrees_to_sexagesimal_seconds,
    lv03_to_lv95,
    lv95_to_lv03,
    wgs_to_ch,
    wgs_to_ch_h,
    wgs_to_ch_x,
    wgs_to_ch_y,
)

__version__ = "1.0.0"

__all__ = [
    "ch_to_wgs",
    "ch_to_wgs_h",
    "ch_to_wgs_lat",
    "ch_to_wgs_long",
    "decimal_degrees_to_dms",
    "decimal_degrees_to_sexagesimal_seconds",
    "lv03_to_lv95",
    "lv95_to_lv03",
    "wgs_to_ch",
    "wgs_to_ch_h",
    "wgs_to_ch_x",
    "wgs_to_ch_y",
]
