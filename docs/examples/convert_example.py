"""
# Conversion Example

An example of converting points between WGS84 and the Swiss LV03 grid
"""


def main():
    """
    The simplest way to use swisscoords is through the plain functions.
    Swiss grid values follow the Swiss naming: `y` is the easting and `x` is the northing.
    Let's convert the Rigi summit to latitude and longitude:
    """

    from swisscoords import ch_to_wgs_lat, ch_to_wgs_long

    lat = ch_to_wgs_lat(679520, 212273)
    lon = ch_to_wgs_long(679520, 212273)
    print(f"Rigi: {lat:.6f}, {lon:.6f}")

    """
    The formulas are an approximation with an accuracy of about 1-2 meters.
    We can compare them against the full datum transformation that pyproj does:
    """

    from swisscoords.utils.geo import lv03_to_latlon

    ref_lat, ref_lon = lv03_to_latlon(679520, 212273)
    print(f"difference: {abs(lat - ref_lat):.2e}, {abs(lon - ref_lon):.2e} degrees")

    """
    If we want to keep track of which CRS a point lives in, we can use a Coordinate instead:
    """

    from swisscoords.constructs.coordinate import Coordinate

    seebach = Coordinate.from_lv03(684592, 252857)
    print(seebach.to_wgs84())

    """
    Finally, whole tables can be converted at once with a Trace.
    The dataframe index is kept as the identifier of each point:
    """

    import pandas as pd

    from swisscoords.constructs.trace import Trace

    df = pd.DataFrame(
        {"latitude": [46.9511, 47.3769], "longitude": [7.4386, 8.5417]},
        index=["bern", "zurich"],
    )
    lv03 = Trace.from_dataframe(df).to_lv03()
    print(lv03.to_dataframe())


if __name__ == "__main__":
    main()
