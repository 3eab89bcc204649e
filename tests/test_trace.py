from unittest import TestCase
from unittest.mock import patch

import numpy as np
import pandas as pd
from geopandas import GeoDataFrame
from shapely.geometry import Point

from swisscoords.constructs.trace import Trace
from swisscoords.converter import ch_to_wgs_lat, ch_to_wgs_long, wgs_to_ch_x, wgs_to_ch_y
from swisscoords.utils.crs import LATLON_CRS, LV03_CRS
from swisscoords.utils.exceptions import InvalidCoordinateException


class TestTrace(TestCase):
    def setUp(self):
        self.wgs_df = pd.DataFrame(
            {
                "latitude": [46.9511, 47.3769, 46.2044, 47.5596],
                "longitude": [7.4386, 8.5417, 6.1432, 7.5886],
            },
            index=["bern", "zurich", "geneva", "basel"],
        )
        self.lv03_df = pd.DataFrame(
            {"y": [679520, 684592], "x": [212273, 252857]},
            index=["rigi", "seebach"],
        )

    def test_from_dataframe(self):
        trace = Trace.from_dataframe(self.wgs_df)

        self.assertEqual(len(trace), 4)
        self.assertEqual(trace.crs, LATLON_CRS)
        self.assertEqual(trace.coords[1].coordinate_id, "zurich")
        self.assertEqual(trace.coords[1].y, 47.3769)

    def test_from_dataframe_custom_columns(self):
        df = self.wgs_df.rename(columns={"latitude": "lat", "longitude": "lon"})

        trace = Trace.from_dataframe(df, lat_column="lat", lon_column="lon")

        self.assertEqual(trace.coords[0].x, 7.4386)

    def test_to_lv03_matches_scalar_conversion(self):
        lv03 = Trace.from_dataframe(self.wgs_df).to_lv03()

        self.assertEqual(lv03.crs, LV03_CRS)
        for coord, (lat, lon) in zip(lv03.coords, self.wgs_df.itertuples(index=False)):
            self.assertAlmostEqual(coord.x, wgs_to_ch_y(lat, lon), delta=1e-6)
            self.assertAlmostEqual(coord.y, wgs_to_ch_x(lat, lon), delta=1e-6)

    def test_to_wgs84_matches_scalar_conversion(self):
        wgs = Trace.from_lv03_dataframe(self.lv03_df).to_wgs84()

        self.assertEqual(wgs.crs, LATLON_CRS)
        self.assertEqual(list(wgs.index), ["rigi", "seebach"])
        rigi = wgs.coords[0]
        self.assertAlmostEqual(rigi.y, ch_to_wgs_lat(679520, 212273), delta=1e-12)
        self.assertAlmostEqual(rigi.x, ch_to_wgs_long(679520, 212273), delta=1e-12)
        self.assertAlmostEqual(rigi.y, 47.056709, delta=1e-5)

    def test_round_trip(self):
        back = Trace.from_dataframe(self.wgs_df).to_lv03().to_wgs84().to_dataframe()

        np.testing.assert_allclose(back["latitude"], self.wgs_df["latitude"], atol=1e-4)
        np.testing.assert_allclose(
            back["longitude"], self.wgs_df["longitude"], atol=1e-4
        )

    def test_same_crs_returns_self(self):
        trace = Trace.from_lv03_dataframe(self.lv03_df)

        self.assertIs(trace.to_lv03(), trace)

    def test_to_dataframe_columns(self):
        wgs = Trace.from_dataframe(self.wgs_df)
        lv03 = wgs.to_lv03()

        self.assertEqual(wgs.to_dataframe().columns.to_list(), ["latitude", "longitude"])
        self.assertEqual(lv03.to_dataframe().columns.to_list(), ["y", "x"])
        pd.testing.assert_frame_equal(wgs.to_dataframe(), self.wgs_df)

    def test_duplicate_index_raises(self):
        df = self.wgs_df.reset_index(drop=True)
        df.index = [0, 1, 1, 2]

        with self.assertRaises(IndexError):
            Trace.from_dataframe(df)

    def test_add_and_slice(self):
        trace = Trace.from_dataframe(self.wgs_df)

        combined = trace[0] + trace[[2, 3]]

        self.assertEqual(list(combined.index), ["bern", "geneva", "basel"])

        with self.assertRaises(TypeError):
            trace + Trace.from_lv03_dataframe(self.lv03_df)

    def test_other_crs_is_rejected(self):
        trace = Trace.from_dataframe(self.wgs_df).to_crs("EPSG:3857")

        with self.assertRaises(TypeError):
            trace.to_lv03()

    def test_outside_switzerland_logs_warning(self):
        frame = GeoDataFrame(geometry=[Point(2.3522, 48.8566)], crs=LATLON_CRS)
        trace = Trace.from_geo_dataframe(frame)

        with self.assertLogs("swisscoords.constructs.trace", level="WARNING"):
            trace.to_lv03()

    def test_non_finite_result_raises(self):
        trace = Trace.from_dataframe(self.wgs_df)
        bad = (np.array([600000.0, np.nan, 500000.0, 610000.0]), np.zeros(4))

        with patch("swisscoords.constructs.trace.wgs_to_ch", return_value=bad):
            with self.assertRaises(InvalidCoordinateException) as ctx:
                trace.to_lv03()

        self.assertIn("zurich", str(ctx.exception))
