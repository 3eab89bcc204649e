from unittest import TestCase

from swisscoords.constructs.coordinate import Coordinate
from swisscoords.converter import ch_to_wgs, wgs_to_ch
from swisscoords.utils.geo import coord_to_coord_dist, latlon_to_lv03, lv03_to_latlon


class TestGeo(TestCase):
    """The swisstopo approximation should stay within a few meters of pyproj"""

    def test_lv03_to_latlon_agrees_with_approximation(self):
        for y, x in [(679520, 212273), (684592, 252857), (600000, 200000)]:
            lat, lon = lv03_to_latlon(y, x)
            approx_lat, approx_lon = ch_to_wgs(y, x)

            self.assertAlmostEqual(lat, approx_lat, delta=1e-4)
            self.assertAlmostEqual(lon, approx_lon, delta=1e-4)

    def test_latlon_to_lv03_agrees_with_approximation(self):
        for lat, lon in [(46.9511, 7.4386), (47.3769, 8.5417), (46.0037, 8.9511)]:
            y, x = latlon_to_lv03(lat, lon)
            approx_y, approx_x = wgs_to_ch(lat, lon)

            self.assertAlmostEqual(y, approx_y, delta=10)
            self.assertAlmostEqual(x, approx_x, delta=10)

    def test_coord_to_coord_dist(self):
        rigi = Coordinate.from_lv03(679520, 212273)
        seebach = Coordinate.from_lv03(684592, 252857)

        self.assertAlmostEqual(coord_to_coord_dist(rigi, seebach), 40899.7, delta=0.1)

    def test_coord_to_coord_dist_different_crs(self):
        rigi = Coordinate.from_lv03(679520, 212273)

        with self.assertRaises(TypeError):
            coord_to_coord_dist(rigi, rigi.to_wgs84())
