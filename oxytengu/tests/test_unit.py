#
# OxyTengu - dive gas oxygen exposure library.
#
# Copyright (C) 2013-2014 by Artur Wroblewski <wrobell@pld-linux.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
Distance units and depth conversion tests.
"""

from oxytengu.unit import DistanceUnit, depth_factor, to_ata, to_depth
from oxytengu.error import InvalidArgumentError

import unittest


class DepthFactorTestCase(unittest.TestCase):
    """
    Depth factor tests.
    """
    def test_meters(self):
        """
        Test depth factor for meters
        """
        self.assertEqual(10, depth_factor(DistanceUnit.METERS))
        self.assertEqual(10, depth_factor('meters'))


    def test_feet(self):
        """
        Test depth factor for feet
        """
        self.assertEqual(33, depth_factor(DistanceUnit.FEET))
        self.assertEqual(33, depth_factor('feet'))


    def test_invalid_unit(self):
        """
        Test depth factor for invalid distance unit
        """
        for unit in ('bogus', 'METERS', '', None, ['meters']):
            with self.assertRaises(InvalidArgumentError) as ctx:
                depth_factor(unit)
            self.assertEqual(
                'Distance unit not specified or invalid', str(ctx.exception)
            )



class PressureConversionTestCase(unittest.TestCase):
    """
    Depth to absolute pressure conversion tests.
    """
    def test_surface(self):
        """
        Test surface pressure is 1 ATA
        """
        self.assertEqual(1, to_ata(0, 'meters'))
        self.assertEqual(1, to_ata(0, 'feet'))


    def test_to_ata(self):
        """
        Test depth to absolute pressure conversion
        """
        self.assertEqual(4, to_ata(30, 'meters'))
        self.assertEqual(4, to_ata(99, 'feet'))


    def test_to_depth(self):
        """
        Test absolute pressure to depth conversion
        """
        self.assertEqual(30, to_depth(4, 'meters'))
        self.assertEqual(99, to_depth(4, 'feet'))


    def test_inverse(self):
        """
        Test absolute pressure to depth conversion is inverse of depth to absolute pressure conversion
        """
        for unit in (DistanceUnit.METERS, DistanceUnit.FEET):
            for depth in (0, 3.3, 18, 40.5, 121):
                v = to_depth(to_ata(depth, unit), unit)
                self.assertAlmostEqual(depth, v, 10)


    def test_invalid_unit(self):
        """
        Test depth conversion with invalid distance unit
        """
        self.assertRaises(InvalidArgumentError, to_ata, 10, 'yards')
        self.assertRaises(InvalidArgumentError, to_depth, 2, 'yards')


# vim: sw=4:et:ai
