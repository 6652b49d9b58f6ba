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
Distance units and depth to pressure conversion.

The depth is converted to absolute pressure in atmospheres (ATA) assuming
that each 10 meters (msw) or 33 feet (fsw) of seawater adds one atmosphere
to the pressure at the surface, which is 1 atmosphere.
"""

from .error import InvalidArgumentError
from . import const


class DistanceUnit(object):
    """
    Distance unit enumeration.

    The distance units are

    METERS
        Depth in meters of seawater (msw).
    FEET
        Depth in feet of seawater (fsw).
    """
    METERS = 'meters'
    FEET = 'feet'


DEPTH_FACTOR = {
    DistanceUnit.METERS: const.METER_PER_ATM,
    DistanceUnit.FEET: const.FEET_PER_ATM,
}


def depth_factor(unit):
    """
    Get depth, which adds one atmosphere of pressure, for a distance unit.

    `InvalidArgumentError` is raised for unknown distance unit.

    :param unit: Distance unit.
    """
    try:
        return DEPTH_FACTOR[unit]
    except (KeyError, TypeError):
        raise InvalidArgumentError('Distance unit not specified or invalid')


def to_ata(depth, unit):
    """
    Convert depth to absolute pressure [ATA].

    :param depth: Depth in distance unit.
    :param unit: Distance unit.
    """
    return 1 + depth / depth_factor(unit)


def to_depth(ata, unit):
    """
    Convert absolute pressure [ATA] to depth.

    :param ata: Absolute pressure [ATA].
    :param unit: Distance unit.
    """
    return (ata - 1) * depth_factor(unit)


# vim: sw=4:et:ai
