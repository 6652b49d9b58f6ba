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
Oxygen exposure calculations.

Maximum Operating Depth
-----------------------
Maximum operating depth (MOD) of a gas mix is the deepest depth at which
partial pressure of oxygen of the gas mix does not exceed a limit, i.e.
1.4 bar. It is depth at which absolute pressure is

    .. math::

        P_{abs} = pO_2 / F_{O_2}

converted to depth with :func:`~oxytengu.unit.to_depth`.

Partial Pressure of Oxygen
--------------------------
Partial pressure of oxygen at a depth is

    .. math::

        pO_2 = F_{O_2} * P_{abs}

where :math:`P_{abs}` is absolute pressure of the depth calculated with
:func:`~oxytengu.unit.to_ata`.
"""

import logging

from .error import InvalidArgumentError
from .unit import depth_factor, to_ata
from . import const

logger = logging.getLogger(__name__)


def _fo2_in_range(fo2):
    return const.FO2_MIN <= fo2 <= const.FO2_MAX


def maximum_operating_depth(unit, po2, fo2):
    """
    Calculate maximum operating depth of a gas mix.

    The result is in meters (msw) or feet (fsw) depending on the distance
    unit.

    `InvalidArgumentError` is raised when oxygen fraction is out of range
    0 - 1 or is zero, or when distance unit is not valid.

    :param unit: Distance unit - meters or feet.
    :param po2: Partial pressure of oxygen limit [bar].
    :param fo2: Fraction of oxygen in gas mix, value between 0 and 1.
    """
    if not _fo2_in_range(fo2):
        raise InvalidArgumentError('FO2 can not be out of range 0 - 1')

    factor = depth_factor(unit)

    if fo2 == 0:
        raise InvalidArgumentError('FO2 can not be zero')

    depth = (po2 / fo2 - 1) * factor
    if __debug__:
        logger.debug('mod: po2={}, fo2={}, depth={}{}'.format(
            po2, fo2, depth, unit
        ))
    return depth


def partial_pressure_of_oxygen(unit, depth, fo2):
    """
    Calculate partial pressure of oxygen of a gas mix at a depth.

    Only the distance unit is validated and `InvalidArgumentError` is raised
    if it is not valid. Depth and oxygen fraction values are used as
    given, oxygen fraction out of range 0 - 1 is logged as a warning.

    :param unit: Distance unit - meters or feet.
    :param depth: Depth in distance unit.
    :param fo2: Fraction of oxygen in gas mix.
    """
    ata = to_ata(depth, unit)

    if not _fo2_in_range(fo2):
        logger.warning('FO2 out of range 0 - 1: {}'.format(fo2))

    po2 = fo2 * ata
    if __debug__:
        logger.debug('po2: depth={}{}, fo2={}, po2={}'.format(
            depth, unit, fo2, po2
        ))
    return po2


# vim: sw=4:et:ai
