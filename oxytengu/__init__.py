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
Basic Usage
-----------

The OxyTengu dive gas oxygen exposure library exports its main API via
``oxytengu`` module.

Maximum operating depth of a gas mix is calculated with
:func:`~oxytengu.maximum_operating_depth` function. The following example
calculates maximum operating depth of air for 1.4 bar partial pressure of
oxygen limit::

    >>> import oxytengu
    >>> round(oxytengu.maximum_operating_depth('meters', 1.4, 0.21), 2)
    56.67
    >>> round(oxytengu.maximum_operating_depth('feet', 1.4, 0.21), 2)
    187.0

The partial pressure of oxygen of a gas mix at a depth is calculated with
:func:`~oxytengu.partial_pressure_of_oxygen` function::

    >>> oxytengu.partial_pressure_of_oxygen('meters', 10, 0.08)
    0.16
    >>> oxytengu.partial_pressure_of_oxygen(oxytengu.DistanceUnit.FEET, 33, 0.21)
    0.42

Calculation parameters can be passed as keyword arguments, i.e. from
a dictionary::

    >>> options = {'unit': 'meters', 'po2': 1.6, 'fo2': 0.5}
    >>> round(oxytengu.maximum_operating_depth(**options), 2)
    22.0

Invalid Parameters
------------------
Invalid parameters of a calculation result in
:class:`~oxytengu.InvalidArgumentError` exception::

    >>> oxytengu.maximum_operating_depth('meters', 1.4, 1.5)
    Traceback (most recent call last):
        ...
    oxytengu.error.InvalidArgumentError: FO2 can not be out of range 0 - 1
    >>> oxytengu.partial_pressure_of_oxygen('fathoms', 10, 0.21)
    Traceback (most recent call last):
        ...
    oxytengu.error.InvalidArgumentError: Distance unit not specified or invalid

"""

from .oxygen import maximum_operating_depth, partial_pressure_of_oxygen
from .unit import DistanceUnit
from .error import InvalidArgumentError

__version__ = '0.1.0'

__all__ = [
    'maximum_operating_depth', 'partial_pressure_of_oxygen', 'DistanceUnit',
    'InvalidArgumentError',
]

# vim: sw=4:et:ai
