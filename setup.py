#!/usr/bin/env python3
#
# OxyTengu - dive gas oxygen exposure library.
#
# Copyright (C) 2013 by Artur Wroblewski <wrobell@pld-linux.org>
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

from setuptools import setup, find_packages

import oxytengu

setup(
    name='oxytengu',
    version=oxytengu.__version__,
    description='OxyTengu - dive gas oxygen exposure library',
    author='Artur Wroblewski',
    author_email='wrobell@pld-linux.org',
    packages=find_packages('.'),
    include_package_data=True,
    long_description=\
"""\
OxyTengu is Python library to calculate oxygen exposure of dive gas mixes -
maximum operating depth of a gas mix and partial pressure of oxygen at
a depth, in meters or feet of seawater.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='diving dive nitrox oxygen mod',
    license='GPL',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
)

# vim: sw=4:et:ai
