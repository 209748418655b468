# Copyright (C) 2026  The isowrap authors

# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation;
# version 2.1 of the License.

# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.

# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301  USA

"""
Classes and utilities for ISO date support.
"""

import struct
import time
from typing import Optional  # NOQA pylint: disable=unused-import

from isowrap import isowrapexception
from isowrap import utils


class DirectoryRecordDate(object):
    """
    A class to represent a Directory Record date as described in Ecma-119
    section 9.1.5.  The Directory Record date consists of the number of years
    since 1900, the month, the day of the month, the hour, the minute, the
    second, and the offset from GMT in 15 minute intervals.
    """
    FMT = '<BBBBBBb'

    __slots__ = ('_initialized', 'years_since_1900', 'month', 'day_of_month',
                 'hour', 'minute', 'second', 'gmtoffset')

    def __init__(self):
        # type: () -> None
        self._initialized = False

    def new(self, tm=None):
        # type: (Optional[float]) -> None
        """
        Create a new Directory Record date.

        Parameters:
         tm - The time in seconds since the epoch to record, or None to use
              the current time.
        Returns:
         Nothing.
        """
        if self._initialized:
            raise isowrapexception.IsoWrapInternalError('Directory Record Date already initialized')

        if tm is None:
            tm = time.time()
        local = time.localtime(tm)
        self.years_since_1900 = local.tm_year - 1900
        self.month = local.tm_mon
        self.day_of_month = local.tm_mday
        self.hour = local.tm_hour
        self.minute = local.tm_min
        self.second = local.tm_sec
        self.gmtoffset = utils.gmtoffset_from_tm(tm, local)
        self._initialized = True

    def record(self):
        # type: () -> bytes
        """
        Return a string representation of the Directory Record date.

        Parameters:
         None.
        Returns:
         A string representing this Directory Record Date.
        """
        if not self._initialized:
            raise isowrapexception.IsoWrapInternalError('Directory Record Date not initialized')

        return struct.pack(self.FMT, self.years_since_1900, self.month,
                           self.day_of_month, self.hour, self.minute,
                           self.second, self.gmtoffset)


class VolumeDescriptorDate(object):
    """
    A class to represent a Volume Descriptor Date as described in Ecma-119
    section 8.4.26.1.  The Volume Descriptor Date consists of a year (from 1 to
    9999), month (from 1 to 12), day of month (from 1 to 31), hour (from 0
    to 23), minute (from 0 to 59), second (from 0 to 59), hundredths of second,
    all as ASCII digits, and offset from GMT in 15-minute intervals (from -48
    to +52) as a signed byte.  A date with all digits zero and a zero offset
    means the date is not specified.
    """

    TIME_FMT = '%Y%m%d%H%M%S'

    EMPTY_STRING = b'0' * 16 + b'\x00'

    __slots__ = ('_initialized', 'date_str')

    def __init__(self):
        # type: () -> None
        self._initialized = False

    def new(self, tm=0.0):
        # type: (float) -> None
        """
        Create a new Volume Descriptor Date.  If tm is 0.0, then this Volume
        Descriptor Date will be the unspecified date.  Otherwise it is the
        time in seconds since the epoch, recorded in local time.

        Parameters:
          tm - The time in seconds since the epoch, or 0.0 for an unspecified
               VolumeDescriptorDate.
        Returns:
          Nothing.
        """
        if self._initialized:
            raise isowrapexception.IsoWrapInternalError('This Volume Descriptor Date object is already initialized')

        if tm != 0.0:
            local = time.localtime(tm)
            hundredths = int(tm * 100) % 100
            gmtoffset = utils.gmtoffset_from_tm(tm, local)
            self.date_str = time.strftime(self.TIME_FMT, local).encode('ascii') + b'%02d' % (hundredths) + struct.pack('<b', gmtoffset)
        else:
            self.date_str = self.EMPTY_STRING

        self._initialized = True

    def record(self):
        # type: () -> bytes
        """
        Return the date string for this object.

        Parameters:
          None.
        Returns:
          Date as a string.
        """
        if not self._initialized:
            raise isowrapexception.IsoWrapInternalError('This Volume Descriptor Date is not initialized')

        return self.date_str
