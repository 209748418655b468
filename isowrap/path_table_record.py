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

'''
Class to support ISO9660 Path Table Records.
'''

import struct

from isowrap import isowrapexception


class PathTableRecord(object):
    '''
    A class that represents a single ISO9660 Path Table Record.  Only the
    root directory is ever recorded, so the only way to create one is
    new_root().
    '''
    __slots__ = ('_initialized', 'len_di', 'xattr_length', 'extent_location',
                 'parent_directory_num', 'directory_identifier')

    FMT_LE = '<BBLH'
    FMT_BE = '>BBLH'

    def __init__(self):
        self._initialized = False

    def _record(self, fmt):
        '''
        An internal method to generate a string representing this Path Table Record.

        Parameters:
         fmt - The struct format carrying the byte order of the table.
        Returns:
         A string representing this Path Table Record.
        '''
        if not self._initialized:
            raise isowrapexception.IsoWrapInternalError('Path Table Record not initialized')

        return struct.pack(fmt, self.len_di, self.xattr_length,
                           self.extent_location, self.parent_directory_num) + self.directory_identifier + b'\x00' * (self.len_di % 2)

    def record_little_endian(self):
        '''
        A method to generate a string representing the little endian version of
        this Path Table Record.

        Parameters:
         None.
        Returns:
         A string representing the little endian version of this Path Table Record.
        '''
        return self._record(self.FMT_LE)

    def record_big_endian(self):
        '''
        A method to generate a string representing the big endian version of
        this Path Table Record.

        Parameters:
         None.
        Returns:
         A string representing the big endian version of this Path Table Record.
        '''
        return self._record(self.FMT_BE)

    @classmethod
    def record_length(cls, len_di):
        '''
        A class method to calculate the length of a Path Table Record.

        Parameters:
         len_di - The length of the name for this Path Directory Record.
        Returns:
         The total length that a Path Directory Record with this name would occupy.
        '''
        return struct.calcsize(cls.FMT_LE) + len_di + (len_di % 2)

    def new_root(self, extent_loc):
        '''
        A method to create a new root Path Table Record.  The root is its own
        parent, so the parent directory number is 1 (the first record).

        Parameters:
         extent_loc - The logical block the root directory lives at.
        Returns:
         Nothing.
        '''
        if self._initialized:
            raise isowrapexception.IsoWrapInternalError('Path Table Record already initialized')

        self.directory_identifier = b'\x00'
        self.len_di = len(self.directory_identifier)
        self.xattr_length = 0
        self.extent_location = extent_loc
        self.parent_directory_num = 1
        self._initialized = True


def write_path_table(sw, extent_loc, big_endian):
    '''
    A function to write a complete path table, holding only the root
    directory, into one sector.

    Parameters:
     sw - The SectorWriter for the path table's sector.
     extent_loc - The logical block the root directory lives at.
     big_endian - Whether to write the big endian (Type M) table instead of
                  the little endian (Type L) one.
    Returns:
     Nothing.
    '''
    ptr = PathTableRecord()
    ptr.new_root(extent_loc)
    if big_endian:
        sw.write(ptr.record_big_endian())
    else:
        sw.write(ptr.record_little_endian())
    sw.pad_with_zeros()
