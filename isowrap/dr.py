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
The class to support ISO9660 Directory Records.
"""

import struct
from typing import Optional  # NOQA pylint: disable=unused-import

from isowrap import dates
from isowrap import isowrapexception
from isowrap import sector  # NOQA pylint: disable=unused-import
from isowrap import utils

# The identifier length is limited by the one-byte record length.  The fixed
# part is 33 bytes and the record length must be even, so the longest record
# is 254 bytes with a 221 byte identifier.
MAX_FILE_IDENT_LENGTH = 254 - 33


class DirectoryRecord(object):
    """A class that represents an ISO9660 directory record."""
    __slots__ = ('_initialized', 'date', 'dr_len', 'xattr_len', 'file_flags',
                 'file_unit_size', 'interleave_gap_size', 'len_fi', 'isdir',
                 'extent_location', 'data_length', 'seqnum', 'file_ident')

    FILE_FLAG_DIRECTORY_BIT = 1

    FMT = '<BB8s8s7sBBB4sB'

    def __init__(self):
        # type: () -> None
        self._initialized = False
        self.isdir = False

    @classmethod
    def record_length(cls, len_fi):
        # type: (int) -> int
        """
        A class method to calculate the length of a Directory Record, including
        the padding byte that Ecma-119 9.1.12 requires after an even-length
        identifier.

        Parameters:
         len_fi - The length of the identifier for this Directory Record.
        Returns:
         The total length that a Directory Record with this identifier would
         occupy.
        """
        return struct.calcsize(cls.FMT) + len_fi + ((len_fi + 1) % 2)

    def _new(self, name, extent, length, isdir, seqnum, tm):
        # type: (bytes, int, int, bool, int, Optional[float]) -> None
        """
        Internal method to create a new Directory Record.

        Parameters:
         name - The identifier for this directory record.
         extent - The logical block the data for this record starts at.
         length - The length of the data for this directory record.
         isdir - Whether this directory record represents a directory.
         seqnum - The volume sequence number for this directory record.
         tm - The recording time, or None for the current time.
        Returns:
         Nothing.
        """
        if self._initialized:
            raise isowrapexception.IsoWrapInternalError('Directory Record already initialized')

        if length > 2**32 - 1 or length < 0:
            raise isowrapexception.IsoWrapInvalidInput('Maximum supported file length is 2^32-1')

        if not name or len(name) > MAX_FILE_IDENT_LENGTH:
            raise isowrapexception.IsoWrapInvalidInput('Directory Record identifiers must be between 1 and %d bytes' % (MAX_FILE_IDENT_LENGTH))

        self.date = dates.DirectoryRecordDate()
        self.date.new(tm)

        self.file_ident = name
        self.len_fi = len(name)
        self.dr_len = self.record_length(self.len_fi)
        self.extent_location = extent
        self.data_length = length
        self.isdir = isdir
        self.seqnum = seqnum

        # From Ecma-119, 9.1.6, the file flag bits are:
        #
        # Bit 0 - Existence - 0 for existence known, 1 for hidden
        # Bit 1 - Directory - 0 for file, 1 for directory
        # Bit 2 - Associated File - 0 for not associated, 1 for associated
        # Bit 3 - Record - 0=structure not in xattr, 1=structure in xattr
        # Bit 4 - Protection - 0=no owner and group, 1=owner and group in xattr
        # Bit 5 - Reserved
        # Bit 6 - Reserved
        # Bit 7 - Multi-extent - 0=final directory record, 1=not final directory record
        self.file_flags = 0
        if self.isdir:
            self.file_flags |= (1 << self.FILE_FLAG_DIRECTORY_BIT)
        self.file_unit_size = 0
        self.interleave_gap_size = 0
        self.xattr_len = 0

        self._initialized = True

    def new_root(self, extent, log_block_size, tm=None, seqnum=1):
        # type: (int, int, Optional[float], int) -> None
        """
        Create a new root Directory Record, the one embedded in the Primary
        Volume Descriptor.

        Parameters:
         extent - The logical block the root directory lives at.
         log_block_size - The size of the root directory's data.
         tm - The recording time, or None for the current time.
         seqnum - The volume sequence number.
        Returns:
         Nothing.
        """
        self._new(b'\x00', extent, log_block_size, True, seqnum, tm)

    def new_dot(self, extent, log_block_size, tm=None, seqnum=1):
        # type: (int, int, Optional[float], int) -> None
        """
        Create a new 'dot' Directory Record, the entry of a directory that
        refers to the directory itself.

        Parameters:
         extent - The logical block the directory lives at.
         log_block_size - The size of the directory's data.
         tm - The recording time, or None for the current time.
         seqnum - The volume sequence number.
        Returns:
         Nothing.
        """
        self._new(b'\x00', extent, log_block_size, True, seqnum, tm)

    def new_dotdot(self, extent, log_block_size, tm=None, seqnum=1):
        # type: (int, int, Optional[float], int) -> None
        """
        Create a new 'dotdot' Directory Record, the entry of a directory that
        refers to its parent.  The root is its own parent.

        Parameters:
         extent - The logical block the parent directory lives at.
         log_block_size - The size of the parent directory's data.
         tm - The recording time, or None for the current time.
         seqnum - The volume sequence number.
        Returns:
         Nothing.
        """
        self._new(b'\x01', extent, log_block_size, True, seqnum, tm)

    def new_file(self, name, extent, length, tm=None, seqnum=1):
        # type: (bytes, int, int, Optional[float], int) -> None
        """
        Create a new file Directory Record.

        Parameters:
         name - The identifier of the file.
         extent - The logical block the file's data starts at.
         length - The length of the file's data in bytes.
         tm - The recording time, or None for the current time.
         seqnum - The volume sequence number.
        Returns:
         Nothing.
        """
        self._new(name, extent, length, False, seqnum, tm)

    def is_dot(self):
        # type: () -> bool
        return self.file_ident == b'\x00'

    def is_dotdot(self):
        # type: () -> bool
        return self.file_ident == b'\x01'

    def record(self):
        # type: () -> bytes
        """
        Generate the string representing this Directory Record.

        Parameters:
         None.
        Returns:
         String representing this Directory Record.
        """
        if not self._initialized:
            raise isowrapexception.IsoWrapInternalError('Directory Record not initialized')

        padstr = b'\x00' * ((self.len_fi + 1) % 2)

        rec = struct.pack(self.FMT, self.dr_len, self.xattr_len,
                          utils.both_32bit(self.extent_location),
                          utils.both_32bit(self.data_length),
                          self.date.record(), self.file_flags,
                          self.file_unit_size, self.interleave_gap_size,
                          utils.both_16bit(self.seqnum),
                          self.len_fi) + self.file_ident + padstr

        if len(rec) != self.dr_len:
            raise isowrapexception.IsoWrapInternalError('Directory Record length %d does not match the recorded length %d' % (len(rec), self.dr_len))

        return rec

    def __lt__(self, other):
        # type: (DirectoryRecord) -> bool
        # This is used to sort the entries of a directory.  The ISO9660
        # sorting order is essentially:
        #
        # 1.  The \x00 is always the 'dot' record, and is always first.
        # 2.  The \x01 is always the 'dotdot' record, and is always second.
        # 3.  Other entries are sorted by identifier.
        #
        # Ecma-119 Section 9.3 specifies that we need to pad out the shorter of
        # the two identifiers with 0x20 (spaces), then compare byte-by-byte
        # until they differ.  Every character we allow in an identifier sorts
        # after 0x20, so a plain bytes comparison gives the same answer.
        if self.is_dot():
            return not other.is_dot()
        if other.is_dot():
            return False

        if self.is_dotdot():
            return not other.is_dotdot()
        if other.is_dotdot():
            return False
        return self.file_ident < other.file_ident


def write_record(sw, rec):
    # type: (sector.SectorWriter, DirectoryRecord) -> None
    """
    A function to write a Directory Record into a sector.  Ecma-119 6.8.1.1
    forbids a Directory Record from spanning a logical block boundary, so a
    record that does not fit in what is left of the sector is an error rather
    than being split.

    Parameters:
     sw - The SectorWriter to write to.
     rec - The Directory Record to write.
    Returns:
     Nothing.
    """
    data = rec.record()
    if len(data) > sw.remaining():
        raise isowrapexception.IsoWrapInternalError('Directory Record of %d bytes would cross the end of sector %d (%d bytes free)' % (len(data), sw.sector_num, sw.remaining()))
    sw.write(data)

