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
Sector-granular output for ISO images.  A SectorCursor hands out one
SectorWriter per logical block; the writer refuses to grow past the end of
its block and zero-fills whatever was left unwritten when it is closed.
"""

import logging
from typing import BinaryIO, Callable, Optional  # NOQA pylint: disable=unused-import

from isowrap import isowrapexception

_logger = logging.getLogger(__name__)


class SectorWriter(object):
    """
    A class that collects the bytes of exactly one logical block.  The bytes
    are handed back to the owning SectorCursor when the writer is closed,
    padded with zeros to the full block size.  It is meant to be used as a
    context manager.
    """
    __slots__ = ('_cursor', '_buf', '_closed', 'sector_num', 'sector_size')

    def __init__(self, cursor, sector_num, sector_size):
        # type: (SectorCursor, int, int) -> None
        self._cursor = cursor
        self._buf = bytearray()
        self._closed = False
        self.sector_num = sector_num
        self.sector_size = sector_size

    def __enter__(self):
        # type: () -> SectorWriter
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is not None:
            # The image is unusable anyway; don't emit a half-built sector.
            self._closed = True
            return
        self.close()

    def remaining(self):
        # type: () -> int
        """
        Return the number of bytes that can still be written to this sector.

        Parameters:
         None.
        Returns:
         The number of unused bytes in this sector.
        """
        return self.sector_size - len(self._buf)

    def write(self, data):
        # type: (bytes) -> None
        """
        Append data to this sector.

        Parameters:
         data - The bytes to append.
        Returns:
         Nothing.
        """
        if self._closed:
            raise isowrapexception.IsoWrapInternalError('Sector %d is already closed' % (self.sector_num))

        if len(data) > self.remaining():
            raise isowrapexception.IsoWrapInternalError('Write of %d bytes overflows sector %d (%d bytes free)' % (len(data), self.sector_num, self.remaining()))

        self._buf += data

    def write_zeros(self, count):
        # type: (int) -> None
        """Append count zero bytes, for reserved and unused fields."""
        self.write(b'\x00' * count)

    def pad_with_zeros(self):
        # type: () -> None
        """Zero-fill the rest of this sector."""
        self.write_zeros(self.remaining())

    def close(self):
        # type: () -> None
        """
        Pad this sector out with zeros and hand it to the cursor for output.
        Closing an already closed writer does nothing.

        Parameters:
         None.
        Returns:
         Nothing.
        """
        if self._closed:
            return
        self.pad_with_zeros()
        self._closed = True
        self._cursor._emit(bytes(self._buf))  # pylint: disable=protected-access

    def closed(self):
        # type: () -> bool
        return self._closed


class SectorCursor(object):
    """
    A class that tracks the next unused absolute sector of an image being
    written to a file object, and hands out SectorWriters one sector at a
    time.  Sector numbers only ever go up.
    """
    __slots__ = ('_outfp', '_next', '_open_writer', '_write_cb',
                 'sector_size')

    def __init__(self, outfp, sector_size, write_cb=None):
        # type: (BinaryIO, int, Optional[Callable[[int], None]]) -> None
        self._outfp = outfp
        self._next = 0
        self._open_writer = None  # type: Optional[SectorWriter]
        self._write_cb = write_cb
        self.sector_size = sector_size

    def _emit(self, data):
        # type: (bytes) -> None
        try:
            self._outfp.write(data)
        except OSError as e:
            raise isowrapexception.IsoWrapIOError('Could not write to the output file: %s' % (e)) from e
        if self._write_cb is not None:
            self._write_cb(len(data))

    def _close_open_writer(self):
        # type: () -> None
        if self._open_writer is not None:
            self._open_writer.close()
            self._open_writer = None

    def write_reserved(self, count):
        # type: (int) -> None
        """
        Write count whole sectors of zeros, for the System Area.

        Parameters:
         count - The number of sectors to write.
        Returns:
         Nothing.
        """
        self._close_open_writer()
        _logger.debug('Writing %d reserved sectors at sector %d', count, self._next)
        for _ in range(count):
            self._emit(b'\x00' * self.sector_size)
            self._next += 1

    def next_sector(self):
        # type: () -> SectorWriter
        """
        Open the next sector for writing.  Any sector that is still open is
        padded and written out first.

        Parameters:
         None.
        Returns:
         A SectorWriter bound to the newly opened sector.
        """
        self._close_open_writer()
        self._open_writer = SectorWriter(self, self._next, self.sector_size)
        self._next += 1
        return self._open_writer

    def current_sector(self):
        # type: () -> int
        """
        Return the number of the most recently opened sector.

        Parameters:
         None.
        Returns:
         The sector number.
        """
        if self._next == 0:
            raise isowrapexception.IsoWrapInternalError('No sector has been opened yet')
        return self._next - 1

    def next_sector_num(self):
        # type: () -> int
        """Return the number of sectors handed out so far."""
        return self._next

    def finish(self):
        # type: () -> int
        """
        Close any open sector.

        Parameters:
         None.
        Returns:
         The total number of sectors written.
        """
        self._close_open_writer()
        return self._next
