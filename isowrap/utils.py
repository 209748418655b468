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

"""Various utilities for isowrap."""

import io
import struct
import time
from typing import BinaryIO, List  # NOQA pylint: disable=unused-import

from isowrap import isowrapexception

# There are a number of specific ways that numerical data is stored in the
# ISO9660/Ecma-119 standard.  In the text these are referenced by the section
# number they are stored in.  A brief synopsis:
#
# 7.1.1 - 8-bit number
# 7.2.1 - 16-bit number, stored as little-endian
# 7.2.2 - 16-bit number, stored as big-endian
# 7.2.3 - 16-bit number, stored first as little-endian then as big-endian (4 bytes total)
# 7.3.1 - 32-bit number, stored as little-endian
# 7.3.2 - 32-bit number, stored as big-endian
# 7.3.3 - 32-bit number, stored first as little-endian then as big-endian (8 bytes total)

_MAX_UINT16 = (1 << 16) - 1
_MAX_UINT32 = (1 << 32) - 1


def _check_uint(x, maximum, bits):
    # type: (int, int, int) -> None
    if x > maximum or x < 0:
        raise isowrapexception.IsoWrapInternalError('Invalid integer passed to encoder; must be unsigned %d-bits!' % (bits))


def le_16bit(x):
    # type: (int) -> bytes
    """Encode x as a 7.2.1 little-endian 16-bit number."""
    _check_uint(x, _MAX_UINT16, 16)
    return struct.pack('<H', x)


def be_16bit(x):
    # type: (int) -> bytes
    """Encode x as a 7.2.2 big-endian 16-bit number."""
    _check_uint(x, _MAX_UINT16, 16)
    return struct.pack('>H', x)


def le_32bit(x):
    # type: (int) -> bytes
    """Encode x as a 7.3.1 little-endian 32-bit number."""
    _check_uint(x, _MAX_UINT32, 32)
    return struct.pack('<L', x)


def be_32bit(x):
    # type: (int) -> bytes
    """Encode x as a 7.3.2 big-endian 32-bit number."""
    _check_uint(x, _MAX_UINT32, 32)
    return struct.pack('>L', x)


def both_16bit(x):
    # type: (int) -> bytes
    """
    Encode x as a 7.2.3 both-byte-order 16-bit number; the little-endian copy
    comes first, immediately followed by the big-endian copy.

    Parameters:
     x - The 16-bit integer to encode.
    Returns:
     The 4-byte encoding.
    """
    return le_16bit(x) + be_16bit(x)


def both_32bit(x):
    # type: (int) -> bytes
    """
    Encode x as a 7.3.3 both-byte-order 32-bit number; the little-endian copy
    comes first, immediately followed by the big-endian copy.

    Parameters:
     x - The 32-bit integer to encode.
    Returns:
     The 8-byte encoding.
    """
    return le_32bit(x) + be_32bit(x)


def ceiling_div(numer, denom):
    # type: (int, int) -> int
    """
    A function to do ceiling division; that is, dividing numerator by denominator
    and taking the ceiling.

    Parameters:
     numer - The numerator for the division.
     denom - The denominator for the division.
    Returns:
     The ceiling after dividing numerator by denominator.
    """
    # Doing division and then getting the ceiling is tricky; we do upside-down
    # floor division to make this happen.
    return -(-numer // denom)


def encode_space_pad(instr, length):
    # type: (bytes, int) -> bytes
    """
    A function to left-justify an input string and pad it out with spaces to
    exactly the length specified.  Input longer than the length is truncated.

    Parameters:
     instr - The input string to pad.
     length - The length to pad the input string to.
    Returns:
     The input string, truncated or padded to length bytes.
    """
    return instr[:length].ljust(length, b' ')


def gmtoffset_from_tm(tm, local):
    # type: (float, time.struct_time) -> int
    """
    A function to compute the GMT offset from the time in seconds since the epoch
    and the local time object.

    Parameters:
     tm - The time in seconds since the epoch.
     local - The struct_time object representing the local time.
    Returns:
     The gmtoffset, in 15 minute intervals.
    """
    gmtime = time.gmtime(tm)
    tmpyear = gmtime.tm_year - local.tm_year
    tmpyday = gmtime.tm_yday - local.tm_yday
    tmphour = gmtime.tm_hour - local.tm_hour
    tmpmin = gmtime.tm_min - local.tm_min

    # Across a year boundary the day-of-year difference is meaningless; the
    # year difference already says which way the day moved.
    if tmpyear != 0:
        tmpyday = tmpyear
    return -(tmpmin + 60 * (tmphour + 24 * tmpyday)) // 15


def file_object_supports_binary(fp):
    # type: (BinaryIO) -> bool
    """
    A function to check whether a file-like object supports binary mode.

    Parameters:
     fp - The file-like object to check for binary mode support.
    Returns:
     True if the file-like object supports binary mode, False otherwise.
    """
    if hasattr(fp, 'mode'):
        return 'b' in fp.mode

    return isinstance(fp, (io.RawIOBase, io.BufferedIOBase))


def read_fully(fp, size):
    # type: (BinaryIO, int) -> bytes
    """
    A function to read exactly size bytes from a file object, retrying short
    reads.  Fewer bytes are returned only when the end of the file is reached.

    Parameters:
     fp - The file object to read from.
     size - The number of bytes to read.
    Returns:
     The bytes read.
    """
    chunks = []  # type: List[bytes]
    left = size
    while left > 0:
        data = fp.read(left)
        if not data:
            break
        chunks.append(data)
        left -= len(data)
    return b''.join(chunks)
