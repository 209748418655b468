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
The custom exceptions that isowrap can raise.  Every exception raised by
isowrap derives from IsoWrapException, so callers that only care whether the
image was produced can catch that one class.
"""


class IsoWrapException(Exception):
    """The base class for all isowrap exceptions."""


class IsoWrapInvalidInput(IsoWrapException):
    """
    Raised when the caller handed isowrap something it cannot put on an
    image: a name outside the allowed character set, a file too large for a
    32-bit extent, an output file that already exists, and so on.  Nothing
    has been written when this is raised.
    """


class IsoWrapIOError(IsoWrapException):
    """
    Raised when opening or reading an input, or writing the output, failed at
    the operating system level.  The original OSError is chained as the
    __cause__.
    """


class IsoWrapInternalError(IsoWrapException):
    """
    Raised when a layout invariant does not hold: a structure landing on the
    wrong sector, a record overflowing its sector, the final sector count not
    matching the precomputed size, or a source yielding a different number of
    bytes than it declared.  The output of the failing call is unusable.
    """
