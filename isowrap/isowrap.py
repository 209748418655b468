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

"""Main IsoWrap class and the convenience functions built on it."""

import collections
import inspect
import io
import logging
import os
import time
from typing import Any, BinaryIO, Callable, List, Optional, Sequence, Union  # NOQA pylint: disable=unused-import

from isowrap import dr
from isowrap import headervd
from isowrap import isowrapexception
from isowrap import path_table_record
from isowrap import sector
from isowrap import utils

_logger = logging.getLogger(__name__)

# The logical block size.  ISO9660 technically allows others, but nothing
# reads them.
SECTOR_SIZE = 2048

# Ecma-119 6.2.1: the first 16 logical blocks are the System Area.
NUM_RESERVED_SECTORS = 16
# The Primary Volume Descriptor plus the Volume Descriptor Set Terminator.
NUM_VOLUME_DESCRIPTORS = 2
# One little endian and one big endian path table; no optional copies.
NUM_PATH_TABLES = 2

MAX_FILE_SIZE = 2**32 - 1
MAX_VOLUME_IDENT_LENGTH = 32

# The range of years a Directory Record date can hold.
MIN_YEAR = 1900
MAX_YEAR = 1900 + 255

# The volume identifier used when several files are wrapped and the caller
# did not pick one.
MULTI_FILE_VOLUME_IDENT = b'ISOWRAPPED'

Layout = collections.namedtuple('Layout', ['pvd', 'vdst', 'path_table_le',
                                           'path_table_be', 'root_dir',
                                           'first_data'])


def compute_layout(num_reserved_sectors=NUM_RESERVED_SECTORS,
                   num_volume_descriptors=NUM_VOLUME_DESCRIPTORS,
                   num_path_tables=NUM_PATH_TABLES):
    # type: (int, int, int) -> Layout
    """
    A function to compute the fixed sector numbers of every structure that
    precedes the file data.

    Parameters:
     num_reserved_sectors - The size of the System Area, in sectors.
     num_volume_descriptors - The number of volume descriptors, including the
                              terminator.
     num_path_tables - The number of path table sectors.
    Returns:
     A Layout with the sector number of each structure.
    """
    pvd = num_reserved_sectors
    vdst = pvd + num_volume_descriptors - 1
    path_table_le = pvd + num_volume_descriptors
    path_table_be = path_table_le + 1
    root_dir = path_table_le + num_path_tables
    return Layout(pvd, vdst, path_table_le, path_table_be, root_dir,
                  root_dir + 1)


LAYOUT = compute_layout()


def num_data_sectors(length):
    # type: (int) -> int
    """Return the number of sectors needed to hold length bytes of data."""
    return utils.ceiling_div(length, SECTOR_SIZE)


def num_total_sectors(lengths):
    # type: (Sequence[int]) -> int
    """
    A function to compute the size of an image, in sectors, holding files of
    the given lengths: the terminator, everything up to and including the root
    directory, and the data sectors of every file.

    Parameters:
     lengths - The lengths of the files in bytes.
    Returns:
     The total number of sectors of the image.
    """
    return 1 + LAYOUT.root_dir + sum(num_data_sectors(length) for length in lengths)


# We allow A-Z, 0-9, _ and . in names.  The below is the fastest way to build
# that list as integers.
_allowed_characters = set(tuple(range(65, 91)) + tuple(range(48, 58)) + (ord(b'_'), ord(b'.')))


def _check_name(name):
    # type: (bytes) -> None
    """
    A function to check that a name only uses the characters allowed on the
    image, and fits in a Directory Record.

    Parameters:
     name - The name to check.
    Returns:
     Nothing.
    """
    if not name:
        raise isowrapexception.IsoWrapInvalidInput('The name must not be empty')

    for char in bytearray(name):
        if char not in _allowed_characters:
            raise isowrapexception.IsoWrapInvalidInput('The name %s does not satisfy the ISO9660 character set constraints (A-Z, 0-9, _ and . are allowed)' % (name.decode('ascii', 'replace')))

    if len(name) > dr.MAX_FILE_IDENT_LENGTH:
        raise isowrapexception.IsoWrapInvalidInput('The name %s is longer than %d characters' % (name.decode('ascii'), dr.MAX_FILE_IDENT_LENGTH))


def _to_bytes(name):
    # type: (Union[str, bytes]) -> bytes
    if isinstance(name, bytes):
        return name
    try:
        return name.encode('ascii')
    except UnicodeEncodeError as e:
        raise isowrapexception.IsoWrapInvalidInput('The name %s does not satisfy the ISO9660 character set constraints (A-Z, 0-9, _ and . are allowed)' % (name)) from e


def name_from_path(path):
    # type: (str) -> bytes
    """
    A function to derive the name a file gets on the image from its path on
    disk: the basename, case-folded to upper case.

    Parameters:
     path - The path to the file on disk.
    Returns:
     The name to use on the image.
    """
    return _to_bytes(os.path.basename(path).upper())


class FileEntry(object):
    """
    A class that represents one file to be placed in the root directory.  The
    logical block address is assigned exactly once, when the image layout is
    computed.
    """
    __slots__ = ('name', 'length', 'fp', 'manage_fp', '_extent_location')

    def __init__(self, name, length, fp, manage_fp=False):
        # type: (bytes, int, BinaryIO, bool) -> None
        self.name = name
        self.length = length
        self.fp = fp
        self.manage_fp = manage_fp
        self._extent_location = None  # type: Optional[int]

    def assign_extent(self, extent):
        # type: (int) -> None
        """
        Assign the logical block the data of this file starts at.

        Parameters:
         extent - The logical block number.
        Returns:
         Nothing.
        """
        if self._extent_location is not None:
            raise isowrapexception.IsoWrapInternalError('File %s already has an extent assigned' % (self.name.decode('ascii')))
        self._extent_location = extent

    def extent_location(self):
        # type: () -> int
        """Return the logical block the data of this file starts at."""
        if self._extent_location is None:
            raise isowrapexception.IsoWrapInternalError('File %s has no extent assigned' % (self.name.decode('ascii')))
        return self._extent_location

    def num_sectors(self):
        # type: () -> int
        return num_data_sectors(self.length)


def _check_sector(cursor, expected, what):
    # type: (sector.SectorCursor, int, str) -> None
    actual = cursor.current_sector()
    if actual != expected:
        raise isowrapexception.IsoWrapInternalError('Unexpected %s sector %d (expected %d)' % (what, actual, expected))
    _logger.debug('Writing %s at sector %d', what, actual)


class IsoWrap(object):
    """The main class for building an ISO holding files in its root directory."""

    __slots__ = ('_initialized', '_entries', '_vol_ident', '_tm')

    class _Progress(object):
        """
        An inner class to deal with progress.
        """
        __slots__ = ('done', 'total', 'progress_cb', 'progress_opaque', '_call')

        def __init__(self, total, progress_cb, progress_opaque):
            # type: (int, Optional[Callable[..., None]], Optional[Any]) -> None
            self.done = 0
            self.total = total
            self.progress_cb = progress_cb
            self.progress_opaque = progress_opaque
            if self.progress_cb is not None:
                arglen = len(inspect.getfullargspec(self.progress_cb).args)

                if arglen == 2:
                    self._call = lambda done, total, opaque: self.progress_cb(done, total)  # type: ignore
                elif arglen == 3:
                    self._call = lambda done, total, opaque: self.progress_cb(done, total, opaque)  # type: ignore # pylint: disable=unnecessary-lambda
                else:
                    raise isowrapexception.IsoWrapInvalidInput('The progress callback must take 2 or 3 arguments')
            else:
                self._call = lambda done, total, opaque: None

        def call(self, length):
            # type: (int) -> None
            """Add the length to done, then call progress_cb if it is not None."""
            self.done += length
            if self.done > self.total:
                self.done = self.total
            self._call(self.done, self.total, self.progress_opaque)

    def __init__(self):
        # type: () -> None
        self._initialize()

    def _initialize(self):
        # type: () -> None
        """
        An internal method to re-initialize the object.  Called from
        both __init__ and close.

        Parameters:
         None.
        Returns:
         Nothing.
        """
        self._entries = []  # type: List[FileEntry]
        self._vol_ident = None  # type: Optional[bytes]
        self._tm = None  # type: Optional[float]
        self._initialized = False

    def _check_initialized(self):
        # type: () -> None
        if not self._initialized:
            raise isowrapexception.IsoWrapInvalidInput('This object is not initialized; call new() to create an ISO')

    def new(self, vol_ident=None, tm=None):
        # type: (Optional[Union[str, bytes]], Optional[float]) -> None
        """
        Create a new, empty ISO.

        Parameters:
         vol_ident - The volume identification string to use on the new ISO.
                     If None, the name of the file is used when there is
                     exactly one, and ISOWRAPPED otherwise.  Identifiers
                     longer than 32 characters are truncated.
         tm - The time, in seconds since the epoch, to record in every date
              on the ISO.  If None, the time of the write is used.  Passing
              a fixed time makes the output reproducible.
        Returns:
         Nothing.
        """
        if self._initialized:
            raise isowrapexception.IsoWrapInvalidInput('This object already has an ISO; either close it or create a new object')

        if vol_ident is not None:
            vol_ident = _to_bytes(vol_ident)
            _check_name(vol_ident)
            vol_ident = vol_ident[:MAX_VOLUME_IDENT_LENGTH]

        if tm is not None:
            if tm <= 0:
                raise isowrapexception.IsoWrapInvalidInput('The time must be after the epoch')
            # Directory Record dates keep the year as a single byte counted
            # from 1900.
            try:
                year = time.localtime(tm).tm_year
            except (OverflowError, OSError, ValueError) as e:
                raise isowrapexception.IsoWrapInvalidInput('The time %s cannot be represented on an ISO' % (tm)) from e
            if year < MIN_YEAR or year > MAX_YEAR:
                raise isowrapexception.IsoWrapInvalidInput('The time %s falls in year %d; only years %d to %d can be represented on an ISO' % (tm, year, MIN_YEAR, MAX_YEAR))

        self._vol_ident = vol_ident
        self._tm = tm
        self._initialized = True

    def add_fp(self, fp, length, name):
        # type: (BinaryIO, int, Union[str, bytes]) -> None
        """
        Add a file to the root directory of the ISO.  The caller must keep fp
        open until the ISO has been written; the data is read from it during
        write() or write_fp(), and it must then yield exactly length bytes.

        Parameters:
         fp - The file object to use for the contents of the new file.
         length - The length of the data for the new file.
         name - The name of the file on the ISO.  Only A-Z, 0-9, _ and . are
                allowed.
        Returns:
         Nothing.
        """
        self._add_fp(fp, length, name, False)

    def _add_fp(self, fp, length, name, manage_fp):
        # type: (BinaryIO, int, Union[str, bytes], bool) -> None
        self._check_initialized()

        if not utils.file_object_supports_binary(fp):
            raise isowrapexception.IsoWrapInvalidInput('The fp argument must be in binary mode')

        name = _to_bytes(name)
        _check_name(name)

        if length < 0:
            raise isowrapexception.IsoWrapInvalidInput('The length must not be negative')
        if length > MAX_FILE_SIZE:
            raise isowrapexception.IsoWrapInvalidInput('File size %d is too large; the maximum supported file length is 2^32-1' % (length))

        for entry in self._entries:
            if entry.name == name:
                raise isowrapexception.IsoWrapInvalidInput('A file named %s was already added' % (name.decode('ascii')))

        self._entries.append(FileEntry(name, length, fp, manage_fp))

    def add_file(self, filename, name=None):
        # type: (str, Optional[Union[str, bytes]]) -> None
        """
        Add a file from disk to the root directory of the ISO.  The file is
        opened now and closed when this object is closed.

        Parameters:
         filename - The path of the file on disk.
         name - The name of the file on the ISO.  If None, the basename of
                filename in upper case is used.
        Returns:
         Nothing.
        """
        self._check_initialized()

        if name is None:
            name = name_from_path(filename)

        try:
            fp = open(filename, 'rb')
        except OSError as e:
            raise isowrapexception.IsoWrapIOError('Could not open input file %s for reading: %s' % (filename, e)) from e

        try:
            length = os.fstat(fp.fileno()).st_size
            self._add_fp(fp, length, name, True)
        except OSError as e:
            fp.close()
            raise isowrapexception.IsoWrapIOError('Could not stat input file %s: %s' % (filename, e)) from e
        except isowrapexception.IsoWrapException:
            fp.close()
            raise

    def _root_directory_records(self, tm):
        # type: (Optional[float]) -> List[dr.DirectoryRecord]
        """
        An internal method to build the records of the root directory, in
        ISO9660 order.

        Parameters:
         tm - The recording time, or None for the current time.
        Returns:
         The list of Directory Records.
        """
        dot = dr.DirectoryRecord()
        dot.new_dot(LAYOUT.root_dir, SECTOR_SIZE, tm)
        dotdot = dr.DirectoryRecord()
        dotdot.new_dotdot(LAYOUT.root_dir, SECTOR_SIZE, tm)

        records = [dot, dotdot]
        for entry in self._entries:
            rec = dr.DirectoryRecord()
            rec.new_file(entry.name, entry.extent_location(), entry.length, tm)
            records.append(rec)

        return sorted(records)

    def _assign_extents(self):
        # type: () -> None
        """
        An internal method to lay out the file data.  Files get consecutive
        extents after the root directory, in the order they were added.

        Parameters:
         None.
        Returns:
         Nothing.
        """
        current_extent = LAYOUT.first_data
        for entry in self._entries:
            entry.assign_extent(current_extent)
            _logger.debug('File %s at sector %d (%d sectors)',
                          entry.name.decode('ascii'), current_extent,
                          entry.num_sectors())
            current_extent += entry.num_sectors()

    def _check_root_directory_fits(self):
        # type: () -> None
        # The root directory is a single sector; more directory sectors
        # would also need a longer path table.
        size = 2 * dr.DirectoryRecord.record_length(1)
        for entry in self._entries:
            size += dr.DirectoryRecord.record_length(len(entry.name))
        if size > SECTOR_SIZE:
            raise isowrapexception.IsoWrapInvalidInput('Too many files; the root directory records take %d bytes, but only %d fit' % (size, SECTOR_SIZE))

    def _volume_identifier(self):
        # type: () -> bytes
        if self._vol_ident is not None:
            return self._vol_ident
        if len(self._entries) == 1:
            return self._entries[0].name[:MAX_VOLUME_IDENT_LENGTH]
        return MULTI_FILE_VOLUME_IDENT

    def _write_data(self, cursor, entry):
        # type: (sector.SectorCursor, FileEntry) -> None
        """
        An internal method to copy the data of one file into consecutive
        sectors, starting at the extent assigned to it.

        Parameters:
         cursor - The SectorCursor to write with.
         entry - The file to write.
        Returns:
         Nothing.
        """
        if cursor.next_sector_num() != entry.extent_location():
            raise isowrapexception.IsoWrapInternalError('Unexpected first data sector %d for file %s (expected %d)' % (cursor.next_sector_num(), entry.name.decode('ascii'), entry.extent_location()))

        name = entry.name.decode('ascii')
        left = entry.length
        while left > 0:
            want = min(left, SECTOR_SIZE)
            try:
                data = utils.read_fully(entry.fp, want)
            except OSError as e:
                raise isowrapexception.IsoWrapIOError('Could not read from input file %s: %s' % (name, e)) from e
            if len(data) != want:
                raise isowrapexception.IsoWrapInternalError('Input file %s size changed while the ISO was being created (expected to read %d, read %d)' % (name, entry.length, entry.length - left + len(data)))
            with cursor.next_sector() as sw:
                sw.write(data)
            left -= want

        try:
            extra = entry.fp.read(1)
        except OSError as e:
            raise isowrapexception.IsoWrapIOError('Could not read from input file %s: %s' % (name, e)) from e
        if extra:
            raise isowrapexception.IsoWrapInternalError('Input file %s size changed while the ISO was being created (expected to read %d, read more)' % (name, entry.length))

        expected = entry.extent_location() + entry.num_sectors()
        if cursor.next_sector_num() != expected:
            raise isowrapexception.IsoWrapInternalError('Unexpected last data sector %d for file %s (expected %d)' % (cursor.next_sector_num() - 1, name, expected - 1))

    def _prepare_write(self, progress_cb, progress_opaque):
        # type: (Optional[Callable[..., None]], Optional[Any]) -> IsoWrap._Progress
        """
        An internal method to run every check that does not need the output,
        so that a bad request fails before the output is touched.

        Parameters:
         progress_cb - If not None, a function to call as the write call does its
                       work.
         progress_opaque - User data to be passed to the progress callback.
        Returns:
         The progress tracker for the write.
        """
        self._check_root_directory_fits()

        total_sectors = num_total_sectors([entry.length for entry in self._entries])
        return self._Progress(total_sectors * SECTOR_SIZE, progress_cb,
                              progress_opaque)

    def _write_fp(self, outfp, progress):
        # type: (BinaryIO, IsoWrap._Progress) -> None
        """
        Write a properly formatted ISO out to the file object passed in.  This
        also goes by the name of 'mastering'.

        Parameters:
         outfp - The file object to write the data to.
         progress - The progress tracker from _prepare_write.
        Returns:
         Nothing.
        """
        for entry in self._entries:
            if entry.manage_fp:
                entry.fp.seek(0)

        # Every size-dependent field is computed before the first byte goes
        # out, so the PVD can be written in a single pass.
        total_sectors = num_total_sectors([entry.length for entry in self._entries])

        # One timestamp for every date on the image.
        tm = self._tm
        if tm is None:
            tm = time.time()

        self._assign_extents()
        try:
            pvd = headervd.pvd_factory(self._volume_identifier(), total_sectors,
                                       SECTOR_SIZE, SECTOR_SIZE,
                                       LAYOUT.path_table_le,
                                       LAYOUT.path_table_be, LAYOUT.root_dir,
                                       tm)
            root_records = self._root_directory_records(tm)

            cursor = sector.SectorCursor(outfp, SECTOR_SIZE, progress.call)

            cursor.write_reserved(NUM_RESERVED_SECTORS)

            with cursor.next_sector() as sw:
                _check_sector(cursor, LAYOUT.pvd, 'primary volume descriptor')
                sw.write(pvd.record())

            with cursor.next_sector() as sw:
                _check_sector(cursor, LAYOUT.vdst, 'volume descriptor set terminator')
                sw.write(headervd.vdst_factory().record())

            with cursor.next_sector() as sw:
                _check_sector(cursor, LAYOUT.path_table_le, 'little endian path table')
                path_table_record.write_path_table(sw, LAYOUT.root_dir, False)

            with cursor.next_sector() as sw:
                _check_sector(cursor, LAYOUT.path_table_be, 'big endian path table')
                path_table_record.write_path_table(sw, LAYOUT.root_dir, True)

            with cursor.next_sector() as sw:
                _check_sector(cursor, LAYOUT.root_dir, 'root directory')
                for rec in root_records:
                    dr.write_record(sw, rec)

            for entry in self._entries:
                self._write_data(cursor, entry)

            written = cursor.finish()
        finally:
            # Extents belong to one write; a later write lays out afresh.
            for entry in self._entries:
                entry._extent_location = None  # pylint: disable=protected-access

        if written != total_sectors:
            raise isowrapexception.IsoWrapInternalError('Unexpected last sector number (expected %d, actual %d)' % (total_sectors - 1, written - 1))

        _logger.info('Wrote ISO with %d file(s): %d sectors, %d bytes',
                     len(self._entries), written, written * SECTOR_SIZE)

    def write_fp(self, outfp, progress_cb=None, progress_opaque=None):
        # type: (BinaryIO, Optional[Callable[..., None]], Optional[Any]) -> None
        """
        Write a properly formatted ISO out to the file object passed in.  This
        also goes by the name of 'mastering'.  If this raises, whatever was
        written to outfp is not a usable ISO.

        Parameters:
         outfp - The file object to write the data to.
         progress_cb - If not None, a function to call as the write call does its
                       work.  The callback function must have a signature of:
                       def func(done, total, opaque) or def func(done, total).
         progress_opaque - User data to be passed to the progress callback.
        Returns:
         Nothing.
        """
        self._check_initialized()

        if not utils.file_object_supports_binary(outfp):
            raise isowrapexception.IsoWrapInvalidInput("The file to write out must be in binary mode (add 'b' to the open flags)")

        progress = self._prepare_write(progress_cb, progress_opaque)
        self._write_fp(outfp, progress)

    def write(self, filename, progress_cb=None, progress_opaque=None):
        # type: (str, Optional[Callable[..., None]], Optional[Any]) -> None
        """
        Write a properly formatted ISO out to the filename passed in.  The
        file must not exist yet.  If the write fails, the partially written
        file is removed.

        Parameters:
         filename - The filename to write the data to.
         progress_cb - If not None, a function to call as the write call does its
                       work.  The callback function must have a signature of:
                       def func(done, total, opaque) or def func(done, total).
         progress_opaque - User data to be passed to the progress callback.
        Returns:
         Nothing.
        """
        self._check_initialized()

        progress = self._prepare_write(progress_cb, progress_opaque)

        try:
            fp = open(filename, 'xb')
        except FileExistsError as e:
            raise isowrapexception.IsoWrapInvalidInput('Output file %s already exists' % (filename)) from e
        except OSError as e:
            raise isowrapexception.IsoWrapIOError('Could not open output file %s for writing: %s' % (filename, e)) from e

        try:
            with fp:
                self._write_fp(fp, progress)
        except OSError as e:
            os.remove(filename)
            raise isowrapexception.IsoWrapIOError('Could not write to output file %s: %s' % (filename, e)) from e
        except BaseException:
            os.remove(filename)
            raise

    def close(self):
        # type: () -> None
        """
        Close the IsoWrap object, and re-initialize the object to the defaults.
        Files opened by add_file() are closed; file objects passed to add_fp()
        are left alone.  The object can then be re-used for another ISO.

        Parameters:
         None.
        Returns:
         Nothing.
        """
        self._check_initialized()

        for entry in self._entries:
            if entry.manage_fp:
                entry.fp.close()

        self._initialize()


def write_buffer(outfp, buf, filename, tm=None):
    # type: (BinaryIO, bytes, Union[str, bytes], Optional[float]) -> None
    """
    A function to write an ISO holding a single file, whose contents are
    already in memory.

    Parameters:
     outfp - The file object to write the ISO to.
     buf - The contents of the file.
     filename - The name of the file on the ISO; also the volume identifier.
     tm - The time to record on the ISO, or None for the current time.
    Returns:
     Nothing.
    """
    iso = IsoWrap()
    iso.new(tm=tm)
    try:
        iso.add_fp(io.BytesIO(buf), len(buf), filename)
        iso.write_fp(outfp)
    finally:
        iso.close()


def write_stream(outfp, infp, length, filename, tm=None):
    # type: (BinaryIO, BinaryIO, int, Union[str, bytes], Optional[float]) -> None
    """
    A function to write an ISO holding a single file, whose contents are
    read from infp in sector-sized chunks while the ISO is written.  infp is
    not closed.

    Parameters:
     outfp - The file object to write the ISO to.
     infp - The file object to read the contents of the file from.
     length - The number of bytes infp will yield.
     filename - The name of the file on the ISO; also the volume identifier.
     tm - The time to record on the ISO, or None for the current time.
    Returns:
     Nothing.
    """
    iso = IsoWrap()
    iso.new(tm=tm)
    try:
        iso.add_fp(infp, length, filename)
        iso.write_fp(outfp)
    finally:
        iso.close()


def write_file(outpath, inpath, tm=None):
    # type: (str, str, Optional[float]) -> None
    """
    A function to write an ISO holding a single file from disk.  The name on
    the ISO is the basename of inpath in upper case.

    Parameters:
     outpath - The path of the ISO to create; it must not exist.
     inpath - The path of the file to wrap.
     tm - The time to record on the ISO, or None for the current time.
    Returns:
     Nothing.
    """
    write_files(outpath, [inpath], tm)


def write_files(outpath, inpaths, tm=None):
    # type: (str, Sequence[str], Optional[float]) -> None
    """
    A function to write an ISO holding several files from disk in its root
    directory.  Every input is opened and checked before the output is
    created.

    Parameters:
     outpath - The path of the ISO to create; it must not exist.
     inpaths - The paths of the files to wrap.
     tm - The time to record on the ISO, or None for the current time.
    Returns:
     Nothing.
    """
    if not inpaths:
        raise isowrapexception.IsoWrapInvalidInput('No input files given')

    iso = IsoWrap()
    iso.new(tm=tm)
    try:
        for inpath in inpaths:
            iso.add_file(inpath)
        iso.write(outpath)
    finally:
        iso.close()
