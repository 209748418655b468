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
Implementation of header Volume Descriptors for Ecma-119/ISO9660.
'''

import struct
import time

from isowrap import dates
from isowrap import dr
from isowrap import isowrapexception
from isowrap import utils

VOLUME_DESCRIPTOR_TYPE_PRIMARY = 1
VOLUME_DESCRIPTOR_TYPE_SET_TERMINATOR = 255

# Standard Identifier (Ecma-119 8.1.2) and Volume Descriptor Version (8.1.3).
STANDARD_IDENTIFIER = b'CD001'
VOLUME_DESCRIPTOR_VERSION = 1


class PrimaryVolumeDescriptor(object):
    '''
    A class representing the Primary Volume Descriptor of an ISO.  This is the
    first thing a reader looks at, and describes the size of the volume, where
    the path tables are, and where the root directory is.
    '''
    __slots__ = ('_initialized', 'system_identifier', 'volume_identifier',
                 'space_size', 'set_size', 'seqnum', 'log_block_size',
                 'path_tbl_size', 'path_table_location_le',
                 'optional_path_table_location_le', 'path_table_location_be',
                 'optional_path_table_location_be', 'root_dir_record',
                 'volume_set_identifier', 'publisher_identifier',
                 'preparer_identifier', 'application_identifier',
                 'copyright_file_identifier', 'abstract_file_identifier',
                 'bibliographic_file_identifier', 'volume_creation_date',
                 'volume_modification_date', 'volume_expiration_date',
                 'volume_effective_date', 'file_structure_version')

    FMT = '<B5sBB32s32s8s8s32s4s4s4s8s4s4s4s4s34s128s128s128s128s37s37s37s17s17s17s17sBB512s653s'

    def __init__(self):
        self._initialized = False

    def new(self, vol_ident, space_size, log_block_size, path_tbl_size,
            path_table_location_le, path_table_location_be, root_extent,
            tm=None):
        '''
        Create a new Primary Volume Descriptor.

        Parameters:
         vol_ident - The volume identification string; truncated to 32 bytes.
         space_size - The total number of logical blocks in the volume.
         log_block_size - The logical block size to use for the ISO.
         path_tbl_size - The size of the path table, in bytes.
         path_table_location_le - The logical block of the little endian path
                                  table.
         path_table_location_be - The logical block of the big endian path
                                  table.
         root_extent - The logical block of the root directory.
         tm - The creation time in seconds since the epoch, or None for the
              current time.
        Returns:
         Nothing.
        '''
        if self._initialized:
            raise isowrapexception.IsoWrapInternalError('This Primary Volume Descriptor is already initialized')

        if tm is None:
            tm = time.time()

        self.system_identifier = utils.encode_space_pad(b'', 32)
        self.volume_identifier = utils.encode_space_pad(vol_ident, 32)

        self.space_size = space_size
        self.set_size = 1
        self.seqnum = 1
        self.log_block_size = log_block_size
        self.path_tbl_size = path_tbl_size
        self.path_table_location_le = path_table_location_le
        self.path_table_location_be = path_table_location_be
        # No optional path tables are ever written.
        self.optional_path_table_location_le = 0
        self.optional_path_table_location_be = 0

        self.root_dir_record = dr.DirectoryRecord()
        self.root_dir_record.new_root(root_extent, log_block_size, tm,
                                      self.seqnum)

        self.volume_set_identifier = utils.encode_space_pad(b'', 128)
        self.publisher_identifier = utils.encode_space_pad(b'', 128)
        self.preparer_identifier = utils.encode_space_pad(b'', 128)
        self.application_identifier = utils.encode_space_pad(b'', 128)
        self.copyright_file_identifier = utils.encode_space_pad(b'', 37)
        self.abstract_file_identifier = utils.encode_space_pad(b'', 37)
        self.bibliographic_file_identifier = utils.encode_space_pad(b'', 37)

        self.volume_creation_date = dates.VolumeDescriptorDate()
        self.volume_creation_date.new(tm)
        self.volume_modification_date = dates.VolumeDescriptorDate()
        self.volume_modification_date.new(tm)
        self.volume_expiration_date = dates.VolumeDescriptorDate()
        self.volume_expiration_date.new()
        self.volume_effective_date = dates.VolumeDescriptorDate()
        self.volume_effective_date.new()

        self.file_structure_version = 1

        self._initialized = True

    def record(self):
        '''
        A method to generate the string representing this Volume Descriptor.

        Parameters:
         None.
        Returns:
         A string representing this Volume Descriptor.
        '''
        if not self._initialized:
            raise isowrapexception.IsoWrapInternalError('This Primary Volume Descriptor is not initialized')

        return struct.pack(self.FMT,
                           VOLUME_DESCRIPTOR_TYPE_PRIMARY,
                           STANDARD_IDENTIFIER,
                           VOLUME_DESCRIPTOR_VERSION,
                           0,
                           self.system_identifier,
                           self.volume_identifier,
                           b'\x00' * 8,
                           utils.both_32bit(self.space_size),
                           b'\x00' * 32,
                           utils.both_16bit(self.set_size),
                           utils.both_16bit(self.seqnum),
                           utils.both_16bit(self.log_block_size),
                           utils.both_32bit(self.path_tbl_size),
                           utils.le_32bit(self.path_table_location_le),
                           utils.le_32bit(self.optional_path_table_location_le),
                           utils.be_32bit(self.path_table_location_be),
                           utils.be_32bit(self.optional_path_table_location_be),
                           self.root_dir_record.record(),
                           self.volume_set_identifier,
                           self.publisher_identifier,
                           self.preparer_identifier,
                           self.application_identifier,
                           self.copyright_file_identifier,
                           self.abstract_file_identifier,
                           self.bibliographic_file_identifier,
                           self.volume_creation_date.record(),
                           self.volume_modification_date.record(),
                           self.volume_expiration_date.record(),
                           self.volume_effective_date.record(),
                           self.file_structure_version, 0,
                           b'\x00' * 512,
                           b'\x00' * 653)


class VolumeDescriptorSetTerminator(object):
    '''
    A class that represents a Volume Descriptor Set Terminator.  The VDST
    signals the end of volume descriptors on the ISO.
    '''
    __slots__ = ('_initialized',)

    FMT = '<B5sB2041s'

    def __init__(self):
        self._initialized = False

    def new(self):
        '''
        A method to create a new Volume Descriptor Set Terminator.

        Parameters:
         None.
        Returns:
         Nothing.
        '''
        if self._initialized:
            raise isowrapexception.IsoWrapInternalError('Volume Descriptor Set Terminator already initialized')

        self._initialized = True

    def record(self):
        '''
        A method to generate a string representing this Volume Descriptor Set
        Terminator.

        Parameters:
         None.
        Returns:
         String representing this Volume Descriptor Set Terminator.
        '''
        if not self._initialized:
            raise isowrapexception.IsoWrapInternalError('Volume Descriptor Set Terminator not initialized')
        return struct.pack(self.FMT, VOLUME_DESCRIPTOR_TYPE_SET_TERMINATOR,
                           STANDARD_IDENTIFIER, VOLUME_DESCRIPTOR_VERSION,
                           b'\x00' * 2041)


def pvd_factory(vol_ident, space_size, log_block_size, path_tbl_size,
                path_table_location_le, path_table_location_be, root_extent,
                tm=None):
    '''
    An internal function to create a Primary Volume Descriptor.

    Parameters:
     vol_ident - The volume identification string; truncated to 32 bytes.
     space_size - The total number of logical blocks in the volume.
     log_block_size - The logical block size to use for the ISO.
     path_tbl_size - The size of the path table, in bytes.
     path_table_location_le - The logical block of the little endian path table.
     path_table_location_be - The logical block of the big endian path table.
     root_extent - The logical block of the root directory.
     tm - The creation time in seconds since the epoch, or None for now.
    Returns:
     The newly created Primary Volume Descriptor.
    '''
    pvd = PrimaryVolumeDescriptor()
    pvd.new(vol_ident, space_size, log_block_size, path_tbl_size,
            path_table_location_le, path_table_location_be, root_extent, tm)
    return pvd


def vdst_factory():
    '''
    An internal function to create a new Volume Descriptor Set Terminator.

    Parameters:
     None.
    Returns:
     The newly created Volume Descriptor Set Terminator.
    '''
    vdst = VolumeDescriptorSetTerminator()
    vdst.new()
    return vdst
