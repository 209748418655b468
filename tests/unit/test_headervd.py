import pytest
import os
import sys
import struct

prefix = '.'
for i in range(0, 3):
    if os.path.isdir(os.path.join(prefix, 'isowrap')):
        sys.path.insert(0, prefix)
        break
    else:
        prefix = '../' + prefix

import isowrap.headervd
import isowrap.isowrapexception

TM = 1000000000.0

def make_pvd(vol_ident=b'SETUP.SH', space_size=22):
    return isowrap.headervd.pvd_factory(vol_ident, space_size, 2048, 2048,
                                        18, 19, 20, TM)

# PVD
def test_pvd_new_twice():
    pvd = make_pvd()

    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        pvd.new(b'SETUP.SH', 22, 2048, 2048, 18, 19, 20, TM)
    assert(str(excinfo.value) == 'This Primary Volume Descriptor is already initialized')

def test_pvd_record_not_initialized():
    pvd = isowrap.headervd.PrimaryVolumeDescriptor()

    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        pvd.record()
    assert(str(excinfo.value) == 'This Primary Volume Descriptor is not initialized')

def test_pvd_record_length():
    assert(len(make_pvd().record()) == 2048)

def test_pvd_record_header():
    data = make_pvd().record()
    assert(data[0:8] == b'\x01CD001\x01\x00')
    assert(data[8:40] == b' ' * 32)
    assert(data[40:72] == b'SETUP.SH' + b' ' * 24)
    assert(data[72:80] == b'\x00' * 8)
    assert(data[80:88] == b'\x16\x00\x00\x00\x00\x00\x00\x16')
    assert(data[88:120] == b'\x00' * 32)

def test_pvd_record_sizes_and_locations():
    data = make_pvd().record()
    assert(data[120:124] == b'\x01\x00\x00\x01')
    assert(data[124:128] == b'\x01\x00\x00\x01')
    assert(data[128:132] == b'\x00\x08\x08\x00')
    assert(data[132:140] == b'\x00\x08\x00\x00\x00\x00\x08\x00')
    assert(data[140:144] == b'\x12\x00\x00\x00')
    assert(data[144:148] == b'\x00' * 4)
    assert(data[148:152] == b'\x00\x00\x00\x13')
    assert(data[152:156] == b'\x00' * 4)

def test_pvd_record_root_directory():
    data = make_pvd().record()
    root = data[156:190]
    assert(root[0] == 34)
    assert(root[2:10] == b'\x14\x00\x00\x00\x00\x00\x00\x14')
    assert(root[10:18] == b'\x00\x08\x00\x00\x00\x00\x08\x00')
    assert(root[25] == 2)
    assert(root[32] == 1)
    assert(root[33:34] == b'\x00')

def test_pvd_record_identifiers():
    data = make_pvd().record()
    assert(data[190:702] == b' ' * 512)
    assert(data[702:813] == b' ' * 111)

def test_pvd_record_dates():
    data = make_pvd().record()
    assert(len(data[813:830]) == 17)
    assert(data[813:830] != b'0' * 16 + b'\x00')
    assert(data[813:830] == data[830:847])
    assert(data[847:864] == b'0' * 16 + b'\x00')
    assert(data[864:881] == b'0' * 16 + b'\x00')

def test_pvd_record_tail():
    data = make_pvd().record()
    assert(data[881] == 1)
    assert(data[882] == 0)
    assert(data[883:2048] == b'\x00' * 1165)

def test_pvd_volume_identifier_truncated():
    data = make_pvd(b'A' * 40).record()
    assert(data[40:72] == b'A' * 32)

def test_pvd_deterministic():
    assert(make_pvd().record() == make_pvd().record())

# VDST
def test_vdst_new_twice():
    vdst = isowrap.headervd.vdst_factory()

    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        vdst.new()
    assert(str(excinfo.value) == 'Volume Descriptor Set Terminator already initialized')

def test_vdst_record_not_initialized():
    vdst = isowrap.headervd.VolumeDescriptorSetTerminator()

    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        vdst.record()
    assert(str(excinfo.value) == 'Volume Descriptor Set Terminator not initialized')

def test_vdst_record():
    vdst = isowrap.headervd.vdst_factory()
    assert(vdst.record() == b'\xffCD001\x01' + b'\x00' * 2041)
