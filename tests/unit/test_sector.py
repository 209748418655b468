import pytest
import os
import sys
from io import BytesIO

prefix = '.'
for i in range(0, 3):
    if os.path.isdir(os.path.join(prefix, 'isowrap')):
        sys.path.insert(0, prefix)
        break
    else:
        prefix = '../' + prefix

import isowrap.sector
import isowrap.isowrapexception

def test_sector_write_pads():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    with cursor.next_sector() as sw:
        sw.write(b'abc')
    assert(out.getvalue() == b'abc' + b'\x00' * 2045)

def test_sector_write_full():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    with cursor.next_sector() as sw:
        sw.write(b'\xaa' * 2048)
        assert(sw.remaining() == 0)
    assert(out.getvalue() == b'\xaa' * 2048)

def test_sector_write_overflow():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    sw = cursor.next_sector()
    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        sw.write(b'\x00' * 2049)
    assert(str(excinfo.value) == 'Write of 2049 bytes overflows sector 0 (2048 bytes free)')

def test_sector_write_overflow_after_partial():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    sw = cursor.next_sector()
    sw.write(b'\x00' * 2000)
    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        sw.write(b'\x00' * 49)
    assert(str(excinfo.value) == 'Write of 49 bytes overflows sector 0 (48 bytes free)')

def test_sector_write_after_close():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    sw = cursor.next_sector()
    sw.close()
    assert(sw.closed())
    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        sw.write(b'a')
    assert(str(excinfo.value) == 'Sector 0 is already closed')

def test_sector_close_twice():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    sw = cursor.next_sector()
    sw.close()
    sw.close()
    assert(len(out.getvalue()) == 2048)

def test_sector_write_zeros():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    with cursor.next_sector() as sw:
        sw.write(b'\x01')
        sw.write_zeros(3)
        sw.write(b'\x02')
    assert(out.getvalue()[:6] == b'\x01\x00\x00\x00\x02\x00')

def test_sector_pad_with_zeros():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    sw = cursor.next_sector()
    sw.write(b'\xff')
    sw.pad_with_zeros()
    assert(sw.remaining() == 0)
    sw.close()
    assert(out.getvalue() == b'\xff' + b'\x00' * 2047)

def test_sector_next_sector_closes_previous():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    sw = cursor.next_sector()
    sw.write(b'x')
    assert(out.getvalue() == b'')
    cursor.next_sector()
    assert(sw.closed())
    assert(out.getvalue() == b'x' + b'\x00' * 2047)
    assert(cursor.current_sector() == 1)

def test_sector_current_sector_none_opened():
    cursor = isowrap.sector.SectorCursor(BytesIO(), 2048)
    with pytest.raises(isowrap.isowrapexception.IsoWrapInternalError) as excinfo:
        cursor.current_sector()
    assert(str(excinfo.value) == 'No sector has been opened yet')

def test_sector_write_reserved():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    cursor.write_reserved(16)
    assert(out.getvalue() == b'\x00' * 16 * 2048)
    assert(cursor.next_sector_num() == 16)
    cursor.next_sector()
    assert(cursor.current_sector() == 16)
    assert(cursor.next_sector_num() == 17)

def test_sector_finish():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    cursor.write_reserved(2)
    sw = cursor.next_sector()
    sw.write(b'end')
    assert(cursor.finish() == 3)
    assert(len(out.getvalue()) == 3 * 2048)
    assert(out.getvalue()[2 * 2048:2 * 2048 + 3] == b'end')

def test_sector_exception_discards_sector():
    out = BytesIO()
    cursor = isowrap.sector.SectorCursor(out, 2048)
    with pytest.raises(ValueError):
        with cursor.next_sector() as sw:
            sw.write(b'partial')
            raise ValueError('boom')
    cursor.finish()
    assert(out.getvalue() == b'')

def test_sector_write_cb():
    lengths = []
    cursor = isowrap.sector.SectorCursor(BytesIO(), 2048, lengths.append)
    cursor.write_reserved(1)
    with cursor.next_sector() as sw:
        sw.write(b'a')
    assert(lengths == [2048, 2048])

class FullDisk(object):
    def write(self, data):
        raise OSError('No space left on device')

def test_sector_output_error():
    cursor = isowrap.sector.SectorCursor(FullDisk(), 2048)
    with pytest.raises(isowrap.isowrapexception.IsoWrapIOError) as excinfo:
        cursor.write_reserved(1)
    assert(str(excinfo.value) == 'Could not write to the output file: No space left on device')
