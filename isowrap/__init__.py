"""
isowrap is a pure python library to wrap one file, or a handful of files, in
a plain ISO9660 image, placed directly in the root directory.
"""
from .isowrap import IsoWrap, write_buffer, write_file, write_files, write_stream  # NOQA
