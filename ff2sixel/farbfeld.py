#!/usr/bin/env python
#
# Copyright (c) 2024 The ff2sixel authors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of
# this software and associated documentation files (the "Software"), to deal in
# the Software without restriction, including without limitation the rights to
# use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of
# the Software, and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS
# FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR
# COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER
# IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
#

"""Reader for farbfeld images.

A farbfeld file is the magic ``farbfeld``, width and height as
big-endian 32-bit integers, then ``width * height`` pixels of four
big-endian 16-bit channels (red, green, blue, alpha), row by row.
"""

import struct
import sys

import numpy as np

from .palette import PALETTE_SIZE
from .status import MalformedHeaderError, TruncatedInputError, IOFailureError

MAGIC = b'farbfeld'
HEADER = struct.Struct('>8sII')
PIXEL_SIZE = 8

PIXEL_DTYPE = np.dtype('>u2')


def check_geometry(width, height):
    """Reject geometry whose occupancy grid size cannot be computed."""
    if width < 0 or height < 0:
        raise MalformedHeaderError("negative image dimensions")
    if width > sys.maxsize // PALETTE_SIZE:
        raise MalformedHeaderError("row length integer overflow")


def _read_exact(stream, size):
    try:
        data = stream.read(size)
    except OSError as e:
        raise IOFailureError(str(e))
    if data is None or len(data) != size:
        raise TruncatedInputError()
    return data


def pack_header(width, height):
    return HEADER.pack(MAGIC, width, height)


def read_header(stream):
    """Read and validate a farbfeld header, returning ``(width, height)``."""
    magic, width, height = HEADER.unpack(_read_exact(stream, HEADER.size))
    if magic != MAGIC:
        raise MalformedHeaderError("invalid magic value")
    check_geometry(width, height)
    return width, height


class FarbfeldReader(object):
    """Pull pixel rows out of a farbfeld body one at a time."""

    def __init__(self, stream, width):
        self.stream = stream
        self.width = width

    def read_row(self):
        data = _read_exact(self.stream, self.width * PIXEL_SIZE)
        return np.frombuffer(data, dtype=PIXEL_DTYPE).reshape(self.width, 4)

    def rows(self, height):
        for _ in range(height):
            yield self.read_row()
