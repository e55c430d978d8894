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

import io
import logging
import sys

from .farbfeld import FarbfeldReader, check_geometry, read_header, PIXEL_SIZE
from .image import image_rows, load_image
from .output import SixelOutput
from .palette import Palette, PALETTE_SIZE, quantize_row
from .span import flush_spans
from .status import (SIXEL_BAD_ARGUMENT, SixelError, AllocationFailureError,
                     IOFailureError, TruncatedInputError)

logger = logging.getLogger(__name__)

SIXEL_OPTFLAG_INPUT   = 'i'  # -i, --input: specify input file name.
SIXEL_OPTFLAG_OUTPUT  = 'o'  # -o, --output: specify output file name.
SIXEL_OPTFLAG_OUTFILE = 'o'  # -o, --outfile: specify output file name.
SIXEL_OPTFLAG_VERBOSE = 'v'  # -v, --verbose: show debugging info

BAND_HEIGHT = 6


class EncoderState(object):
    """Everything one conversion mutates: palette, occupancy grid, output."""

    def __init__(self, width, output):
        check_geometry(width, 0)
        self.width = width
        try:
            self.occupancy = bytearray(PALETTE_SIZE * width)
        except MemoryError:
            raise AllocationFailureError("cannot allocate %d x %d occupancy grid"
                                         % (PALETTE_SIZE, width))
        self.palette = Palette()
        self.output = output

    def mark(self, slot, row_in_band, column):
        self.occupancy[slot * self.width + column] |= 1 << row_in_band

    def flush(self):
        return flush_spans(self)


def encode_pixels(rows, width, height, output):
    """Encode ``height`` rows of 16-bit RGBA pixels as one sixel image.

    ``rows`` yields one ``(width, 4)`` array-like per image row, top to
    bottom. The palette is flushed in the middle of a band whenever a
    257th distinct color shows up.
    """
    check_geometry(width, height)
    state = EncoderState(width, output)
    palette = state.palette
    rows = iter(rows)

    output.begin(width, height)
    for y in range(0, height, BAND_HEIGHT):
        for i in range(min(BAND_HEIGHT, height - y)):
            try:
                row = next(rows)
            except StopIteration:
                raise TruncatedInputError("missing row %d of %d" % (y + i, height))
            colors = quantize_row(row)
            if len(colors) != width:
                raise TruncatedInputError("row %d has %d of %d pixels"
                                          % (y + i, len(colors), width))
            for x, color in enumerate(colors):
                if color is None:
                    continue
                slot = palette.alloc(color)
                if slot is None:
                    logger.debug("palette exhausted at %d,%d", x, y + i)
                    state.flush()
                    slot = palette.alloc(color)
                    assert slot is not None, "palette still full after flush"
                state.mark(slot, i, x)
        state.flush()
        output.next_band()
        output.drain()
        logger.debug("band %d/%d done", y // BAND_HEIGHT + 1,
                     (height + BAND_HEIGHT - 1) // BAND_HEIGHT)
    output.end()
    return state


def _write_file(data, f):
    f.write(data)


class Encoder(object):

    def __init__(self):
        self._infile = "-"
        self._outfile = "-"

    def setopt(self, flag, arg=None):
        if flag == SIXEL_OPTFLAG_INPUT:
            self._infile = arg or "-"
        elif flag == SIXEL_OPTFLAG_OUTPUT:
            self._outfile = arg or "-"
        elif flag == SIXEL_OPTFLAG_VERBOSE:
            logging.getLogger(__package__).setLevel(logging.DEBUG)
        else:
            raise SixelError("unknown option %r" % (flag,), status=SIXEL_BAD_ARGUMENT)

    def _encode_to_output(self, rows, width, height):
        if self._outfile == "-":
            return encode_pixels(rows, width, height, SixelOutput())
        try:
            f = open(self._outfile, "wb")
        except OSError as e:
            raise IOFailureError(str(e))
        with f:
            return encode_pixels(rows, width, height, SixelOutput(_write_file, f))

    def encode(self, filename=None):
        """Encode a farbfeld image read from ``filename`` (``-`` is stdin)."""
        if filename is None:
            filename = self._infile
        if filename == "-":
            return self._encode_stream(sys.stdin.buffer)
        try:
            f = open(filename, "rb")
        except OSError as e:
            raise IOFailureError(str(e))
        with f:
            return self._encode_stream(f)

    def _encode_stream(self, stream):
        width, height = read_header(stream)
        logger.debug("farbfeld image %dx%d", width, height)
        reader = FarbfeldReader(stream, width)
        return self._encode_to_output(reader.rows(height), width, height)

    def encode_bytes(self, buf, width, height):
        """Encode a farbfeld pixel body (no header) held in memory."""
        check_geometry(width, height)
        expected = width * height * PIXEL_SIZE
        if len(buf) < expected:
            raise TruncatedInputError("buf is too short : %d < %d * %d * %d"
                                      % (len(buf), width, height, PIXEL_SIZE))
        reader = FarbfeldReader(io.BytesIO(buf), width)
        return self._encode_to_output(reader.rows(height), width, height)

    def encode_image(self, image=None):
        """Encode a Pillow image, or the input file opened with Pillow."""
        if image is None:
            image = load_image(self._infile)
        try:
            image.load()
        except OSError as e:
            raise IOFailureError(str(e))
        width, height = image.size
        logger.debug("%s image %dx%d", image.mode, width, height)
        return self._encode_to_output(image_rows(image), width, height)
