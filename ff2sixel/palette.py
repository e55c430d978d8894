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

from collections import namedtuple

import numpy as np

PALETTE_SIZE = 256

Color = namedtuple('Color', ['red', 'green', 'blue'])


def quantize_row(row):
    """Derive sixel percentage colors for one row of 16-bit RGBA pixels.

    The row is premultiplied against a black background and rescaled
    from 0..65535 down to 0..100. Returns a list holding a :class:`Color`
    per column, or ``None`` where the pixel is fully transparent.
    """
    pixels = np.asarray(row, dtype=np.int64).reshape(-1, 4)
    alpha = pixels[:, 3:4]
    premultiplied = (pixels[:, :3] * alpha) >> 16
    percent = premultiplied * 100 // 65536
    colors = []
    for visible, (r, g, b) in zip((alpha[:, 0] != 0).tolist(), percent.tolist()):
        colors.append(Color(r, g, b) if visible else None)
    return colors


class PaletteEntry(object):

    __slots__ = ('color', 'introduced', 'used')

    def __init__(self):
        self.color = Color(0, 0, 0)
        self.introduced = False  # index alone is enough to reference it
        self.used = False        # holds a live color in this generation

    def __repr__(self):
        return "PaletteEntry(color=%r, introduced=%r, used=%r)" % (
            self.color, self.introduced, self.used)


class Palette(object):
    """Fixed table of sixel color registers.

    ``selected`` is the register currently active in the output stream,
    or ``None`` when nothing has been selected or the selected register
    has been handed to another color.
    """

    def __init__(self, size=PALETTE_SIZE):
        self.entries = [PaletteEntry() for _ in range(size)]
        self.selected = None

    def __len__(self):
        return len(self.entries)

    def __getitem__(self, index):
        return self.entries[index]

    def alloc(self, color):
        """Return the register index for ``color``, or None when full.

        A full palette is left untouched; the caller flushes, resets and
        retries.
        """
        for index, entry in enumerate(self.entries):
            if entry.color == color:
                entry.used = True
                return index
            if not entry.used:
                break
        else:
            return None

        if self.selected == index:
            self.selected = None
        entry.color = color
        entry.introduced = False
        entry.used = True
        return index

    def reset_used(self):
        for entry in self.entries:
            entry.used = False

    def count_used(self):
        return sum(1 for entry in self.entries if entry.used)

    def select(self, index, output):
        """Make register ``index`` the active color on ``output``."""
        if self.selected == index:
            return
        entry = self.entries[index]
        output.write("#%d" % index)
        if not entry.introduced:
            output.write(";2;%d;%d;%d" % entry.color)
            entry.introduced = True
        self.selected = index
