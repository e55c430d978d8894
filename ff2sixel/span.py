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

import logging
import re
from collections import namedtuple

from .palette import PALETTE_SIZE

logger = logging.getLogger(__name__)

_RUN = re.compile(b'[^\x00]+')

# ``row`` is a writable view of the slot's occupancy row; columns are
# absolute, so ``row[lo]`` is the first sixel of the span.
Span = namedtuple('Span', ['slot', 'lo', 'hi', 'row'])


def build_spans(occupancy, width):
    """Collect the runs of occupied columns of every palette slot.

    Spans are ordered by ``lo``; on equal ``lo`` the one reaching further
    right comes first. Spans equal on both keep palette order.
    """
    spans = []
    view = memoryview(occupancy)
    for slot in range(PALETTE_SIZE):
        start = slot * width
        row = None
        for match in _RUN.finditer(occupancy, start, start + width):
            if row is None:
                row = view[start:start + width]
            spans.append(Span(slot, match.start() - start, match.end() - start, row))
    spans.sort(key=lambda span: (span.lo, -span.hi))
    return spans


def flush_spans(state):
    """Draw everything accumulated in the occupancy grid.

    Spans are drawn left to right; a span starting left of the cursor is
    kept for the next sub-line. Every drawn column is cleared in the
    grid, and once the grid is empty all palette slots are released.
    Returns the number of sub-lines written.
    """
    output = state.output
    palette = state.palette
    spans = build_spans(state.occupancy, state.width)
    nspans = len(spans)
    lines = 0
    while spans:
        if output.cursor_x != 0:
            output.carriage_return()
        remaining = []
        for span in spans:
            if span.lo < output.cursor_x:
                remaining.append(span)
                continue
            palette.select(span.slot, output)
            while output.cursor_x < span.lo:
                output.put(0)
            row = span.row
            for x in range(span.lo, span.hi):
                output.put(row[x])
                row[x] = 0
            output.flush_sixels()
        spans = remaining
        lines += 1
    palette.reset_used()
    if nspans:
        logger.debug("flushed %d spans in %d sub-lines", nspans, lines)
    return lines
