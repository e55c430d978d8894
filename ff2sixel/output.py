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

import sys

DCS = '\x1bP'
ST = '\x1b\\'


def _write_stdout(data, priv):
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


class SixelOutput(object):
    """Sixel command writer with a run-length buffer and column cursor.

    Text is collected internally and handed to ``fn_write(data, priv)``
    as bytes each time :meth:`drain` is called. Nothing handed over is
    ever taken back.
    """

    def __init__(self, fn_write=None, priv=None):
        self._fn_write = fn_write if fn_write is not None else _write_stdout
        self._priv = priv
        self._pending = []
        self.cursor_x = 0
        self._sixel_char = None
        self._sixel_count = 0

    def write(self, text):
        self._pending.append(text)

    def drain(self):
        if not self._pending:
            return
        data = ''.join(self._pending).encode('ascii')
        self._pending = []
        self._fn_write(data, self._priv)

    def put(self, sixel):
        """Buffer one sixel (six vertical bits) and advance the cursor."""
        char = chr(0x3f + sixel)
        if char != self._sixel_char:
            self.flush_sixels()
        self._sixel_char = char
        self._sixel_count += 1
        self.cursor_x += 1

    def flush_sixels(self):
        # "!n" costs at least four characters, so shorter runs go out as is
        if self._sixel_count > 3:
            self.write("!%d%s" % (self._sixel_count, self._sixel_char))
        elif self._sixel_count:
            self.write(self._sixel_char * self._sixel_count)
        self._sixel_count = 0

    def carriage_return(self):
        self.write('$')
        self.cursor_x = 0

    def next_band(self):
        self.write('-')
        self.cursor_x = 0

    def begin(self, width, height):
        self.write('%sq"1;1;%d;%d\n' % (DCS, width, height))

    def end(self):
        self.write(ST)
        self.drain()
