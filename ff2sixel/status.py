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

SIXEL_OK              = 0x0000
SIXEL_FALSE           = 0x1000

SIXEL_RUNTIME_ERROR   = (SIXEL_FALSE         | 0x0100)  # runtime error
SIXEL_LOGIC_ERROR     = (SIXEL_FALSE         | 0x0200)  # logic error
SIXEL_LIBC_ERROR      = (SIXEL_FALSE         | 0x0400)  # errors reported by the byte source

SIXEL_BAD_ALLOCATION  = (SIXEL_RUNTIME_ERROR | 0x0001)  # grid allocation failed
SIXEL_BAD_ARGUMENT    = (SIXEL_RUNTIME_ERROR | 0x0002)  # bad argument detected
SIXEL_BAD_INPUT       = (SIXEL_RUNTIME_ERROR | 0x0003)  # bad input detected
SIXEL_BAD_HEADER      = (SIXEL_RUNTIME_ERROR | 0x0004)  # bad magic or geometry
SIXEL_TRUNCATED_INPUT = (SIXEL_RUNTIME_ERROR | 0x0005)  # unexpected end of file


def SIXEL_SUCCEEDED(status):
    return (((status) & 0x1000) == 0)

def SIXEL_FAILED(status):
    return (((status) & 0x1000) != 0)


_MESSAGES = {
    SIXEL_OK: "succeeded",
    SIXEL_FALSE: "unexpected error (SIXEL_FALSE)",
    SIXEL_RUNTIME_ERROR: "runtime error",
    SIXEL_LOGIC_ERROR: "logic error",
    SIXEL_LIBC_ERROR: "read error",
    SIXEL_BAD_ALLOCATION: "runtime error: bad allocation error",
    SIXEL_BAD_ARGUMENT: "runtime error: bad argument detected",
    SIXEL_BAD_INPUT: "runtime error: bad input detected",
    SIXEL_BAD_HEADER: "runtime error: malformed header",
    SIXEL_TRUNCATED_INPUT: "runtime error: unexpected end of file",
}


def sixel_helper_format_error(status):
    """Return a human readable message for a status code."""
    message = _MESSAGES.get(status)
    if message is None:
        if SIXEL_SUCCEEDED(status):
            message = "succeeded"
        else:
            message = "unexpected error (status 0x%04x)" % status
    return message


class SixelError(RuntimeError):
    """Base class of every unrecoverable conversion failure."""

    status = SIXEL_FALSE

    def __init__(self, detail=None, status=None):
        if status is not None:
            self.status = status
        message = sixel_helper_format_error(self.status)
        if detail:
            message = "%s: %s" % (message, detail)
        super().__init__(message)
        self.detail = detail


class MalformedHeaderError(SixelError):
    status = SIXEL_BAD_HEADER


class TruncatedInputError(SixelError):
    status = SIXEL_TRUNCATED_INPUT


class IOFailureError(SixelError):
    status = SIXEL_LIBC_ERROR


class AllocationFailureError(SixelError):
    status = SIXEL_BAD_ALLOCATION
