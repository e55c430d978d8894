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
import sys

import numpy as np
from PIL import Image, UnidentifiedImageError

from .status import MalformedHeaderError, IOFailureError


def load_image(path):
    """Open an image with Pillow; ``-`` reads it from stdin."""
    try:
        if path == "-" or path == "/dev/stdin":
            return Image.open(io.BytesIO(sys.stdin.buffer.read()))
        return Image.open(path)
    except UnidentifiedImageError as e:
        raise MalformedHeaderError(str(e))
    except OSError as e:
        raise IOFailureError(str(e))


def image_rows(image):
    """Yield rows of 16-bit RGBA pixels for a Pillow image.

    8-bit channels are widened by 257 so that 255 becomes 65535.
    """
    if image.mode != 'RGBA':
        image = image.convert('RGBA')
    pixels = np.asarray(image, dtype=np.uint16) * 257
    for row in pixels:
        yield row
