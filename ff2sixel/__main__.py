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

"""ff2sixel: print an image as sixel graphics."""

import argparse
import logging
import sys

from .encoder import (Encoder, SIXEL_OPTFLAG_INPUT, SIXEL_OPTFLAG_OUTPUT,
                      SIXEL_OPTFLAG_VERBOSE)
from .status import SixelError


def main(argv=None):
    if argv is None:
        argv = sys.argv
    parser = argparse.ArgumentParser(
        prog='ff2sixel',
        description='Convert a farbfeld image read from stdin to sixel.')
    parser.add_argument('-i', '--input', default='-',
                        help='input file name (default: stdin)')
    parser.add_argument('-o', '--output', '--outfile', default='-',
                        help='output file name (default: stdout)')
    parser.add_argument('-P', '--pillow', action='store_true',
                        help='load the input with Pillow instead of as farbfeld')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='show debugging info')
    ns = parser.parse_args(argv[1:])

    logging.basicConfig(format='%(name)s: %(message)s')

    encoder = Encoder()
    encoder.setopt(SIXEL_OPTFLAG_INPUT, ns.input)
    encoder.setopt(SIXEL_OPTFLAG_OUTPUT, ns.output)
    if ns.verbose:
        encoder.setopt(SIXEL_OPTFLAG_VERBOSE)
    try:
        if ns.pillow:
            encoder.encode_image()
        else:
            encoder.encode()
    except SixelError as e:
        sys.stderr.write('ff2sixel: %s\n' % e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
