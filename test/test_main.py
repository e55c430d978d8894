import io
import os
import shutil
import struct
import tempfile
import unittest
from unittest import mock

from PIL import Image

from ff2sixel.__main__ import main
from ff2sixel.farbfeld import pack_header


class MainTest(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.infile = os.path.join(self.tmpdir, 'in.ff')
        self.outfile = os.path.join(self.tmpdir, 'out.six')

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _run(self, *args):
        with mock.patch('sys.stderr', new_callable=io.StringIO) as stderr:
            status = main(['ff2sixel'] + list(args))
        return status, stderr.getvalue()

    def _write_input(self, data):
        with open(self.infile, 'wb') as f:
            f.write(data)

    def _read_output(self):
        with open(self.outfile, 'rb') as f:
            return f.read()

    def test_convert(self):
        self._write_input(pack_header(1, 2)
                          + struct.pack('>8H', 0, 65535, 0, 65535, 0, 65535, 0, 65535))
        status, err = self._run('-i', self.infile, '-o', self.outfile)
        self.assertEqual((status, err), (0, ''))
        self.assertEqual(self._read_output(), b'\x1bPq"1;1;1;2\n#0;2;0;99;0B-\x1b\\')

    def test_pillow_input(self):
        path = os.path.join(self.tmpdir, 'in.png')
        Image.new('RGBA', (1, 1), (0, 255, 0, 255)).save(path)
        status, _ = self._run('-P', '-i', path, '-o', self.outfile)
        self.assertEqual(status, 0)
        self.assertEqual(self._read_output(), b'\x1bPq"1;1;1;1\n#0;2;0;99;0@-\x1b\\')

    def test_errors_are_reported(self):
        self._write_input(b'png?' + bytes(12))
        status, err = self._run('-i', self.infile, '-o', self.outfile)
        self.assertEqual(status, 1)
        self.assertEqual(err, 'ff2sixel: runtime error: malformed header: invalid magic value\n')

        self._write_input(pack_header(4, 4) + bytes(8))
        status, err = self._run('-i', self.infile, '-o', self.outfile)
        self.assertEqual(status, 1)
        self.assertTrue(err.startswith('ff2sixel: runtime error: unexpected end of file'), err)

    def test_verbose(self):
        self._write_input(pack_header(1, 1) + struct.pack('>4H', 1, 1, 1, 65535))
        with mock.patch('logging.basicConfig') as basic_config:
            status, _ = self._run('-v', '-i', self.infile, '-o', self.outfile)
        self.assertEqual(status, 0)
        basic_config.assert_called_once()

    def test_usage(self):
        with mock.patch('sys.stderr', new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as cm:
                main(['ff2sixel', 'extra'])
        self.assertEqual(cm.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
