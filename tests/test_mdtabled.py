import contextlib
import io
import json
import os
import shutil
import tempfile
import unittest

import mdtabled

from fixtures import MULTIPLE


class MainTest(unittest.TestCase):
    def setUp(self):
        self.temp = tempfile.mkdtemp()
        self.path = os.path.join(self.temp, 'mdstat')
        with open(self.path, 'w') as f:
            f.write(MULTIPLE)

        self.argv = ['-f', os.path.join(self.temp, 'missing.yml'), '-s', self.path]

    def tearDown(self):
        shutil.rmtree(self.temp)

    def run_main(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = mdtabled.main(self.argv + list(argv))

        return code, out.getvalue()

    def test_print_table(self):
        code, text = self.run_main('md_personalities')

        self.assertEqual(0, code)
        self.assertEqual('name\nraid1\nraid0\nlinear\nmultipath\nraid6\nraid5\nraid4\nraid10\n', text)

    def test_print_json(self):
        code, text = self.run_main('-j', 'md_devices')
        rows = json.loads(text)

        self.assertEqual(['md125', 'md126', 'md127'], [row['device_name'] for row in rows])
        self.assertEqual('8.4% (164198528/1953382400)', rows[2]['discovery_progress'])

    def test_print_several_tables(self):
        code, text = self.run_main('md_drives', 'md_personalities')

        self.assertTrue(text.startswith('md_device_name\tdrive_name\tstatus\n'))
        self.assertIn('\nname\nraid1\n', text)

    def test_unknown_table(self):
        with self.assertRaises(SystemExit) as e:
            self.run_main('md_nothing')

        self.assertEqual(2, e.exception.code)
