# Copyright 2017 Google Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for char_data.py."""

import os
import tempfile
import unittest

from jointools import char_data


HEADER = '#USV;General;Bidi;Joining;Decomposition;Mirrored;Shaping;Name'


class ParseCharDataTest(unittest.TestCase):
    """Tests for reading the property extract."""

    def test_fields_from_header(self):
        """Tests that the header names the fields."""
        table = char_data.parse_char_data([
            HEADER,
            '0644;Lo;AL;D;;;D;ARABIC LETTER LAM',
        ])
        self.assertEqual([0x644], list(table.keys()))
        record = table[0x644]
        self.assertEqual('0644', record['usv'])
        self.assertEqual('Lo', record['general'])
        self.assertEqual('AL', record['bidi'])
        self.assertEqual('D', record['joining'])
        self.assertEqual('ARABIC LETTER LAM', record['name'])

    def test_header_change(self):
        """A later header line replaces the field names."""
        table = char_data.parse_char_data([
            '#usv;joining',
            '0627;R',
            '#Joining;USV',
            'D;0628',
        ])
        self.assertEqual('R', char_data.joining_type(table, 0x627))
        self.assertEqual('D', char_data.joining_type(table, 0x628))

    def test_line_endings_and_blank_lines(self):
        """Tests CRLF line ends and blank lines."""
        table = char_data.parse_char_data([
            '#usv;joining\r\n',
            '\n',
            '0627;R  \r\n',
        ])
        self.assertEqual({'usv': '0627', 'joining': 'R'}, table[0x627])

    def test_last_one_wins(self):
        """Tests that a repeated usv keeps the last record."""
        table = char_data.parse_char_data([
            '#usv;joining',
            '0640;U',
            '0640;C',
        ])
        self.assertEqual(1, len(table))
        self.assertEqual('C', char_data.joining_type(table, 0x640))

    def test_keys_are_ints(self):
        """Tests that the table is keyed by int code point."""
        table = char_data.parse_char_data([
            '#usv;joining',
            '0000;U',
            '10FFFD;U',
            'fe70;T',
        ])
        for key in table:
            self.assertIsInstance(key, int)
            self.assertGreaterEqual(key, 0)
        self.assertEqual({0, 0x10FFFD, 0xFE70}, set(table))

    def test_empty_usv_fails(self):
        """Tests that an empty usv is fatal."""
        lines = ['#usv;joining', '0627;R', ';D']
        with self.assertRaises(ValueError) as cm:
            char_data.parse_char_data(lines, source='props.txt')
        self.assertIn('props.txt:3', str(cm.exception))
        # the same input fails the same way again
        self.assertRaises(ValueError, char_data.parse_char_data, lines)

    def test_missing_usv_field_fails(self):
        """Tests that a record with no usv field is fatal."""
        self.assertRaises(
            ValueError, char_data.parse_char_data, ['#code;joining', '0627;R'])
        self.assertRaises(ValueError, char_data.parse_char_data, ['0627;R'])

    def test_bad_usv_fails(self):
        """Tests that a usv that is not hex is fatal."""
        self.assertRaises(
            ValueError, char_data.parse_char_data, ['#usv;joining', 'xyz;R'])
        self.assertRaises(
            ValueError, char_data.parse_char_data, ['#usv;joining', '-5;R'])

    def test_joining_type_missing(self):
        """Tests joining_type for absent characters and values."""
        table = char_data.parse_char_data([
            '#usv;general;joining',
            '0660;Nd;',
            '0020;Zs',
        ])
        self.assertIsNone(char_data.joining_type(table, 0x660))
        self.assertIsNone(char_data.joining_type(table, 0x20))
        self.assertIsNone(char_data.joining_type(table, 0x644))


class LoadCharDataTest(unittest.TestCase):
    """Tests for loading the property extract from a file."""

    def test_load(self):
        """Tests loading a temporary file."""
        fd, filepath = tempfile.mkstemp(suffix='.txt')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(HEADER + '\n')
                f.write('0644;Lo;AL;D;;;D;ARABIC LETTER LAM\n')
                f.write('0648;Lo;AL;R;;;R;ARABIC LETTER WAW\n')
            table = char_data.load_char_data(filepath)
        finally:
            os.remove(filepath)
        self.assertEqual('D', char_data.joining_type(table, 0x644))
        self.assertEqual('R', char_data.joining_type(table, 0x648))

    def test_load_missing_file(self):
        """Tests that a missing file is an IOError."""
        self.assertRaises(
            IOError, char_data.load_char_data, '/nonexistent/ucd_props.txt')

    def test_packaged_data(self):
        """Tests that the packaged extract loads."""
        filepath = os.path.join(
            os.path.dirname(char_data.__file__), 'data', 'ucd_props.txt')
        table = char_data.load_char_data(filepath)
        self.assertEqual('D', char_data.joining_type(table, 0x628))
        self.assertEqual('R', char_data.joining_type(table, 0x627))
        self.assertEqual('U', char_data.joining_type(table, 0x621))


if __name__ == '__main__':
    unittest.main()
