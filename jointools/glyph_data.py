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

"""Read a font's glyph list and group its glyphs by joining type.

The glyph list is tab-separated.  Its header line starts with the 'Name'
column and has an 'Order' column somewhere after it; the lowercased header
names the fields of the lines that follow.  The fields used here are the
glyph name ('name', or 'glyphsname' for GlyphsApp names), 'usv' (hex, blank
for unencoded glyphs) and 'fonts' (the letters of the families that have
the glyph, or '*' for all of them).
"""

import collections
import logging
import re

from jointools import char_data
from jointools import join_index
from jointools import joinconfig
from jointools import tool_utils

_log = logging.getLogger(__name__)

GLYPH_DATA_FILE = 'glyph_data.txt'
GLYPH_DATA_FALLBACK = 'glyph_data/glyph_data.txt'

WILDCARD = '*'

FAMILIES = collections.OrderedDict([
    ('h', 'Harmattan'),
    ('l', 'Lateef'),
    ('s', 'Scheherazade'),
])

_header_re = re.compile(r'Name\t.*Order')
_comment_re = re.compile(r'\s*#')
_name_re = re.compile(r'([^.]+?)(\..+)?$')


def resolve_family(family):
  """Returns the font id letter for a family letter or name.  None or ''
  means no family."""
  if not family:
    return None
  key = family.strip().lower()
  if key in FAMILIES:
    return key
  for font_id, name in FAMILIES.items():
    if key == name.lower():
      return font_id
  raise ValueError('unknown family "%s", expected one of %s' % (
      family, ', '.join(
          '%s (%s)' % (k, v) for k, v in FAMILIES.items())))


class FontSelector(object):
  """Decides which glyph list records belong to a font family."""

  def __init__(self, family=None):
    self.font_id = resolve_family(family)

  def matches(self, fonts):
    if self.font_id is None:
      return True
    fonts = fonts or ''
    return self.font_id in fonts or WILDCARD in fonts

  def __repr__(self):
    return 'FontSelector(%r)' % self.font_id


def split_name(name):
  """Returns (basename, extension) for a glyph name, or None if the name
  is malformed.  The extension keeps its leading '.'."""
  m = _name_re.match(name or '')
  if not m:
    return None
  return m.group(1), m.group(2) or ''


def parse_glyph_data(lines, char_table, selector, glyphsapp, diag):
  """Builds a JoinClassIndex from glyph list lines.

  Records for other families, repeated names, and malformed names are
  skipped.  Unencoded glyphs and characters with no joining type are
  remembered as seen but not put in a class.

  Args:
    lines: An iterable of lines from the glyph list.
    char_table: The table from char_data.load_char_data.
    selector: A FontSelector.
    glyphsapp: If true, use the 'glyphsname' column.
    diag: A Diagnostics to report to.

  Returns:
    A JoinClassIndex.
  """
  name_field = 'glyphsname' if glyphsapp else 'name'
  index = join_index.JoinClassIndex()
  fields = []
  for line in lines:
    line = line.rstrip()
    if not line or _comment_re.match(line):
      continue
    if _header_re.match(line):
      fields = line.lower().split('\t')
      continue

    record = dict(zip(fields, line.split('\t')))
    if not selector.matches(record.get('fonts')):
      continue
    name = record.get(name_field, '')
    if name in index.seen:
      continue
    parts = split_name(name)
    if not parts:
      continue
    index.seen.add(name)

    usv = tool_utils.parse_usv(record.get('usv'))
    if usv <= 0:
      continue
    basename, extension = parts
    if extension:
      diag.warn(
          '%s is encoded (U+%04X) but has extension "%s", check the '
          'construction of its joined forms by hand' % (
              name, usv, extension))
    joining = char_data.joining_type(char_table, usv)
    if not joining:
      continue
    index.add(joining, basename, extension)
  return index


def load_glyph_data(filepath, char_table, selector, glyphsapp, diag):
  with open(filepath, 'r', encoding='utf-8') as f:
    index = parse_glyph_data(f, char_table, selector, glyphsapp, diag)
  _log.info(
      'kept %d glyph names from %s, %d in joining classes',
      len(index.seen), filepath, len(index))
  return index


def glyph_data_path(explicit=None):
  return tool_utils.resolve_data_file(
      GLYPH_DATA_FILE, GLYPH_DATA_FALLBACK, explicit=explicit,
      configured=joinconfig.glyph_data())
