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

"""Unicode character properties from a semicolon-separated extract.

The extract is maintained separately from these tools, so the set of
fields is not fixed here.  A line starting with '#' names the fields of
the lines that follow, for example:

  #USV;General;Bidi;Joining;Group;Mirrored;Shaping;Name
  0644;Lo;AL;D;;;D;ARABIC LETTER LAM

Each character becomes a dict from the lowercased field name to its
value, and the table maps the integer code point to that dict.
"""

import logging

from jointools import joinconfig
from jointools import tool_utils

_log = logging.getLogger(__name__)

CHAR_DATA_FILE = 'ucd_props.txt'
CHAR_DATA_FALLBACK = 'ucd_props.txt'


def _parse_header(line):
  return [name.strip() for name in line[1:].lower().split(';')]


def parse_char_data(lines, source='<input>'):
  """Reads character property records.

  Args:
    lines: An iterable of lines from the extract.
    source: Name of the input, used in error messages.

  Returns:
    A dict from code point to a dict of field values, for example:
    {0x644: {'usv': '0644', 'general': 'Lo', 'bidi': 'AL', 'joining': 'D'}}

  Raises:
    ValueError: A data line has no usv value, or it is not hex.
  """
  table = {}
  fields = []
  for n, line in enumerate(lines, 1):
    line = line.rstrip()
    if not line:
      continue
    if line.startswith('#'):
      fields = _parse_header(line)
      continue

    values = [v.strip() for v in line.split(';')]
    record = dict(zip(fields, values))
    usv = record.get('usv')
    if not usv:
      raise ValueError('%s:%d: no usv in "%s"' % (source, n, line))
    try:
      code = int(usv, 16)
    except ValueError:
      raise ValueError('%s:%d: bad usv "%s"' % (source, n, usv))
    if code < 0:
      raise ValueError('%s:%d: bad usv "%s"' % (source, n, usv))
    # last one wins
    table[code] = record
  return table


def load_char_data(filepath):
  """Returns the property table read from filepath."""
  with open(filepath, 'r', encoding='utf-8') as f:
    table = parse_char_data(f, source=filepath)
  _log.info('read %d characters from %s', len(table), filepath)
  return table


def char_data_path(explicit=None):
  return tool_utils.resolve_data_file(
      CHAR_DATA_FILE, CHAR_DATA_FALLBACK, explicit=explicit,
      configured=joinconfig.char_data())


def joining_type(table, usv):
  """Returns the joining value for usv, or None if there is none."""
  try:
    return table[usv].get('joining') or None
  except KeyError:
    return None
