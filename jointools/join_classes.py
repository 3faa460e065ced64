#!/usr/bin/env python
#
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

"""Generate joining glyph classes for an Arabic font.

Reads the Unicode property extract and the font's glyph list, and writes
a <class> element for each joining group and positional form, e.g.

  <class name='DualLinkFina'>
      behFin tehFin
  </class>

The output is not a complete xml document, it is meant to be pasted into
the font's rules source by another tool.
"""

import argparse
import io
import logging
import sys

from fontTools import ttLib

from jointools import char_data
from jointools import diagnostics
from jointools import font_glyphs
from jointools import glyph_data
from jointools import tool_utils

_log = logging.getLogger(__name__)

# Only these groups are written, keyed in the index by their first letter.
JOINING_GROUPS = ('Dual', 'Right')
FORMS = ('Isol', 'Fina', 'Medi', 'Init')
# right-joining characters have no medial or initial forms
_SKIPPED_FORMS = {'Right': ('Medi', 'Init')}

GLYPHS_PER_LINE = 5
INDENT = '    '


def form_suffix(form, glyphsapp):
  if form == 'Isol':
    return ''
  if glyphsapp:
    return '.' + form.lower()
  return form[:3]


def glyph_name(basename, extension, form, glyphsapp):
  """GlyphsApp names keep the extension before the form suffix, other
  names put the form code right after the basename."""
  suffix = form_suffix(form, glyphsapp)
  if glyphsapp:
    return basename + extension + suffix
  return basename + suffix + extension


def class_names(index, glyphsapp):
  """Yields (class name, glyph names) in output order."""
  for group in JOINING_GROUPS:
    glyphs = index.sorted_glyphs(group[0])
    for form in FORMS:
      if form in _SKIPPED_FORMS.get(group, ()):
        continue
      yield ('%sLink%s' % (group, form),
             [glyph_name(base, ext, form, glyphsapp) for base, ext in glyphs])


def write_class(out, class_name, glyphs):
  out.write("<class name='%s'>" % class_name)
  for i in range(0, len(glyphs), GLYPHS_PER_LINE):
    out.write('\n' + INDENT + ' '.join(glyphs[i:i + GLYPHS_PER_LINE]))
  out.write('\n</class>\n\n')


def write_classes(index, glyphsapp, out=None):
  """Writes all the classes to out (default stdout).  Returns the names of
  the glyphs written."""
  if out is None:
    out = sys.stdout
  written = []
  for class_name, glyphs in class_names(index, glyphsapp):
    write_class(out, class_name, glyphs)
    written.extend(glyphs)
  return written


def check_font_glyphs(names, font, diag):
  """Warns about each of names that is not a glyph in font."""
  for name in font_glyphs.missing_glyphs(names, font):
    diag.warn('%s is not in %s' % (name, font))


def make_join_classes(
    char_path, glyph_path, family=None, glyphsapp=False, quiet_setup=False,
    out=None, font=None, err=None):
  """Runs the whole pipeline.  Returns the Diagnostics used."""
  diag = diagnostics.Diagnostics(quiet=quiet_setup, out=err)
  selector = glyph_data.FontSelector(family)

  char_table = char_data.load_char_data(char_path)
  index = glyph_data.load_glyph_data(
      glyph_path, char_table, selector, glyphsapp, diag)
  diag.end_setup()

  written = write_classes(index, glyphsapp, out)
  if font:
    check_font_glyphs(written, font, diag)
  diag.report()
  return diag


def _family_arg(value):
  try:
    glyph_data.resolve_family(value)
  except ValueError as e:
    raise argparse.ArgumentTypeError(str(e))
  return value


def main(argv=None):
  parser = argparse.ArgumentParser(
      description='Write joining glyph classes for an Arabic font.')
  parser.add_argument(
      '-f', '--family', help='font family letter or name (%s), default '
      'all glyphs' % ', '.join(
          '%s=%s' % item for item in glyph_data.FAMILIES.items()),
      metavar='family', type=_family_arg)
  parser.add_argument(
      '-g', '--glyphsapp', help='use GlyphsApp glyph names',
      action='store_true')
  parser.add_argument(
      '-q', '--quiet_setup', help='don\'t show warnings while reading data',
      action='store_true')
  parser.add_argument(
      '--char_data', help='unicode property extract (default %s)' %
      char_data.CHAR_DATA_FILE, metavar='fname')
  parser.add_argument(
      '--glyph_data', help='glyph list (default %s)' %
      glyph_data.GLYPH_DATA_FILE, metavar='fname')
  parser.add_argument(
      '-o', '--outfile', help='write to output file, otherwise to stdout',
      metavar='fname')
  parser.add_argument(
      '--font', help='warn about class glyphs missing from this font',
      metavar='font')
  parser.add_argument(
      '-l', '--loglevel', help='log level name or value', default='warning',
      metavar='level')
  args = parser.parse_args(argv)

  try:
    tool_utils.setup_logging(args.loglevel)
    char_path = char_data.char_data_path(args.char_data)
    glyph_path = glyph_data.glyph_data_path(args.glyph_data)
    if args.font:
      tool_utils.check_file_exists(args.font)
    # the outfile is only replaced once everything has loaded
    out = io.StringIO() if args.outfile else sys.stdout
    make_join_classes(
        char_path, glyph_path, args.family, args.glyphsapp,
        args.quiet_setup, out, args.font)
    if args.outfile:
      _log.info('writing %s', args.outfile)
      with open(args.outfile, 'w', encoding='utf-8') as f:
        f.write(out.getvalue())
  except (IOError, ValueError, ttLib.TTLibError) as e:
    sys.stderr.write('ERROR: %s\n' % e)
    sys.exit(1)


if __name__ == '__main__':
  main()
