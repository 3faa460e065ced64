# Copyright 2014 Google Inc. All rights reserved.
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

"""Routines for glyph name coverage of fonts."""

import argparse

from fontTools import ttLib


def glyph_set(font):
  """Returns the glyph names of a font.

  Args:
    font: The input font's file name, or a TTFont.

  Returns:
    A frozenset of the glyph names in the font.
  """
  if type(font) is str:
    with ttLib.TTFont(font, lazy=True) as ttfont:
      return frozenset(ttfont.getGlyphOrder())
  return frozenset(font.getGlyphOrder())


def missing_glyphs(names, font):
  """Returns the sorted list of names that are not glyphs in font."""
  glyphs = font if isinstance(font, (set, frozenset)) else glyph_set(font)
  return sorted(set(names) - glyphs)


def main():
  """Lists the glyph names of the fonts given on the command line."""
  parser = argparse.ArgumentParser()
  parser.add_argument('fonts', help='font files', metavar='font', nargs='+')
  args = parser.parse_args()
  for font in args.fonts:
    print('%s:' % font)
    for name in sorted(glyph_set(font)):
      print('  %s' % name)


if __name__ == '__main__':
  main()
