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

"""Glyphs grouped by Unicode joining type."""

import collections


class JoinClassIndex(object):
  """Maps a joining type code ('D', 'R', ...) to a list of
  (basename, extension) pairs in the order they were added.

  seen holds every glyph name the loader kept, whether or not it made it
  into a joining class."""

  def __init__(self):
    self._classes = collections.OrderedDict()
    self.seen = set()

  def add(self, joining, basename, extension=''):
    self._classes.setdefault(joining, []).append((basename, extension))

  def codes(self):
    return list(self._classes.keys())

  def glyphs(self, joining):
    return list(self._classes.get(joining, []))

  def sorted_glyphs(self, joining):
    """Returns the glyphs for joining ordered by basename."""
    return sorted(self._classes.get(joining, []), key=lambda g: g[0])

  def __contains__(self, joining):
    return joining in self._classes

  def __len__(self):
    return sum(len(v) for v in self._classes.values())
