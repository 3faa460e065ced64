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

"""Warning counter shared by the loaders and the class writer."""

import sys


def _pluralize(count):
  return '1 warning' if count == 1 else '%d warnings' % count


class Diagnostics(object):
  """Counts warnings and reports them to out.

  When quiet is set, warnings issued before end_setup() are counted but
  not written."""

  def __init__(self, quiet=False, out=None):
    self.quiet = quiet
    self.out = out if out is not None else sys.stderr
    self.count = 0
    self.suppressed = 0

  def warn(self, message):
    self.count += 1
    if self.quiet:
      self.suppressed += 1
      return
    self.out.write('Warning: %s\n' % message)

  def end_setup(self):
    """Called after loading, before writing classes.  Notes how many
    warnings were hidden and turns silencing off."""
    if self.quiet and self.suppressed:
      self.out.write('%s suppressed during setup\n' % (
          _pluralize(self.suppressed)))
    self.quiet = False

  def report(self):
    if self.count:
      self.out.write('Found %s.\n' % _pluralize(self.count))
