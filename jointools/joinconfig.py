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

"""Read config file for the join class tools.

This looks for a file named '.joinconfig' in the user's home directory,
or for the file named by the JOINCONFIG environment variable.  It should
contain lines consisting of a name, '=' and a path.  The expected names
are 'char_data' and 'glyph_data', the paths of the Unicode property
extract and of the font's glyph list.  Either can be left out, in which
case the tools look in the current directory and then in the data
directory shipped with the package.
"""

import os
from os import path

DEFAULT_CONFIG_FILE = '~/.joinconfig'

values = {}
_loaded = False


def config_file():
  return path.expanduser(os.environ.get('JOINCONFIG', DEFAULT_CONFIG_FILE))


def _setup():
  """The config consists of lines of the form <name> = <value>.
  values will hold a mapping from the <name> to value.
  Blank lines and lines starting with '#' are ignored."""
  global _loaded

  if _loaded:
    return
  _loaded = True
  configfile = config_file()
  if not path.exists(configfile):
    return
  with open(configfile, 'r') as f:
    for line in f:
      line = line.strip()
      if not line or line.startswith('#'):
        continue
      if '=' not in line:
        raise ValueError('%s: expected <name> = <value> but got "%s"' % (
            configfile, line))
      k, v = line.split('=', 1)
      values[k.strip()] = v.strip()


def reload():
  """Forget the current values and read the config file again."""
  global _loaded
  values.clear()
  _loaded = False
  _setup()


def char_data(default=''):
  """Path of the Unicode property extract."""
  _setup()
  return values.get('char_data', default)


def glyph_data(default=''):
  """Path of the glyph list"""
  _setup()
  return values.get('glyph_data', default)
