# Copyright 2015 Google Inc. All rights reserved.
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

"""Some common utilities for tools to use."""

import logging
import os
import os.path as path

_log = logging.getLogger(__name__)

DATA_DIR = path.join(path.abspath(path.dirname(__file__)), 'data')


def check_file_exists(filepath):
  if not os.path.isfile(filepath):
    raise ValueError('%s does not exist or is not a file' % filepath)


def resolve_data_file(filename, fallback, explicit=None, configured=None):
  """Return the path of a data file.

  If explicit is given it is the only candidate and must exist.  Otherwise
  try filename in the current directory, then the configured path from
  .joinconfig, then fallback (relative to the package data directory).
  Raises ValueError naming the file if none exists."""

  if explicit:
    check_file_exists(explicit)
    return explicit

  candidates = [path.join(os.getcwd(), filename)]
  if configured:
    candidates.append(path.expanduser(configured))
  candidates.append(path.join(DATA_DIR, fallback))

  for candidate in candidates:
    if path.isfile(candidate):
      _log.debug('using %s for %s', candidate, filename)
      return candidate
    _log.debug('no %s at %s', filename, candidate)
  raise ValueError('cannot find %s, looked in:\n  %s' % (
      filename, '\n  '.join(candidates)))


def parse_usv(text):
  """Return the int value of hex text, or 0 if text is empty or not hex."""
  text = text.strip() if text else ''
  if not text:
    return 0
  try:
    return int(text, 16)
  except ValueError:
    return 0


def setup_logging(loglevel, quiet_ttx=True):
  """Set up logging to stream to stderr.

  The loglevel is a logging level name or a level value (int or string).

  ttx/fontTools uses 'info' to report when it is reading/writing tables,
  but when we want 'info' in our own tools we usually don't want this detail.
  When quiet_ttx is true, set up logging to treat 'info' logs from
  fontTools misc.xmlReader and ttLib as though they were at level 19."""

  try:
    loglevel = int(loglevel)
  except ValueError:
    loglevel = getattr(logging, loglevel.upper(), loglevel)
  if not isinstance(loglevel, int):
    raise ValueError(
        'Could not set log level "%s", should be one of debug, info, '
        'warning, error, critical, or a numeric value' % loglevel)
  logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s')

  if quiet_ttx and loglevel == logging.INFO:
    for logger_name in ['fontTools.misc.xmlReader', 'fontTools.ttLib']:
      logger = logging.getLogger(logger_name)
      logger.setLevel(loglevel + 1)
