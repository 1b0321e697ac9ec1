# Copyright 2026 The Pigweed Authors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.
"""Tests for the logging setup."""

import logging
from pathlib import Path
import tempfile
import unittest

from api_references import log

_LEVELS = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)


class InstallTest(unittest.TestCase):
    """Tests for log.install()."""

    def setUp(self):
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._root_level = root.level
        self._level_names = {
            level: logging.getLevelName(level) for level in _LEVELS
        }
        self._dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            if handler not in self._handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(self._root_level)
        for level, name in self._level_names.items():
            logging.addLevelName(level, name)
        # pylint: disable-next=protected-access
        log._STDERR_HANDLER.setLevel(logging.NOTSET)
        self._dir.cleanup()

    def test_short_level_names(self):
        log.install(use_color=False)
        self.assertEqual(logging.getLevelName(logging.ERROR), 'ERR')
        self.assertEqual(logging.getLevelName(logging.WARNING), 'WRN')
        self.assertEqual(logging.getLevelName(logging.INFO), 'INF')
        self.assertEqual(logging.getLevelName(logging.DEBUG), 'DBG')

    def test_color_level_names(self):
        log.install(use_color=True)
        name = logging.getLevelName(logging.ERROR)
        self.assertTrue(name.startswith('\033['))
        self.assertTrue(name.endswith('\033[0m'))
        self.assertIn('ERR', name)

    def test_log_file(self):
        path = Path(self._dir.name, 'references.log')
        log.install(use_color=False, hide_timestamp=True, log_file=path)
        logging.getLogger('api_references.log_test').info('hello file')
        for handler in logging.getLogger().handlers:
            handler.flush()
        self.assertIn('INF hello file', path.read_text())
        self.assertGreater(
            log._STDERR_HANDLER.level,  # pylint: disable=protected-access
            logging.CRITICAL,
        )


if __name__ == '__main__':
    unittest.main()
