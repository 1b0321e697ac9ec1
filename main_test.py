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
"""Tests for the api_references command line tool."""

import contextlib
import io
import json
import os
from pathlib import Path
import tempfile
import unittest
from unittest import mock

import yaml

from api_references.__main__ import main
from api_references.dsl import BuildType, Template
from api_references.prefs import ReferencesPrefs
from api_references.project import Project


class MainTest(unittest.TestCase):
    """Runs the command line entry point against the real project."""

    def setUp(self):
        self._dir = tempfile.TemporaryDirectory()
        self.root = Path(self._dir.name)
        self._env = mock.patch.dict(os.environ, {}, clear=True)
        self._env.start()
        self.prefs = ReferencesPrefs(self.root, load_user_file=False)

    def tearDown(self):
        self._env.stop()
        self._dir.cleanup()

    def run_main(self, *argv: str, **kwargs) -> tuple[int, str]:
        kwargs.setdefault('prefs', self.prefs)
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            result = main(['--no-color', *argv], **kwargs)
        return result, out.getvalue()

    def test_list(self):
        result, out = self.run_main('list')
        self.assertEqual(result, 0)
        self.assertEqual(
            out, 'KotlinxIOPrepareDokkaTemplates\tkotlinx-io templates\n'
        )

    def test_show(self):
        result, out = self.run_main('show', 'kotlinx-io templates')
        self.assertEqual(result, 0)
        self.assertIn('env.ALGOLIA_INDEX_NAME = kotlinx-io', out)
        self.assertIn('env.API_REFERENCE_NAME = kotlinx-io', out)
        self.assertIn('templates: PrepareDokkaTemplate', out)

    def test_show_unknown(self):
        with self.assertLogs('api_references', level='ERROR'):
            result, _ = self.run_main('show', 'missing')
        self.assertEqual(result, 1)

    def test_validate(self):
        result, _ = self.run_main('validate')
        self.assertEqual(result, 0)

    def test_validate_failure(self):
        broken = Project(
            id='Broken',
            name='Broken',
            build_types=[
                BuildType(
                    name='docs', templates=[Template(id='T', name='T')]
                )
            ],
        )
        with self.assertLogs('api_references', level='ERROR'):
            result, _ = self.run_main('validate', project=broken)
        self.assertEqual(result, 1)

    def test_export_json(self):
        result, out = self.run_main('export')
        self.assertEqual(result, 0)
        self.assertEqual(json.loads(out)['id'], 'References')

    def test_export_yaml_resolved(self):
        result, out = self.run_main('export', '--format', 'yaml', '--resolve')
        self.assertEqual(result, 0)
        (build,) = yaml.safe_load(out)['build_types']
        self.assertEqual(len(build['steps']), 1)

    def test_export_format_from_config_file(self):
        config = self.root / 'extra.yaml'
        config.write_text(
            yaml.safe_dump({'api_references': {'output_format': 'yaml'}})
        )
        output = self.root / 'settings' / 'project.yaml'
        result, out = self.run_main(
            '--config-file', str(config), 'export', '--output', str(output)
        )
        self.assertEqual(result, 0)
        self.assertEqual(out, '')
        self.assertEqual(yaml.safe_load(output.read_text())['id'], 'References')

    def _load_extra_prefs(self, values) -> None:
        config = self.root / 'extra.yaml'
        config.write_text(yaml.safe_dump({'api_references': values}))
        self.prefs.load_config_file(config)

    def test_export_bad_format_pref(self):
        self._load_extra_prefs({'output_format': 'xml'})
        with self.assertLogs('api_references', level='ERROR') as logs:
            result, out = self.run_main('export')
        self.assertEqual(result, 1)
        self.assertEqual(out, '')
        self.assertIn('output_format', logs.output[0])

    def test_export_bad_resolve_pref(self):
        self._load_extra_prefs({'resolve_params': 'false'})
        with self.assertLogs('api_references', level='ERROR'):
            result, _ = self.run_main('export')
        self.assertEqual(result, 1)

    def test_bad_log_level_pref(self):
        self._load_extra_prefs({'log_level': 'basic_format'})
        with self.assertLogs('api_references', level='ERROR'):
            result, _ = self.run_main('list')
        self.assertEqual(result, 1)

    def test_loglevel_flag_rejects_unknown_level(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_main('--loglevel', 'basic_format', 'list')

    def test_loglevel_flag_is_case_insensitive(self):
        result, _ = self.run_main('--loglevel', 'debug', 'list')
        self.assertEqual(result, 0)


if __name__ == '__main__':
    unittest.main()
