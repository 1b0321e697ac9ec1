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
"""Tests for rendering project settings."""

import json
from pathlib import Path
import tempfile
import unittest

import yaml

from api_references import settings
from api_references.project import REFERENCES_PROJECT


class SettingsTest(unittest.TestCase):
    """Tests for the settings renderers."""

    def _kotlinx_io(self, data):
        (build,) = data['build_types']
        return build

    def test_declared_params_only(self):
        build = self._kotlinx_io(settings.project_to_dict(REFERENCES_PROJECT))
        self.assertEqual(build['name'], 'kotlinx-io templates')
        self.assertEqual(build['templates'], ['PrepareDokkaTemplate'])
        self.assertEqual(
            build['params'],
            {
                'env.ALGOLIA_INDEX_NAME': 'kotlinx-io',
                'env.API_REFERENCE_NAME': 'kotlinx-io',
            },
        )
        self.assertEqual(build['steps'], [])
        self.assertEqual(build['artifact_rules'], '')

    def test_resolved(self):
        data = settings.project_to_dict(REFERENCES_PROJECT, resolve=True)
        build = self._kotlinx_io(data)
        self.assertEqual(len(build['steps']), 1)
        self.assertEqual(build['steps'][0]['docker_image'], 'node:18-alpine')
        self.assertTrue(build['artifact_rules'])

    def test_json_and_yaml_agree(self):
        from_json = json.loads(settings.dump_json(REFERENCES_PROJECT))
        from_yaml = yaml.safe_load(settings.dump_yaml(REFERENCES_PROJECT))
        self.assertEqual(from_json, from_yaml)
        self.assertEqual(from_json['id'], 'References')

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            settings.render(REFERENCES_PROJECT, 'xml')

    def test_write_settings(self):
        with tempfile.TemporaryDirectory() as folder:
            path = Path(folder, 'out', 'settings.yaml')
            written = settings.write_settings(
                REFERENCES_PROJECT, path, fmt='yaml'
            )
            self.assertEqual(written, path)
            data = yaml.safe_load(path.read_text())
            self.assertEqual(data['name'], 'API references')


if __name__ == '__main__':
    unittest.main()
