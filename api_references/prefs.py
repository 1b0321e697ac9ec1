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
"""Preferences for the api_references command line tool."""

from pathlib import Path
from typing import Any, Optional

from api_references.settings import FORMATS
from api_references.yaml_config_loader_mixin import YamlConfigLoaderMixin

CONFIG_SECTION_TITLE = 'api_references'
PROJECT_FILE = Path('.api_references.yaml')
PROJECT_USER_FILE = Path('.api_references.user.yaml')
USER_FILE = Path('~/.api_references.yaml')
ENVIRONMENT_VAR = 'API_REFERENCES_CONFIG_FILE'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

_DEFAULT_CONFIG: dict[str, Any] = {
    'output_format': 'json',
    'resolve_params': False,
    'log_level': 'INFO',
}


class InvalidPreference(ValueError):
    """A preference file holds a value of the wrong type or range."""


class ReferencesPrefs(YamlConfigLoaderMixin):
    """Preferences loaded from project and user YAML files."""

    def __init__(
        self,
        project_root: Optional[Path] = None,
        load_user_file: bool = True,
    ) -> None:
        root = project_root if project_root is not None else Path.cwd()
        self.config_init(
            config_section_title=CONFIG_SECTION_TITLE,
            project_file=root / PROJECT_FILE,
            project_user_file=root / PROJECT_USER_FILE,
            user_file=USER_FILE if load_user_file else None,
            default_config=_DEFAULT_CONFIG,
            environment_var=ENVIRONMENT_VAR,
        )

    @property
    def output_format(self) -> str:
        value = self._config.get('output_format', 'json')
        if value not in FORMATS:
            raise InvalidPreference(
                f'Preference output_format is {value!r}; expected one of '
                f'{", ".join(FORMATS)}'
            )
        return value

    @property
    def resolve_params(self) -> bool:
        value = self._config.get('resolve_params', False)
        if not isinstance(value, bool):
            raise InvalidPreference(
                f'Preference resolve_params is {value!r}; expected true or '
                'false'
            )
        return value

    @property
    def log_level(self) -> str:
        value = str(self._config.get('log_level', 'INFO')).upper()
        if value not in LOG_LEVELS:
            raise InvalidPreference(
                f'Preference log_level is {value!r}; expected one of '
                f'{", ".join(LOG_LEVELS)}'
            )
        return value
