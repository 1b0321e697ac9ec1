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
"""Yaml preference file loader mixin."""

import enum
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

_LOG = logging.getLogger(__name__)


class MissingConfigTitle(Exception):
    """Exception for when an existing YAML file is missing config_title."""


class Stage(enum.Enum):
    DEFAULT = 0
    PROJECT_FILE = 1
    USER_PROJECT_FILE = 2
    USER_FILE = 3
    ENVIRONMENT_VAR_FILE = 4
    OUT_OF_BAND = 5


class YamlConfigLoaderMixin:
    """Loads layered YAML preference files into ``self._config``.

    For example:

    ::

       class ReferencesPrefs(YamlConfigLoaderMixin):
           def __init__(self) -> None:
               self.config_init(
                   config_section_title='api_references',
                   project_file=Path('.api_references.yaml'),
                   user_file=Path('~/.api_references.yaml'),
                   default_config={'output_format': 'json'},
                   environment_var='API_REFERENCES_CONFIG_FILE',
               )

    """

    def config_init(
        self,
        config_section_title: str,
        project_file: Optional[Path] = None,
        project_user_file: Optional[Path] = None,
        user_file: Optional[Path] = None,
        default_config: Optional[dict[str, Any]] = None,
        environment_var: Optional[str] = None,
    ) -> None:
        """Loads YAML preference files in order of precedence.

        Files are applied in this order, later files overriding earlier ones:
        1. project_file
        2. project_user_file
        3. user_file

        If ``os.environ[environment_var]`` names a file, only that file is
        applied on top of ``default_config``.

        Each file either nests its settings under a ``config_section_title``
        key or declares ``config_title: <config_section_title>`` at the top
        level.
        """
        self._config_section_title = config_section_title
        self.default_config = default_config if default_config else {}
        self.reset_config()

        for path, stage in (
            (project_file, Stage.PROJECT_FILE),
            (project_user_file, Stage.USER_PROJECT_FILE),
            (user_file, Stage.USER_FILE),
        ):
            if path is not None:
                self.load_config_file(_expand(path), stage=stage)

        if environment_var is None:
            return
        environment_config = os.environ.get(environment_var, None)
        if environment_config:
            env_file_path = Path(environment_config)
            if not env_file_path.is_file():
                raise FileNotFoundError(
                    f'Cannot load config file: {env_file_path}'
                )
            self.reset_config()
            self.load_config_file(
                env_file_path, stage=Stage.ENVIRONMENT_VAR_FILE
            )

    def _update_config(self, cfg: Optional[dict[str, Any]]) -> None:
        if cfg is None:
            return
        for key, value in cfg.items():
            if key == 'config_title':
                continue
            self._config[key] = value

    def reset_config(self) -> None:
        self._config: dict[str, Any] = {}
        self._update_config(self.default_config)

    def load_config_file(
        self,
        file_path: Path,
        stage: Stage = Stage.OUT_OF_BAND,
    ) -> None:
        """Loads a config file and applies the matching section."""
        if not file_path.is_file():
            return

        _LOG.debug('Loading %s config from %s', stage.name, file_path)
        for cfg in yaml.safe_load_all(file_path.read_text()):
            if not cfg:
                continue
            if self._config_section_title in cfg:
                self._update_config(cfg[self._config_section_title])
                continue
            if cfg.get('config_title', None) == self._config_section_title:
                self._update_config(cfg)
                continue
            raise MissingConfigTitle(
                f'\n\nThe config file "{file_path}" is missing the '
                f'expected "config_title: {self._config_section_title}" '
                'setting.'
            )


def _expand(path: Path) -> Path:
    return Path(os.path.expandvars(str(path.expanduser())))
