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
"""The API reference CI project and its registered build configurations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from api_references.builds.kotlinx_io import KOTLINX_IO_PREPARE_DOKKA_TEMPLATES
from api_references.dsl import BuildType, Template
from api_references.templates import PREPARE_DOKKA_TEMPLATE
from api_references.validator import Validator

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Project:
    """A CI project: the templates and build types registered together."""

    id: str
    name: str
    description: str = ''
    templates: Sequence[Template] = ()
    build_types: Sequence[BuildType] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'templates', tuple(self.templates))
        object.__setattr__(self, 'build_types', tuple(self.build_types))

    def template(self, template_id: str) -> Template:
        for template in self.templates:
            if template.id == template_id:
                return template
        raise KeyError(f'No template `{template_id}` in project `{self.id}`')

    def build_type(self, name_or_id: str) -> BuildType:
        """Looks up a build type by id, falling back to its display name."""
        for build in self.build_types:
            if build.id == name_or_id:
                return build
        for build in self.build_types:
            if build.name == name_or_id:
                return build
        raise KeyError(
            f'No build type `{name_or_id}` in project `{self.id}`'
        )

    def validate(self) -> None:
        _LOG.debug('Validating project %s', self.id)
        Validator(self.templates, self.build_types).validate()


REFERENCES_PROJECT = Project(
    id='References',
    name='API references',
    description='Builds API reference documentation for libraries',
    templates=(PREPARE_DOKKA_TEMPLATE,),
    build_types=(KOTLINX_IO_PREPARE_DOKKA_TEMPLATES,),
)
