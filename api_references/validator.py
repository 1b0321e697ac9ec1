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
"""Validation logic for API reference CI projects.

The CI server refuses to load settings that break any of the rules below, but
only reports the failure after the settings are uploaded. Checking them here
surfaces the same problems locally.

* Templates and build types are referenced by ``id``, so every id must be
  populated and unique across the whole project.
* A build type may only apply templates that the project registers, and may
  apply each of them at most once.
* Parameter names must be populated.
"""

from collections.abc import Callable, Sequence
import logging

from api_references.dsl import BuildType, Template

_LOG = logging.getLogger(__name__)


class ValidationError(Exception):
    """A CI project configuration error."""


Entity = Template | BuildType


def _describe(entity: Entity) -> str:
    kind = 'Template' if isinstance(entity, Template) else 'BuildType'
    return f'{kind} `{entity.id or entity.name}`'


class Validator:
    """A class for validating CI project configurations."""

    def __init__(
        self,
        templates: Sequence[Template],
        build_types: Sequence[BuildType],
    ):
        self._templates = list(templates)
        self._build_types = list(build_types)
        self._all_entities: list[Entity] = [
            *self._templates,
            *self._build_types,
        ]
        self._entities_by_id: dict[str, Entity] = {}
        for entity in self._all_entities:
            self._entities_by_id.setdefault(entity.id, entity)
        self._template_ids = {template.id for template in self._templates}

    def validate(self) -> None:
        """Runs all checks on the loaded project.

        This runs all check_*() methods on this class, grouped by the kind of
        entity they apply to.
        """
        entity_checks: list[Callable[[Entity], None]] = []
        template_checks: list[Callable[[Template], None]] = []
        build_type_checks: list[Callable[[BuildType], None]] = []
        for attr in dir(self):
            if attr.startswith('check_entity_'):
                entity_checks.append(getattr(self, attr))
            elif attr.startswith('check_template_'):
                template_checks.append(getattr(self, attr))
            elif attr.startswith('check_build_type_'):
                build_type_checks.append(getattr(self, attr))
        for entity in self._all_entities:
            for check in entity_checks:
                check(entity)
            if isinstance(entity, Template):
                for template_check in template_checks:
                    template_check(entity)
            elif isinstance(entity, BuildType):
                for build_type_check in build_type_checks:
                    build_type_check(entity)
            else:
                raise ValidationError(f'Unknown entity type: {entity!r}')
        _LOG.debug(
            'Validated %d templates and %d build types',
            len(self._templates),
            len(self._build_types),
        )

    @staticmethod
    def check_entity_has_name(entity: Entity) -> None:
        if not entity.name:
            raise ValidationError(
                f'{_describe(entity)} has no name:\n{entity!r}'
            )

    @staticmethod
    def check_entity_has_id(entity: Entity) -> None:
        if not entity.id:
            raise ValidationError(
                f'The following configuration element has no id:\n{entity!r}'
            )

    def check_entity_has_unique_id(self, entity: Entity) -> None:
        existing = self._entities_by_id[entity.id]
        if entity is not existing:
            raise ValidationError(
                f'The id `{entity.id}` is shared by {_describe(existing)} '
                f'(`{existing.name}`) and {_describe(entity)} '
                f'(`{entity.name}`)'
            )

    @staticmethod
    def check_entity_param_names(entity: Entity) -> None:
        for param in entity.params:
            if not param.name:
                raise ValidationError(
                    f'{_describe(entity)} declares a parameter with no name '
                    f'(value {param.value!r})'
                )

    def check_build_type_templates_registered(self, build: BuildType) -> None:
        for template in build.templates:
            if template.id not in self._template_ids:
                raise ValidationError(
                    f'BuildType `{build.id}` applies unregistered template '
                    f'`{template.id}`'
                )

    @staticmethod
    def check_build_type_templates_unique(build: BuildType) -> None:
        seen: set[str] = set()
        for template_id in build.template_ids():
            if template_id in seen:
                raise ValidationError(
                    f'BuildType `{build.id}` applies template '
                    f'`{template_id}` more than once'
                )
            seen.add(template_id)
