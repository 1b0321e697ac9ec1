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
"""Renders a CI project into plain settings data, JSON, or YAML."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from api_references.dsl import BuildType, ScriptStep, Template
from api_references.project import Project

_LOG = logging.getLogger(__name__)

FORMATS = ('json', 'yaml')


def _step_to_dict(step: ScriptStep) -> dict[str, Any]:
    result: dict[str, Any] = {'name': step.name, 'script': step.script}
    if step.docker_image:
        result['docker_image'] = step.docker_image
    if step.working_dir:
        result['working_dir'] = step.working_dir
    return result


def _template_to_dict(template: Template) -> dict[str, Any]:
    return {
        'id': template.id,
        'name': template.name,
        'description': template.description,
        'params': template.params.as_dict(),
        'steps': [_step_to_dict(step) for step in template.steps],
        'artifact_rules': template.artifact_rules,
    }


def _build_type_to_dict(build: BuildType, resolve: bool) -> dict[str, Any]:
    if resolve:
        params = build.resolved_params()
        steps = build.resolved_steps()
        artifact_rules = build.resolved_artifact_rules()
    else:
        params = build.params.as_dict()
        steps = list(build.steps)
        artifact_rules = build.artifact_rules
    return {
        'id': build.id,
        'name': build.name,
        'description': build.description,
        'templates': build.template_ids(),
        'params': params,
        'steps': [_step_to_dict(step) for step in steps],
        'artifact_rules': artifact_rules,
    }


def project_to_dict(project: Project, resolve: bool = False) -> dict[str, Any]:
    """Converts a project to nested plain data.

    Args:
        project: The project to convert.
        resolve: If True, each build type carries its effective parameters,
            steps, and artifact rules after templates are applied. Otherwise
            only what the build type declares itself is included.
    """
    return {
        'id': project.id,
        'name': project.name,
        'description': project.description,
        'templates': [_template_to_dict(t) for t in project.templates],
        'build_types': [
            _build_type_to_dict(build, resolve) for build in project.build_types
        ],
    }


def dump_json(project: Project, resolve: bool = False) -> str:
    return json.dumps(project_to_dict(project, resolve), indent=2) + '\n'


def dump_yaml(project: Project, resolve: bool = False) -> str:
    return yaml.safe_dump(
        project_to_dict(project, resolve),
        sort_keys=False,
        default_flow_style=False,
    )


def render(project: Project, fmt: str = 'json', resolve: bool = False) -> str:
    if fmt == 'json':
        return dump_json(project, resolve)
    if fmt == 'yaml':
        return dump_yaml(project, resolve)
    raise ValueError(
        f'Unknown settings format {fmt!r}; expected one of {", ".join(FORMATS)}'
    )


def write_settings(
    project: Project,
    path: Path,
    fmt: str = 'json',
    resolve: bool = False,
) -> Path:
    """Writes the rendered settings to a file and returns its path."""
    text = render(project, fmt, resolve)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    _LOG.info('Wrote %s settings for %s to %s', fmt, project.id, path)
    return path
