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
"""Build configuration dataclasses for the API reference CI project."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
import re

_NON_ID_CHARS = re.compile(r'[^A-Za-z0-9]+')


class DuplicateParameterError(Exception):
    """Raised when a parameter name is declared twice in one collection."""


def make_id(text: str) -> str:
    """Derives a build configuration identifier from a display name.

    Runs of characters outside ``[A-Za-z0-9]`` collapse into a single ``_``.
    For example, ``'kotlinx-io templates'`` becomes ``'kotlinx_io_templates'``.
    """
    ident = _NON_ID_CHARS.sub('_', text).strip('_')
    if not ident:
        raise ValueError(f'Cannot derive an identifier from {text!r}')
    if ident[0].isdigit():
        ident = '_' + ident
    return ident


@dataclass(frozen=True)
class Param:
    """A named string value passed to a build's runtime environment."""

    name: str
    value: str


ParamLike = Param | tuple[str, str]


class Params:
    """An ordered, read-only set of parameters with unique names.

    Example usage:

    .. code-block:: python

        params = Params(
            ('env.ALGOLIA_INDEX_NAME', 'kotlinx-io'),
            ('env.API_REFERENCE_NAME', 'kotlinx-io'),
        )
        params.get('env.ALGOLIA_INDEX_NAME')  # 'kotlinx-io'
    """

    __slots__ = ('_params',)

    def __init__(self, *params: ParamLike) -> None:
        by_name: dict[str, Param] = {}
        for item in params:
            param = item if isinstance(item, Param) else Param(*item)
            if param.name in by_name:
                raise DuplicateParameterError(
                    f'Parameter `{param.name}` is declared more than once '
                    f'(values {by_name[param.name].value!r} and '
                    f'{param.value!r})'
                )
            by_name[param.name] = param
        self._params: tuple[Param, ...] = tuple(by_name.values())

    @classmethod
    def from_dict(cls, values: dict[str, str]) -> Params:
        return cls(*values.items())

    def get(self, name: str, default: str | None = None) -> str | None:
        for param in self._params:
            if param.name == name:
                return param.value
        return default

    def names(self) -> list[str]:
        return [param.name for param in self._params]

    def as_dict(self) -> dict[str, str]:
        return {param.name: param.value for param in self._params}

    def __iter__(self) -> Iterator[Param]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: object) -> bool:
        return any(param.name == name for param in self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Params):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)

    def __repr__(self) -> str:
        args = ', '.join(f'({p.name!r}, {p.value!r})' for p in self._params)
        return f'Params({args})'


@dataclass(frozen=True)
class ScriptStep:
    """A single shell script build step.

    Args:
        name: Display name of the step.
        script: Script body executed by the agent.
        docker_image: Optional container image the script runs in.
        working_dir: Optional directory, relative to the checkout root.
    """

    name: str
    script: str
    docker_image: str | None = None
    working_dir: str | None = None


@dataclass(frozen=True)
class Template:
    """A reusable set of default steps and parameters."""

    id: str
    name: str
    description: str = ''
    steps: tuple[ScriptStep, ...] = ()
    params: Params = field(default_factory=Params)
    artifact_rules: str = ''

    def __post_init__(self) -> None:
        object.__setattr__(self, 'steps', tuple(self.steps))
        object.__setattr__(self, 'params', _as_params(self.params))


def _as_params(
    params: Params | Iterable[ParamLike] | dict[str, str]
) -> Params:
    if isinstance(params, Params):
        return params
    if isinstance(params, dict):
        return Params.from_dict(params)
    return Params(*params)


@dataclass(frozen=True)
class BuildType:
    """A named build configuration registered with the CI server.

    Example usage:

    .. code-block:: python

        build = BuildType(
            name='kotlinx-io templates',
            description='Build Dokka Templates for Kotlinx IO',
            templates=[PREPARE_DOKKA_TEMPLATE],
            params=Params(('env.ALGOLIA_INDEX_NAME', 'kotlinx-io')),
        )

    Template parameters are applied first, in the order the templates are
    listed, then the build type's own ``params`` are laid on top. A name that
    appears more than once keeps the last value written.

    Args:
        name: Display name of the build configuration.
        description: Free-form description shown in the CI UI.
        templates: Templates applied to this configuration, in order.
        params: Parameters owned by this configuration.
        id: Identifier of the configuration. Derived from ``name`` with
            ``make_id()`` when omitted.
        steps: Steps run after all template steps.
        artifact_rules: Artifact publishing rules. When empty the rules of
            the last template that declares some are used.
    """

    name: str
    description: str = ''
    templates: tuple[Template, ...] = ()
    params: Params = field(default_factory=Params)
    id: str = ''
    steps: tuple[ScriptStep, ...] = ()
    artifact_rules: str = ''

    def __post_init__(self) -> None:
        # Frozen dataclasses only allow assignment through object.__setattr__.
        object.__setattr__(self, 'templates', tuple(self.templates))
        object.__setattr__(self, 'steps', tuple(self.steps))
        object.__setattr__(self, 'params', _as_params(self.params))
        if not self.id:
            object.__setattr__(self, 'id', make_id(self.name))

    def template_ids(self) -> list[str]:
        return [template.id for template in self.templates]

    def resolved_params(self) -> dict[str, str]:
        """Returns the effective parameters of this build configuration."""
        resolved: dict[str, str] = {}
        for template in self.templates:
            resolved.update(template.params.as_dict())
        resolved.update(self.params.as_dict())
        return resolved

    def resolved_steps(self) -> list[ScriptStep]:
        steps: list[ScriptStep] = []
        for template in self.templates:
            steps.extend(template.steps)
        steps.extend(self.steps)
        return steps

    def resolved_artifact_rules(self) -> str:
        if self.artifact_rules:
            return self.artifact_rules
        for template in reversed(self.templates):
            if template.artifact_rules:
                return template.artifact_rules
        return ''
